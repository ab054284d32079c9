# Base classes for calculator abstract syntax tree, tuple based.
#
# ('#', 'num')                          - number literal kept as source text
# ('@', 'var')                          - identifier, 'x', 'x1', 'π', 'pi', ... ('τ', 'φ' only in trees built directly)
# ('-uop', 'op', expr)                  - unary '+' or '-' applied to expr
# ('-bop', 'op', lhs, rhs)              - binary arithmetic '+', '-', '*', '/' or '^'
# ('<>', 'rel', lhs, rhs)               - comparison of lhs to rhs, rel is one of '<', '>', '<=', '>=', '=', '!='
# ('=', lhs, rhs)                       - assignment of rhs to identifier lhs
# ('-func', 'name', (a1, a2, ...))      - command call, name keeps leading backslash: '\\frac', '\\sin', ...
# ('[', (expr1, expr2, ...))            - array
# ('-mat', ((e11, e12, ...), ...))      - matrix, rows are not checked for equal length
# ('(', expr)                           - explicit parentheses typed by the user

class AST (tuple):
	op      = None

	CONSTS  = set () # filled in after all classes defined

	_OP2CLS = {}
	_CLS2OP = {}

	def __new__ (cls, *args, **kw):
		op       = AST._CLS2OP.get (cls)
		cls_args = tuple (AST (*arg) if arg.__class__ is tuple else arg for arg in args)

		if op:
			args = (op,) + cls_args

		elif args:
			args = cls_args

			try:
				cls2 = AST._OP2CLS.get (args [0])
			except TypeError: # for unhashable types
				cls2 = None

			if cls2:
				cls      = cls2
				cls_args = cls_args [1:]

		self = tuple.__new__ (cls, args)

		if self.op:
			self._init (*cls_args)

		if kw:
			self.__dict__.update (kw)

		return self

	def __getattr__ (self, name): # calculate value for nonexistent self.name by calling self._name () and store
		func                 = getattr (self, f'_{name}') if name [0] != '_' else None
		val                  = func and func ()
		self.__dict__ [name] = val

		return val

	def _len (self):
		return len (self)

	def _no_parens (self): # remove ALL explicit parentheses from entire tree, not just top level
		if self.is_paren:
			return self.paren.no_parens if self.paren is not None else None
		else:
			return AST (*tuple (a.no_parens if isinstance (a, AST) else a for a in self))

	def _free_vars (self): # set of identifier ASTs in tree which are not known constants, function names are not variables
		def _free_vars (ast, vars):
			if isinstance (ast, AST):
				if ast.is_var:
					if not ast.is_var_const:
						vars.add (ast)

				else:
					for e in ast:
						_free_vars (e, vars)

		vars = set ()

		_free_vars (self, vars)

		return vars

	@staticmethod
	def register_AST (cls):
		AST._CLS2OP [cls]    = cls.op
		AST._OP2CLS [cls.op] = cls

		setattr (AST, cls.__name__ [4:], cls)

#...............................................................................................
class AST_Num (AST):
	op, is_num = '#', True

	def _init (self, num):
		self.num = num

class AST_Var (AST):
	op, is_var = '@', True

	GREEK2CALC = {'π': 'pi', 'τ': '2*pi', 'φ': '(1+sqrt(5))/2'} # constant glyphs and what they mean to the evaluator

	def _init (self, var):
		self.var = var

	_is_var_const = lambda self: self in AST.CONSTS

class AST_UOp (AST):
	op, is_uop = '-uop', True

	def _init (self, uop, operand):
		self.uop, self.operand = uop, operand

class AST_BOp (AST):
	op, is_bop = '-bop', True

	def _init (self, bop, lhs, rhs):
		self.bop, self.lhs, self.rhs = bop, lhs, rhs

	_is_pow = lambda self: self.bop == '^'

class AST_Cmp (AST):
	op, is_cmp = '<>', True

	RELS = {'<', '>', '<=', '>=', '=', '!='}

	def _init (self, rel, lhs, rhs):
		self.rel, self.lhs, self.rhs = rel, lhs, rhs

class AST_Ass (AST):
	op, is_ass = '=', True

	def _init (self, lhs, rhs):
		self.lhs, self.rhs = lhs, rhs

class AST_Func (AST):
	op, is_func = '-func', True

	FRAC = '\\frac'

	def _init (self, func, args):
		self.func, self.args = func, args

	_is_frac = lambda self: self.func == AST_Func.FRAC
	_name    = lambda self: self.func.lstrip ('\\')

class AST_Brack (AST):
	op, is_brack = '[', True

	def _init (self, brack):
		self.brack = brack

class AST_Mat (AST):
	op, is_mat = '-mat', True

	def _init (self, mat):
		self.mat = mat

	_rows = lambda self: self.mat.len
	_cols = lambda self: self.mat [0].len if self.mat else 0

class AST_Paren (AST):
	op, is_paren = '(', True

	def _init (self, paren):
		self.paren = paren

#...............................................................................................
_AST_CLASSES = [AST_Num, AST_Var, AST_UOp, AST_BOp, AST_Cmp, AST_Ass, AST_Func, AST_Brack, AST_Mat, AST_Paren]

for _cls in _AST_CLASSES:
	AST.register_AST (_cls)

_AST_CONSTS = (('E', 'e'), ('I', 'i'), ('Pi', 'pi'), ('PiGreek', 'π'))

for _vp, _vv in _AST_CONSTS:
	_ast = AST ('@', _vv)

	AST.CONSTS.add (_ast)
	setattr (AST, _vp, _ast)

AST.Null     = AST ()
AST.MatEmpty = AST ('-mat', ())
