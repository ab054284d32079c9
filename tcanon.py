# Write out AST as flat expression text for the evaluator with only the parentheses that grouping requires.

from tast import AST

_PRECEDENCE = {'=': 1, '<': 2, '>': 2, '<=': 2, '>=': 2, '!=': 2, '+': 3, '-': 3, '*': 4, '/': 4, '^': 5}
_PREC_CONST = {'τ': 4, 'φ': 4} # constants which are written out as products or quotients

def _prec (ast): # precedence of ast as an operand, None for atoms which never need parentheses
	if ast is None:
		return None
	elif ast.is_bop:
		return _PRECEDENCE [ast.bop]
	elif ast.is_cmp:
		return 2
	elif ast.is_ass:
		return 1
	elif ast.is_var:
		return _PREC_CONST.get (ast.var)
	elif ast.is_func and ast.is_frac and ast.args.len == 2:
		return 4

	return None

def _needs_paren (ast, parent, side): # side is 'lhs' or 'rhs' of parent binary op, comparison or assignment
	prec = _prec (ast)

	if prec is None:
		return side == 'lhs' and parent.is_pow and ast is not None and ast.is_uop # (-2)^2 must not turn into -2^2

	pprec = 2 if parent.is_ass else _prec (parent) # x=(1<2) must not turn into x=1<2

	if pprec > prec:
		return True

	if pprec == prec:
		return parent.is_pow or side == 'rhs' # power is right associative, a power under a power gets them on either side

	return False

#...............................................................................................
class ast2calc: # abstract syntax tree -> evaluator text
	def __new__ (cls, ast):
		return super ().__new__ (cls)._ast2calc (ast)

	def _ast2calc (self, ast):
		if ast is None:
			return ''

		func = self._ast2calc_funcs.get (ast.op)

		if func is None:
			raise TypeError (f'cannot write out unknown AST node {ast!r}')

		return func (self, ast)

	def _ast2calc_paren (self, ast, paren):
		return f'({self._ast2calc (ast)})' if paren else self._ast2calc (ast)

	def _ast2calc_var (self, ast):
		return AST.Var.GREEK2CALC.get (ast.var, ast.var)

	def _ast2calc_uop (self, ast):
		operand = ast.operand

		return f'{ast.uop}{self._ast2calc_paren (operand, operand is not None and operand.op in {"-bop", "<>", "="})}'

	def _ast2calc_binary (self, ast, op): # binary op, comparison or assignment
		lhs = self._ast2calc_paren (ast.lhs, _needs_paren (ast.lhs, ast, 'lhs'))
		rhs = self._ast2calc_paren (ast.rhs, _needs_paren (ast.rhs, ast, 'rhs'))

		return f'{lhs}{op}{rhs}'

	def _ast2calc_func (self, ast):
		if ast.is_frac and ast.args.len == 2:
			return f'({self._ast2calc (ast.args [0])})/({self._ast2calc (ast.args [1])})'

		return f'{ast.name}({",".join (self._ast2calc (a) for a in ast.args)})'

	def _ast2calc_mat (self, ast):
		rows = ','.join (f'[{",".join (self._ast2calc (e) for e in row)}]' for row in ast.mat)

		return f'Matrix([{rows}])'

	_ast2calc_funcs = {
		'#'    : lambda self, ast: ast.num,
		'@'    : _ast2calc_var,
		'-uop' : _ast2calc_uop,
		'-bop' : lambda self, ast: self._ast2calc_binary (ast, ast.bop),
		'<>'   : lambda self, ast: self._ast2calc_binary (ast, ast.rel),
		'='    : lambda self, ast: self._ast2calc_binary (ast, '='),
		'-func': _ast2calc_func,
		'['    : lambda self, ast: f'[{",".join (self._ast2calc (e) for e in ast.brack)}]',
		'-mat' : _ast2calc_mat,
		'('    : lambda self, ast: f'({self._ast2calc (ast.paren)})',
	}

def contains_symbols (ast): # does tree reference any variable other than the constants e, pi, π and i?
	return ast is not None and bool (ast.free_vars)
