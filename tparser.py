# Builds expression tree from calculator tokens by recursive descent, nodes are nested AST tuples.

from tast import AST
import tlex

_CMP_KINDS = {'LessThan', 'GreaterThan', 'LessEqual', 'GreaterEqual', 'Equals', 'NotEqual'}
_ADD_KINDS = {'Plus', 'Minus'}
_MUL_KINDS = {'Multiply', 'Divide'}

#...............................................................................................
class Diag (str): # diagnostic message with offending token if there was one
	__slots__ = ['tok']

	def __new__ (cls, msg, tok = None):
		if tok is not None:
			msg = f'{msg} at {tok.pos}: {tok.text!r} ({tok.kind})'

		self     = str.__new__ (cls, msg)
		self.tok = tok

		return self

class Parser:
	def __init__ (self):
		self.tokens = []
		self.tokidx = 0
		self.diags  = []

	def peek (self, offset = 0):
		idx = self.tokidx + offset

		return self.tokens [idx] if idx < len (self.tokens) else None

	def peek_is (self, *kinds):
		tok = self.peek ()

		return tok is not None and tok in kinds

	def error (self, msg, tok = None):
		self.diags.append (Diag (msg, tok))

	def consume (self, kind = None): # consume current token if it is of kind, on mismatch record error and do not advance
		tok = self.peek ()

		if tok is None:
			self.error (f'unexpected end of input, expected {kind or "token"}')

			return None

		if kind is not None and tok != kind:
			self.error (f'expected {kind} but found {tok.kind}', tok)

			return None

		self.tokidx += 1

		return tok

	def parse (self, tokens): # -> (ast, []) on success or (None, [diag, ...]) on failure
		self.tokens = list (tokens)
		self.tokidx = 0
		self.diags  = []

		try:
			ast = self.parse_expression ()

		except RecursionError:
			self.error ('expression nested too deeply')

			return None, self.diags

		if self.tokidx < len (self.tokens):
			rest = self.tokens [self.tokidx:]

			self.error (f'unconsumed tokens remain after expression: {" ".join (t.text for t in rest)}', rest [0])

		return (None, self.diags) if self.diags else (ast, [])

	#...............................................................................................
	def parse_expression (self):
		return self.parse_assignment ()

	def parse_assignment (self): # '=' was already taken as a comparison, relabel to assignment if lhs is a bare identifier
		ast = self.parse_comparison ()

		if ast is not None and ast.is_cmp and ast.rel == '=' and ast.lhs is not None and ast.lhs.is_var:
			return AST ('=', ast.lhs, ast.rhs)

		return ast

	def parse_comparison (self):
		ast = self.parse_additive ()

		while self.peek_is (*_CMP_KINDS):
			rel = self.consume ().text
			ast = AST ('<>', rel, ast, self.parse_additive ())

		return ast

	def parse_additive (self):
		ast = self.parse_term ()

		while self.peek_is (*_ADD_KINDS):
			op  = self.consume ().text
			ast = AST ('-bop', op, ast, self.parse_term ())

		return ast

	def parse_term (self):
		ast = self.parse_exponent ()

		while self.peek_is (*_MUL_KINDS):
			op  = self.consume ().text
			ast = AST ('-bop', op, ast, self.parse_exponent ())

		return ast

	def parse_exponent (self): # right associative, 2^3^4 is 2^(3^4)
		ast = self.parse_primary ()

		if self.peek_is ('Power'):
			self.consume ()

			ast = AST ('-bop', '^', ast, self.parse_exponent ())

		return ast

	def parse_primary (self):
		tok = self.peek ()

		if tok is None:
			self.error ('unexpected end of input, expected expression')

			return None

		if tok == 'Number':
			self.consume ()

			return AST ('#', tok.text)

		if tok == 'Identifier':
			self.consume ()

			return AST ('@', tok.text)

		if tok == 'Command':
			return self.parse_command ()

		if tok == 'LParen':
			self.consume ()

			ast = self.parse_expression ()

			self.consume ('RParen')

			return AST ('(', ast)

		if tok == 'LBracket':
			return self.parse_array ()

		if tok == 'LBrace':
			return self.parse_matrix ()

		if tok in _ADD_KINDS: # operand of unary is taken at exponent level so -2^2 is -(2^2)
			self.consume ()

			return AST ('-uop', tok.text, self.parse_exponent ())

		self.error (f'unexpected token {tok.kind}', tok)
		self.consume ()

		return None

	def parse_brace_arg (self):
		self.consume ('LBrace')

		ast = self.parse_expression ()

		self.consume ('RBrace')

		return ast

	def parse_command (self):
		tok  = self.consume ()
		func = tok.text

		if func == AST.Func.FRAC:
			return self.parse_frac (tok)

		args = []

		if self.peek_is ('LBrace'): # \name{a}{b}...
			while self.peek_is ('LBrace'):
				args.append (self.parse_brace_arg ())

		elif self.peek_is ('LParen'): # \name(a, b, ...)
			self.consume ()

			if not self.peek_is ('RParen'):
				args.append (self.parse_expression ())

				while self.peek_is ('Comma'):
					self.consume ()
					args.append (self.parse_expression ())

			self.consume ('RParen')

		else: # \name x
			args.append (self.parse_primary ())

		return AST ('-func', func, tuple (args))

	def parse_frac (self, tok):
		if not self.peek_is ('LBrace'):
			self.error (f'{AST.Func.FRAC} is missing its numerator, expected {{expression}}', tok)

			return None

		numer = self.parse_brace_arg ()

		if not self.peek_is ('LBrace'):
			self.error (f'{AST.Func.FRAC} is missing its denominator, expected {{expression}}', tok)

			return None

		denom = self.parse_brace_arg ()

		return AST ('-func', AST.Func.FRAC, (numer, denom))

	def parse_array (self):
		self.consume ('LBracket')

		elems = []

		if self.peek_is ('RBracket'):
			self.consume ()

			return AST ('[', ())

		elems.append (self.parse_expression ())

		while self.peek_is ('Comma'):
			self.consume ()
			elems.append (self.parse_expression ())

		self.consume ('RBracket')

		return AST ('[', tuple (elems))

	def parse_matrix (self):
		self.consume ('LBrace')

		if self.peek_is ('RBrace'):
			self.consume ()

			return AST.MatEmpty

		rows = []
		row  = [self.parse_expression ()]

		while self.peek () is not None and not self.peek_is ('RBrace'):
			if self.peek_is ('Comma'):
				self.consume ()
				row.append (self.parse_expression ())

			elif self.peek_is ('Semicolon'):
				self.consume ()
				rows.append (tuple (row))

				row = [self.parse_expression ()]

			else:
				tok = self.peek ()

				self.error (f'unexpected token {tok.kind} in matrix', tok)
				self.consume ()

		rows.append (tuple (row))

		self.consume ('RBrace')

		return AST ('-mat', tuple (rows))

#...............................................................................................
def parse (tokens): # -> AST or raise SyntaxError with newline joined diagnostics, attribute 'diags' has the list
	ast, diags = Parser ().parse (tokens)

	if diags:
		exc       = SyntaxError ('\n'.join (diags))
		exc.diags = diags

		raise exc

	return ast

def parse_text (text):
	return parse (tlex.tokenize (text))
