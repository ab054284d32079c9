# Normalize user input, run tokenizer -> parser -> canonicalizer and evaluate the result with SymPy.

import re
import sympy as sp

import tcanon
import tlex
import tparser

_FRACTION     = False # keep exact results instead of decimal approximation when there are no variables
_DISPLAYSTYLE = True # prefix results with "\displaystyle"
_ROUND_DIGITS = 6 # decimal results longer than _ROUND_LEN characters are rounded to this many places
_ROUND_LEN    = 10

_SP_LOCALS    = {'e': sp.E, 'i': sp.I} # evaluator names for the constants which are not variables

_CMP2SPT      = {'=': sp.Eq, '!=': sp.Ne, '<': sp.Lt, '<=': sp.Le, '>': sp.Gt, '>=': sp.Ge}

_TEX_ALIASES  = [ # LaTeX operator and constant commands which the grammar writes differently
	('cdot', '*'),
	('times', '*'),
	('div', '/'),
	('leq', '<='),
	('le', '<='),
	('geq', '>='),
	('ge', '>='),
	('neq', '!='),
	('ne', '!='),
	('pi', 'π'),
	('tau', '(2*π)'),
	('phi', '((1+\\sqrt{5})/2)'),
	('left', ''),
	('right', ''),
]

_rec_tex_alias = re.compile (r'\\(' + '|'.join (a for a, _ in _TEX_ALIASES) + r')(?![a-zA-Z])')
_rec_implicit  = re.compile (fr'(?<![a-zA-Z0-9_.{tlex.IDENT_GLYPHS}])([0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?=[a-zA-Z{tlex.IDENT_GLYPHS}\\(])') # 2x -> 2*x, 2(x) -> 2*(x) but not x2y

_TEX_ALIAS_MAP = dict (_TEX_ALIASES)

class CalcError (Exception): pass # evaluator produced something which can not be displayed

#...............................................................................................
def normalize (text):
	text = _rec_tex_alias.sub (lambda m: _TEX_ALIAS_MAP [m.group (1)], text)

	return _rec_implicit.sub (r'\1*', text)

def translate (text): # -> (ast, calc text, has variables), SyntaxError if text does not parse
	ast = tparser.parse (tlex.tokenize (normalize (text)))

	return ast, tcanon.ast2calc (ast), tcanon.contains_symbols (ast)

def ast2spt (ast): # SymPy has no '=' in expressions so top level assignments and comparisons are built here
	rel = ast

	while rel.is_paren: # ((x=1)) is still a relation
		rel = rel.paren

	if rel.is_cmp or rel.is_ass:
		ast = rel

	if ast.is_ass:
		return sp.Eq (ast2spt (ast.lhs), ast2spt (ast.rhs), evaluate = False)

	if ast.is_cmp:
		lhs, rhs = ast2spt (ast.lhs), ast2spt (ast.rhs)

		return _CMP2SPT [ast.rel] (lhs, rhs) if ast.rel != '=' else sp.Eq (lhs, rhs)

	return sp.sympify (tcanon.ast2calc (ast), locals = _SP_LOCALS)

def _round (spt): # 2.00000000000000 -> 2, 0.333333333333333 -> 0.333333
	if spt.is_Float:
		if spt == int (spt):
			return sp.Integer (int (spt))
		elif len (str (spt)) > _ROUND_LEN:
			return round (spt, _ROUND_DIGITS)

	return spt

def _numeric (spt): # extend numeric evaluation into lists and matrices
	if isinstance (spt, (list, tuple)):
		return spt.__class__ (_numeric (s) for s in spt)
	elif isinstance (spt, sp.MatrixBase):
		return spt.applyfunc (_numeric)
	elif not isinstance (spt, sp.Expr):
		return spt

	spt = sp.N (spt)

	return _round (spt) if spt.is_Float else spt.xreplace ({f: _round (f) for f in spt.atoms (sp.Float)})

def _symbolic (spt): # extend expand and simplify into lists, matrices and the sides of relations
	if isinstance (spt, (list, tuple)):
		return spt.__class__ (_symbolic (s) for s in spt)
	elif isinstance (spt, sp.MatrixBase):
		return spt.applyfunc (_symbolic)
	elif isinstance (spt, sp.Rel):
		return spt.func (_symbolic (spt.lhs), _symbolic (spt.rhs), evaluate = False)
	elif not isinstance (spt, sp.Expr):
		return spt

	return sp.simplify (sp.expand (spt))

def spt2tex (spt):
	if not isinstance (spt, (sp.Basic, sp.MatrixBase, list, tuple, bool, int, float)):
		raise CalcError (f'cannot display result of type {type (spt).__name__!r}')

	tex = sp.latex (spt, mat_str = 'pmatrix', mat_delim = '')

	return f'\\displaystyle {tex}' if _DISPLAYSTYLE else tex

def evaluate (text): # -> {'engine': ..., 'latex': ..., 'calc': ...} or {'err': ...}
	try:
		ast, calc, has_symbols = translate (text)

	except SyntaxError as e:
		return {'err': 'syntax error', 'diags': list (getattr (e, 'diags', [str (e)]))}

	try:
		spt = ast2spt (ast)

		if has_symbols:
			engine, spt = 'symbolic', _symbolic (spt)
		else:
			engine, spt = 'numeric', (spt if _FRACTION else _numeric (spt))

		return {'engine': engine, 'latex': spt2tex (spt), 'calc': calc}

	except Exception as e:
		return {'err': f'{e.__class__.__name__}: {e}', 'calc': calc}

#...............................................................................................
def set_fraction (state):
	global _FRACTION
	_FRACTION = state

def set_displaystyle (state):
	global _DISPLAYSTYLE
	_DISPLAYSTYLE = state

def set_round_digits (digits):
	global _ROUND_DIGITS
	_ROUND_DIGITS = digits
