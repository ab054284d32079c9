# Tokenizer for calculator input text, never fails, unknown characters come out as 'Unknown' tokens.

from collections import OrderedDict
import re

KINDS = ('Number', 'Identifier', 'Command', 'Plus', 'Minus', 'Multiply', 'Divide', 'Power', 'Equals',
	'LParen', 'RParen', 'LBracket', 'RBracket', 'LBrace', 'RBrace', 'Comma', 'Semicolon', 'Dot',
	'LessThan', 'GreaterThan', 'LessEqual', 'GreaterEqual', 'NotEqual', 'Unknown', 'EndOfInput')

IDENT_GLYPHS = 'π' # non-ASCII glyph allowed in identifiers

# single character punctuation and operators
OPS = OrderedDict ([
	('+', 'Plus'),
	('-', 'Minus'),
	('*', 'Multiply'),
	('/', 'Divide'),
	('^', 'Power'),
	('=', 'Equals'),
	('(', 'LParen'),
	(')', 'RParen'),
	('[', 'LBracket'),
	(']', 'RBracket'),
	('{', 'LBrace'),
	('}', 'RBrace'),
	(',', 'Comma'),
	(';', 'Semicolon'),
	('.', 'Dot'),
	('<', 'LessThan'),
	('>', 'GreaterThan'),
])

OPS2 = OrderedDict ([('<=', 'LessEqual'), ('>=', 'GreaterEqual'), ('!=', 'NotEqual')])

#...............................................................................................
class Token (str): # str value is the kind name
	__slots__ = ['text', 'pos']

	def __new__ (cls, kind, text = None, pos = None):
		self      = str.__new__ (cls, kind)
		self.text = text or ''
		self.pos  = pos

		return self

	@property
	def kind (self):
		return str (self)

	def __repr__ (self):
		return f'Token({str (self)!r}, {self.text!r}, {self.pos})'

class Lexer:
	# order is priority, first matching alternative wins at each position
	TOKENS = OrderedDict ([
		('ignore',       r'\s+'),
		('Number',       r'[0-9]+(?:\.[0-9]*)?|\.[0-9]+'),
		('Identifier',  fr'[a-zA-Z_{IDENT_GLYPHS}][a-zA-Z0-9_{IDENT_GLYPHS}]*'),
		('Command',      r'\\[a-zA-Z]*'),
		('op2',          '|'.join (re.escape (s) for s in OPS2)),
		('op1',          '|'.join (re.escape (s) for s in OPS)),
		('Unknown',      r'(?s:.)'),
	])

	def __init__ (self):
		self.tokre  = '|'.join (f'(?P<{tok}>{pat})' for tok, pat in self.TOKENS.items ())
		self.tokrec = re.compile (self.tokre)

	def tokenize (self, text):
		tokens = []
		end    = len (text)
		pos    = 0

		while pos < end:
			m    = self.tokrec.match (text, pos)
			kind = m.lastgroup
			s    = m.group (0)

			if kind != 'ignore':
				if kind == 'op2':
					kind = OPS2 [s]
				elif kind == 'op1':
					kind = OPS [s]

				tokens.append (Token (kind, s, pos))

			pos += len (s)

		return tokens

_LEXER = Lexer ()

def tokenize (text):
	return _LEXER.tokenize (text)
