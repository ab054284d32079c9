#!/usr/bin/env python
# python 3.6+

from contextlib import redirect_stderr, redirect_stdout
from unittest import mock
import io
import unittest

from tast import AST
import teval
import texcalc

def ev (s):
	return teval.evaluate (s)

def tex (s):
	return teval.evaluate (s) ['latex']

def cli (*argv, stdin = None): # -> (exit code, stdout, stderr), options apply to this call only
	teval.set_fraction (False)
	teval.set_displaystyle (True)

	out, err = io.StringIO (), io.StringIO ()

	with redirect_stdout (out), redirect_stderr (err), mock.patch ('sys.stdin', io.StringIO (stdin or '')):
		ret = texcalc.main (list (argv))

	return ret, out.getvalue (), err.getvalue ()

class Test (unittest.TestCase):
	def tearDown (self):
		teval.set_fraction (False)
		teval.set_displaystyle (True)
		teval.set_round_digits (6)

	def test_normalize (self):
		self.assertEqual (teval.normalize ('12'), '12')
		self.assertEqual (teval.normalize ('2x'), '2*x')
		self.assertEqual (teval.normalize ('12ab+1'), '12*ab+1')
		self.assertEqual (teval.normalize ('1.5x'), '1.5*x')
		self.assertEqual (teval.normalize ('.5x'), '.5*x')
		self.assertEqual (teval.normalize ('x2y'), 'x2y')
		self.assertEqual (teval.normalize ('y_2a'), 'y_2a')
		self.assertEqual (teval.normalize ('2π'), '2*π')
		self.assertEqual (teval.normalize ('2\\pi'), '2*π')
		self.assertEqual (teval.normalize ('\\tau+\\phi'), '(2*π)+((1+\\sqrt{5})/2)')
		self.assertEqual (teval.normalize ('2\\tau'), '2*(2*π)')
		self.assertEqual (teval.normalize ('2(x+1)'), '2*(x+1)')
		self.assertEqual (teval.normalize ('x2(y)'), 'x2(y)')
		self.assertEqual (teval.normalize ('3\\sqrt{2}'), '3*\\sqrt{2}')
		self.assertEqual (teval.normalize ('a \\cdot b'), 'a * b')
		self.assertEqual (teval.normalize ('2\\times3'), '2*3')
		self.assertEqual (teval.normalize ('6\\div 2'), '6/ 2')
		self.assertEqual (teval.normalize ('1 \\le 2 \\leq 3'), '1 <= 2 <= 3')
		self.assertEqual (teval.normalize ('3 \\geq 2 \\ge 1'), '3 >= 2 >= 1')
		self.assertEqual (teval.normalize ('a \\ne b \\neq c'), 'a != b != c')
		self.assertEqual (teval.normalize ('\\left(1+2\\right)'), '(1+2)')
		self.assertEqual (teval.normalize ('\\leqslant'), '\\leqslant')
		self.assertEqual (teval.normalize ('\\pix'), '\\pix')

	def test_translate (self):
		self.assertEqual (teval.translate ('\\pi'), (AST ('@', 'π'), 'pi', False))
		self.assertEqual (teval.translate ('2x+1'), (AST ('-bop', '+', ('-bop', '*', ('#', '2'), ('@', 'x')), ('#', '1')), '2*x+1', True))
		self.assertEqual (teval.translate ('\\frac{1}{2} \\cdot 3') [1:], ('(1)/(2)*3', False))
		self.assertEqual (teval.translate ('2\\tau') [1], '2*(2*pi)')
		self.assertEqual (teval.translate ('\\tau') [1:], ('(2*pi)', False))
		self.assertRaises (SyntaxError, teval.translate, '\\frac{1}')
		self.assertRaises (SyntaxError, teval.translate, '')

	def test_evaluate_numeric (self):
		self.assertEqual (ev ('1+2*3'), {'engine': 'numeric', 'latex': '\\displaystyle 7', 'calc': '1+2*3'})
		self.assertEqual (tex ('2^3^2'), '\\displaystyle 512')
		self.assertEqual (tex ('-2^2'), '\\displaystyle -4')
		self.assertEqual (tex ('(-2)^2'), '\\displaystyle 4')
		self.assertEqual (tex ('\\sqrt{16}'), '\\displaystyle 4')
		self.assertEqual (tex ('\\sin{0}'), '\\displaystyle 0')
		self.assertEqual (tex ('4/2'), '\\displaystyle 2')
		self.assertTrue (tex ('\\frac{1}{3}').startswith ('\\displaystyle 0.333333'))
		self.assertTrue (tex ('e').startswith ('\\displaystyle 2.71828'))
		self.assertTrue (tex ('2\\pi').startswith ('\\displaystyle 6.28318'))
		self.assertTrue (tex ('\\tau').startswith ('\\displaystyle 6.28318'))
		self.assertTrue (tex ('\\phi').startswith ('\\displaystyle 1.61803'))
		self.assertIn ('pmatrix', tex ('{1,2;3,4}'))
		self.assertIn ('pmatrix', tex ('{1,2;3,4}^2'))

	def test_evaluate_fraction (self):
		teval.set_fraction (True)

		self.assertEqual (tex ('\\frac{1}{3}'), '\\displaystyle \\frac{1}{3}')
		self.assertEqual (tex ('\\frac{1}{2}+\\frac{1}{3}'), '\\displaystyle \\frac{5}{6}')
		self.assertEqual (tex ('\\sqrt{8}'), '\\displaystyle 2 \\sqrt{2}')

	def test_evaluate_symbolic (self):
		self.assertEqual (ev ('x+x'), {'engine': 'symbolic', 'latex': '\\displaystyle 2 x', 'calc': 'x+x'})
		self.assertEqual (tex ('2x'), '\\displaystyle 2 x')
		self.assertEqual (tex ('\\frac{x}{2}'), '\\displaystyle \\frac{x}{2}')
		self.assertEqual (tex ('x*x'), '\\displaystyle x^{2}')
		self.assertEqual (ev ('x+1') ['engine'], 'symbolic')

	def test_evaluate_relations (self):
		self.assertEqual (tex ('x=5'), '\\displaystyle x = 5')
		self.assertEqual (tex ('2=3'), '\\displaystyle \\text{False}')
		self.assertEqual (tex ('2=2'), '\\displaystyle \\text{True}')
		self.assertEqual (tex ('1<2'), '\\displaystyle \\text{True}')
		self.assertEqual (tex ('1>=2'), '\\displaystyle \\text{False}')
		self.assertEqual (tex ('1!=2'), '\\displaystyle \\text{True}')
		self.assertEqual (tex ('x<1'), '\\displaystyle x < 1')
		self.assertEqual (tex ('(x=1)'), '\\displaystyle x = 1')
		self.assertEqual (tex ('((x=1))'), '\\displaystyle x = 1')
		self.assertEqual (tex ('((1<2))'), '\\displaystyle \\text{True}')

	def test_evaluate_errors (self):
		resp = ev ('1+')

		self.assertEqual (resp ['err'], 'syntax error')
		self.assertEqual (len (resp ['diags']), 1)
		self.assertIn ('unexpected end of input', resp ['diags'] [0])

		resp = ev ('\\frac{1}')

		self.assertEqual (resp ['err'], 'syntax error')
		self.assertIn ('denominator', resp ['diags'] [0])

		resp = ev ('[1,2]^2')

		self.assertIn ('err', resp)
		self.assertNotEqual (resp ['err'], 'syntax error')
		self.assertEqual (resp ['calc'], '[1,2]^2')

	def test_settings (self):
		teval.set_displaystyle (False)

		self.assertEqual (tex ('1+1'), '2')

		teval.set_displaystyle (True)
		teval.set_round_digits (2)

		self.assertEqual (tex ('\\frac{1}{3}'), '\\displaystyle 0.33')

	def test_cli (self):
		self.assertEqual (cli ('1+2*3'), (0, '\\displaystyle 7\n', ''))
		self.assertEqual (cli ('-c', '1+2*3'), (0, '1+2*3\n', ''))
		self.assertEqual (cli ('--calc', '2^3^4', '\\tau'), (0, '2^(3^4)\n(2*pi)\n', ''))
		self.assertEqual (cli ('-v'), (0, '1.0.0\n', ''))
		self.assertEqual (cli ('--nodisplaystyle', '1+1', 'x+x'), (0, '2\n2 x\n', ''))
		self.assertEqual (cli ('-f', '--nodisplaystyle', '\\frac{2}{4}'), (0, '\\frac{1}{2}\n', ''))
		self.assertEqual (cli ('--nodisplaystyle', stdin = '1+1\n\n  2*3  \n'), (0, '2\n6\n', ''))

		ret, out, _ = cli ('-h')

		self.assertEqual (ret, 0)
		self.assertTrue (out.startswith ('usage: texcalc'))

		ret, out, _ = cli ('1+', '1+1')

		self.assertEqual (ret, 1)
		self.assertTrue (out.startswith ('error: syntax error\n  unexpected end of input'))
		self.assertTrue (out.endswith ('\\displaystyle 2\n'))

		ret, out, _ = cli ('-c', '(1')

		self.assertEqual (ret, 1)
		self.assertTrue (out.startswith ('error: syntax error\n  '))
		self.assertIn ('RParen', out)

		ret, out, err = cli ('-d', '1+2')

		self.assertEqual ((ret, out), (0, '\\displaystyle 3\n'))
		self.assertIn ("norm:    '1+2'", err)
		self.assertIn ('tokens: ', err)
		self.assertIn ('calc:    1+2', err)
		self.assertIn ('engine:  numeric', err)
		self.assertEqual (cli ('1+2'), (0, '\\displaystyle 3\n', ''))

		ret, out, err = cli ('--debug', '-c', '1+')

		self.assertEqual (ret, 1)
		self.assertIn ('diags:   ', err)
		self.assertNotIn ('engine:', err)
		self.assertEqual (cli ('-c', '1+') [2], '')

		ret, out, err = cli ('--bogus')

		self.assertEqual (ret, 2)
		self.assertEqual (out, '')
		self.assertTrue (err.startswith ('error: '))

if __name__ == '__main__':
	unittest.main ()
