#!/usr/bin/env python3
# python 3.6+

# Command line calculator for LaTeX flavored input, evaluates arguments or lines from stdin.

import getopt
import os
import sys

import teval
import tcanon
import tlex
import tparser

_VERSION       = '1.0.0'

_TEXCALC_DEBUG = os.environ.get ('TEXCALC_DEBUG')

_HELP          = f'usage: texcalc [options] [expression ...]' '''

  -h, --help                         - Show help information
  -v, --version                      - Show version string
  -d, --debug                        - Dump tokens, AST and evaluator text to stderr
  -c, --calc                         - Only print evaluator text, do not evaluate
  -f, --fraction, --nofraction       - Show exact results instead of decimals or not
  --displaystyle, --nodisplaystyle   - Prefix results with "\\displaystyle" or not

Without expressions on the command line one expression is read per line from stdin.
'''.lstrip ()

def _debug (text):
	try:
		norm   = teval.normalize (text)
		tokens = tlex.tokenize (norm)

		print ('text:   ', repr (text), file = sys.stderr)
		print ('norm:   ', repr (norm), file = sys.stderr)
		print ('tokens: ', tokens, file = sys.stderr)

		ast, diags = tparser.Parser ().parse (tokens)

		if diags:
			print ('diags:  ', diags, file = sys.stderr)

		else:
			print ('ast:    ', ast, file = sys.stderr)
			print ('calc:   ', tcanon.ast2calc (ast), file = sys.stderr)
			print ('syms:   ', tcanon.contains_symbols (ast), file = sys.stderr)

	finally:
		print (file = sys.stderr)

def calc (text, calc_only = False, debug = False): # print result of one expression, returns True on success
	if debug:
		_debug (text)

	if calc_only:
		try:
			print (teval.translate (text) [1])

		except SyntaxError as e:
			print ('error: syntax error', *getattr (e, 'diags', [str (e)]), sep = '\n  ')

			return False

		return True

	resp = teval.evaluate (text)

	if 'err' in resp:
		print (f'error: {resp ["err"]}', *resp.get ('diags', ()), sep = '\n  ')

		return False

	if debug:
		print (f'engine:  {resp ["engine"]}', file = sys.stderr)

	print (resp ['latex'])

	return True

def main (argv = None):
	try:
		opts, args = getopt.getopt (sys.argv [1:] if argv is None else argv, 'hvdcf',
				['help', 'version', 'debug', 'calc', 'fraction', 'nofraction', 'displaystyle', 'nodisplaystyle'])

	except getopt.GetoptError as e:
		print (f'error: {e}\n\n{_HELP}', file = sys.stderr)

		return 2

	opts      = [o [0] for o in opts]
	calc_only = False
	debug     = bool (_TEXCALC_DEBUG)

	for opt in opts:
		if opt in ('-h', '--help'):
			print (_HELP)

			return 0

		elif opt in ('-v', '--version'):
			print (_VERSION)

			return 0

		elif opt in ('-d', '--debug'):
			debug = True
		elif opt in ('-c', '--calc'):
			calc_only = True
		elif opt in ('-f', '--fraction', '--nofraction'):
			teval.set_fraction (opt != '--nofraction')
		elif opt in ('--displaystyle', '--nodisplaystyle'):
			teval.set_displaystyle (opt == '--displaystyle')

	ok = True

	if args:
		for text in args:
			ok = calc (text, calc_only, debug) and ok

		return 0 if ok else 1

	try:
		for line in sys.stdin:
			line = line.strip ()

			if line:
				ok = calc (line, calc_only, debug) and ok

	except KeyboardInterrupt:
		pass

	return 0 if ok else 1

if __name__ == '__main__':
	sys.exit (main ())
