#!/usr/bin/env python3

import setuptools

setuptools.setup (
  name                          = "texcalc",
  version                       = "1.0.0",
  license                       = 'BSD',
  keywords                      = "Math calculator LaTeX parser SymPy",
  description                   = "LaTeX flavored calculator input language: tokenizer, parser and evaluator text writer using SymPy",
  long_description              = "texcalc reads calculator input written in a LaTeX flavored notation such as '\\frac{1}{2}+2x' or '{1,2;3,4}', "
    "tokenizes and parses it into an abstract syntax tree and writes that tree back out as a flat expression with only the parentheses that are needed. "
    "The result is handed to SymPy which evaluates it numerically or symbolically and returns LaTeX for display.",
  long_description_content_type = "text/plain",
  py_modules                    = ['tlex', 'tast', 'tparser', 'tcanon', 'teval', 'texcalc'],
  entry_points                  = {'console_scripts': ['texcalc = texcalc:main']},
  classifiers                   = [
    'Intended Audience :: Education',
    'Intended Audience :: Science/Research',
    'License :: OSI Approved :: BSD License',
    'Operating System :: OS Independent',
    'Programming Language :: Python',
    'Programming Language :: Python :: 3',
    'Programming Language :: Python :: 3 :: Only',
    'Topic :: Scientific/Engineering',
    'Topic :: Scientific/Engineering :: Mathematics',
  ],
  install_requires              = ['sympy>=1.4,<1.13'],
  extras_require                = {'test': ['pytest']},
  python_requires               = '>=3.6',
)
