""" Computer algebra names used by realalg. Every defining polynomial is a Poly
    over QQ in the generator x below, whatever indeterminate the caller wrote it in.
"""

from sympy import Expr, Number, Poly, QQ, Rational, Symbol, sign, sympify
from sympy.core.sympify import SympifyError
from sympy.polys.polyerrors import BasePolynomialError

x = Symbol('x')

__all__ = [
    'BasePolynomialError',
    'Expr',
    'Number',
    'Poly',
    'QQ',
    'Rational',
    'SympifyError',
    'sign',
    'sympify',
    'x',
]
