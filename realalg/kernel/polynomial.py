
import math

from realalg.sympy_types import BasePolynomialError, Expr, Number, Poly, QQ, Rational, SympifyError, sign, sympify, x
from realalg.kernel.errors import InvalidIntervalError, InvalidPolynomialError


def to_univariate(poly):
    """ Return poly as a Poly in x over QQ. The input may be a Poly, a sympy expression or
        a string, written in any single indeterminate:

        >>> to_univariate('3*t - 1')
        Poly(3*x - 1, x, domain='QQ')

        Raises InvalidPolynomialError if poly has more than one indeterminate, is not a
        polynomial, or has a coefficient that is not rational.
    """
    try:
        if isinstance(poly, Poly):
            expr = poly.as_expr()
        else:
            expr = sympify(poly)
    except SympifyError as e:
        raise InvalidPolynomialError('cannot parse {0!r} as a polynomial'.format(poly)) from e

    if not isinstance(expr, Expr):
        raise InvalidPolynomialError('{0!r} is not a polynomial expression'.format(poly))

    symbols = expr.free_symbols
    if len(symbols) > 1:
        names = ', '.join(sorted(str(s) for s in symbols))
        raise InvalidPolynomialError('polynomial has more than one indeterminate ({0})'.format(names))
    gen = symbols.pop() if symbols else x

    try:
        P = Poly(expr, gen, domain=QQ)
    except BasePolynomialError as e:
        raise InvalidPolynomialError('{0} is not a polynomial with rational coefficients'.format(expr)) from e

    return Poly.from_list(P.all_coeffs(), x, domain=QQ)


def to_rational(value):
    """ Return value as an exact sympy Rational. Accepts ints, Fractions, sympy numbers and
        strings such as '91625968981/274877906944'. NaN and infinities, as floats or
        sympy numbers, are rejected.
    """
    if (isinstance(value, float) and not math.isfinite(value)) or (isinstance(value, Number) and not value.is_finite):
        raise InvalidIntervalError('interval bound {0!r} is not finite'.format(value))
    try:
        return Rational(value)
    except (TypeError, ValueError, ZeroDivisionError) as e:
        raise InvalidIntervalError('interval bound {0!r} is not a rational number'.format(value)) from e


def sign_at(poly, m):
    """ sign of poly(m) as one of -1, 0, 1, computed exactly.
    """
    return int(sign(poly.eval(m)))


def is_squarefree(poly):
    return poly.is_sqf


def rational_poly(m):
    """ the linear polynomial denom(m)*x - numer(m), whose only root is m.
    """
    m = Rational(m)
    return Poly.from_list([m.q, -m.p], x, domain=QQ)


def poly_text(poly):
    return str(poly.as_expr())
