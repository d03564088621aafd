
import logging

from mpmath import iv

from realalg.kernel.compare import Ordering, compare
from realalg.kernel.errors import (
    DegreeError,
    InvalidIntervalError,
    NoRootInIntervalError,
    NotSquareFreeError,
)
from realalg.kernel.polynomial import (
    is_squarefree,
    poly_text,
    rational_poly,
    sign_at,
    to_rational,
    to_univariate,
)

logger = logging.getLogger(__name__)


class RealAlgebraicNumber:
    """ A real root of a squarefree polynomial with rational coefficients, given by the
        polynomial and a rational interval [a,b] containing exactly that one root. When
        a < b the polynomial has opposite nonzero signs at a and b; when a == b the
        number is the rational a itself. A constant polynomial c stands for the rational
        c, and its bounds are ignored.

        The positive square root of 2:

        >>> from realalg.sympy_types import x
        >>> r = RealAlgebraicNumber(x**2 - 2, 1, 2)
        >>> r.bounds()
        (1, 2)

        Instances are immutable. Refinement returns a new number (or the same one) and
        comparison operators compare values exactly, so two numbers with different
        polynomials or intervals can be equal.
    """

    __slots__ = ('_poly', '_a', '_b', '_is_rational')

    def __init__(self, poly, a, b):
        a, b = to_rational(a), to_rational(b)
        poly = to_univariate(poly)
        if poly.is_zero:
            raise DegreeError('the zero polynomial has no degree')
        if not is_squarefree(poly):
            raise NotSquareFreeError('{0} has a repeated factor'.format(poly.as_expr()))

        degree = poly.degree()
        if degree >= 1:
            if a > b:
                raise InvalidIntervalError('lower bound {0} exceeds upper bound {1}'.format(a, b))
            sA, sB = sign_at(poly, a), sign_at(poly, b)
            if sA != 0 and sA == sB:
                raise NoRootInIntervalError('{0} has the same sign at {1} and {2}'.format(poly.as_expr(), a, b))
            if sA == 0 and sB == 0 and a < b:
                raise InvalidIntervalError('{0} vanishes at both {1} and {2}, so [{1}, {2}] does not isolate a root'.format(poly.as_expr(), a, b))
            if sA == 0 and sB != 0:
                logger.warning('%s vanishes at the lower bound; collapsing [%s, %s] to %s', poly.as_expr(), a, b, a)
                b = a
            elif sB == 0 and sA != 0:
                logger.warning('%s vanishes at the upper bound; collapsing [%s, %s] to %s', poly.as_expr(), a, b, b)
                a = b
            is_rational = a == b
        else:
            value = to_rational(poly.as_expr())
            logger.debug('constant polynomial %s taken as the rational %s; bounds [%s, %s] ignored', poly.as_expr(), value, a, b)
            poly, a, b = rational_poly(value), value, value
            is_rational = True

        self._init(poly, a, b, bool(is_rational))

    def _init(self, poly, a, b, is_rational):
        object.__setattr__(self, '_poly', poly)
        object.__setattr__(self, '_a', a)
        object.__setattr__(self, '_b', b)
        object.__setattr__(self, '_is_rational', is_rational)

    @classmethod
    def _make(cls, poly, a, b, is_rational):
        """ build a number without validation. The caller guarantees the invariants.
        """
        number = object.__new__(cls)
        number._init(poly, a, b, is_rational)
        return number

    @classmethod
    def from_rational(cls, value):
        """ the rational value p/q, described by q*x - p on [p/q, p/q].
        """
        m = to_rational(value)
        return cls._make(rational_poly(m), m, m, True)

    @classmethod
    def from_text(cls, poly, a, b):
        """ Rebuild a number from the strings produced by to_text(). The result goes
            through full validation.
        """
        return cls(poly, a, b)

    def __setattr__(self, name, value):
        raise AttributeError('RealAlgebraicNumber is immutable')

    def __delattr__(self, name):
        raise AttributeError('RealAlgebraicNumber is immutable')

    def polynomial(self):
        return self._poly

    def bounds(self):
        return (self._a, self._b)

    def is_rational(self):
        return self._is_rational

    def width(self):
        return self._b - self._a

    def to_text(self):
        return (poly_text(self._poly), str(self._a), str(self._b))

    def enclosure(self):
        """ an mpmath interval containing [a,b], rounded outward at the current iv.prec.
        """
        lower = iv.mpf(self._a.p) / self._a.q
        upper = iv.mpf(self._b.p) / self._b.q
        return iv.mpf([lower, upper])

    def overlaps(self, other):
        return bool(self._a <= other._b and other._a <= self._b)

    def _replace_polynomial(self, poly):
        """ same interval, new defining polynomial. poly must have the same single root in it.
        """
        return type(self)._make(poly, self._a, self._b, self._is_rational)

    def compare_rational(self, m):
        """ Compare self to the rational m. Requires that m is not strictly inside a
            non-degenerate isolating interval; refine_at(m) first to guarantee that.
        """
        m = to_rational(m)
        a, b = self._a, self._b
        assert self._is_rational or m <= a or m >= b, 'rational {0} lies strictly inside [{1}, {2}]'.format(m, a, b)

        if a < m:
            return Ordering.LESS
        if a > m:
            return Ordering.GREATER
        if sign_at(self._poly, m) == 0:
            return Ordering.EQUAL
        # m == a is not a root, so the root lies in (a, b]
        assert not self._is_rational, 'rational number {0} is not a root of {1}'.format(a, self._poly.as_expr())
        return Ordering.GREATER

    def refine_at(self, m):
        """ Return a number equal to self whose interval is the part of [a,b] on the root's
            side of m. If m is not strictly inside (a,b), or self is rational, return self.
        """
        m = to_rational(m)
        a, b = self._a, self._b
        if self._is_rational or m <= a or m >= b:
            return self

        s = sign_at(self._poly, m)
        if s == 0:
            return type(self)._make(rational_poly(m), m, m, True)
        if s == sign_at(self._poly, a):
            return type(self)._make(self._poly, m, b, False)
        return type(self)._make(self._poly, a, m, False)

    def bisect(self):
        return self.refine_at((self._a + self._b) / 2)

    def _check_other(self, other, op):
        if not isinstance(other, RealAlgebraicNumber):
            raise TypeError("'{0}' not supported between RealAlgebraicNumber and {1}".format(op, type(other).__name__))

    def __eq__(self, other):
        self._check_other(other, '==')
        return compare(self, other) == Ordering.EQUAL

    def __ne__(self, other):
        self._check_other(other, '!=')
        return compare(self, other) != Ordering.EQUAL

    def __lt__(self, other):
        if not isinstance(other, RealAlgebraicNumber):
            return NotImplemented
        return compare(self, other) == Ordering.LESS

    def __le__(self, other):
        if not isinstance(other, RealAlgebraicNumber):
            return NotImplemented
        return compare(self, other) != Ordering.GREATER

    def __gt__(self, other):
        if not isinstance(other, RealAlgebraicNumber):
            return NotImplemented
        return compare(self, other) == Ordering.GREATER

    def __ge__(self, other):
        if not isinstance(other, RealAlgebraicNumber):
            return NotImplemented
        return compare(self, other) != Ordering.LESS

    # equality is semantic, so there is no hash consistent with it
    __hash__ = None

    def __repr__(self):
        return 'RealAlgebraicNumber({0}, {1}, {2})'.format(self._poly.as_expr(), self._a, self._b)

    def __str__(self):
        if self._is_rational:
            return str(self._a)
        return 'root of {0} in [{1}, {2}]'.format(self._poly.as_expr(), self._a, self._b)
