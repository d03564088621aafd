""" The decision procedure ordering two real algebraic numbers.

    compare(left, right) works in exact rational arithmetic only and short-circuits
    through the following stages:

        1. identical polynomial and interval
        2. one side rational: refine the other side at that rational and read off the answer
        3. disjoint isolating intervals
        4. refine both sides at the endpoints of the overlap of their intervals
        5. replace each defining polynomial by gcd(left, right) if the gcd still has a root
           in that side's interval, and by the quotient poly/gcd otherwise
        6. the gcd changes sign across the overlap: both sides isolate the same common root
        7. bisect both sides until stage 2 or 3 decides

    Stage 7 terminates because two distinct algebraic numbers are a positive distance
    apart while the intervals halve every round. That distance can be tiny, so callers
    that need bounded latency pass max_iterations and get an IterationError on exhaustion.
"""

import enum
import functools
import logging

from realalg.kernel.errors import IterationError
from realalg.kernel.polynomial import sign_at

logger = logging.getLogger(__name__)

# number of bisection rounds compare() may spend in stage 7. None means no limit.
DEFAULT_MAX_ITERATIONS = None


class Ordering(enum.IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reverse(self):
        return Ordering(-self.value)


def _rational_verdict(left, right):
    if right.is_rational():
        m = right.bounds()[0]
        return left.refine_at(m).compare_rational(m)
    if left.is_rational():
        m = left.bounds()[0]
        return right.refine_at(m).compare_rational(m).reverse()
    return None


def _disjoint_verdict(left, right):
    la, lb = left.bounds()
    ra, rb = right.bounds()
    if lb <= ra:
        return Ordering.LESS
    if la >= rb:
        return Ordering.GREATER
    return None


def _fast_verdict(left, right):
    verdict = _rational_verdict(left, right)
    if verdict is None:
        verdict = _disjoint_verdict(left, right)
    return verdict


def _eliminate_common_factor(number, G):
    """ Return number described by G if G has a root in its interval, and by poly/G otherwise.
        Either polynomial still isolates the same root on the same interval.
    """
    a, b = number.bounds()
    if sign_at(G, a) != sign_at(G, b):
        return number._replace_polynomial(G)
    return number._replace_polynomial(number.polynomial().exquo(G))


def compare(left, right, max_iterations=DEFAULT_MAX_ITERATIONS):
    """ Return Ordering.LESS, EQUAL or GREATER according to how the real number left
        compares to right. Neither argument is modified.
    """
    if left is right or (left.polynomial() == right.polynomial() and left.bounds() == right.bounds()):
        logger.debug('compare: structurally identical')
        return Ordering.EQUAL

    verdict = _fast_verdict(left, right)
    if verdict is not None:
        logger.debug('compare: decided by the rational or disjoint-interval check')
        return verdict

    # neither side is rational and the intervals overlap, so lo < hi
    lo = max(left.bounds()[0], right.bounds()[0])
    hi = min(left.bounds()[1], right.bounds()[1])

    for refine_left, point in ((True, lo), (True, hi), (False, lo), (False, hi)):
        if refine_left:
            left = left.refine_at(point)
        else:
            right = right.refine_at(point)
        verdict = _fast_verdict(left, right)
        if verdict is not None:
            logger.debug('compare: decided while aligning to [%s, %s]', lo, hi)
            return verdict

    # both intervals are now exactly [lo, hi]
    G = left.polynomial().gcd(right.polynomial())
    left = _eliminate_common_factor(left, G)
    right = _eliminate_common_factor(right, G)

    if sign_at(G, lo) != sign_at(G, hi):
        logger.debug('compare: common root of %s in [%s, %s]', G.as_expr(), lo, hi)
        return Ordering.EQUAL

    rounds = 0
    while True:
        if max_iterations is not None and rounds >= max_iterations:
            raise IterationError('intervals still overlap after {0} bisections: {1!r} and {2!r}'.format(rounds, left, right))
        left, right = left.bisect(), right.bisect()
        rounds += 1
        verdict = _fast_verdict(left, right)
        if verdict is not None:
            logger.debug('compare: separated after %d bisections', rounds)
            return verdict


def sorted_numbers(numbers, reverse=False, max_iterations=DEFAULT_MAX_ITERATIONS):
    """ Return a new list of the RealAlgebraicNumbers in numbers, in increasing order
        (decreasing if reverse is True).
    """
    key = functools.cmp_to_key(lambda l, r: int(compare(l, r, max_iterations)))
    return sorted(numbers, key=key, reverse=reverse)
