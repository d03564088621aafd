""" Exact comparison of real algebraic numbers given by a squarefree rational polynomial
    and an isolating interval.
"""

import logging

from realalg.kernel.compare import DEFAULT_MAX_ITERATIONS, Ordering, compare, sorted_numbers
from realalg.kernel.errors import (
    AlgebraicNumberError,
    DegreeError,
    InvalidIntervalError,
    InvalidPolynomialError,
    IterationError,
    NoRootInIntervalError,
    NotSquareFreeError,
)
from realalg.kernel.real_algebraic_number import RealAlgebraicNumber

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'AlgebraicNumberError',
    'DEFAULT_MAX_ITERATIONS',
    'DegreeError',
    'InvalidIntervalError',
    'InvalidPolynomialError',
    'IterationError',
    'NoRootInIntervalError',
    'NotSquareFreeError',
    'Ordering',
    'RealAlgebraicNumber',
    'compare',
    'sorted_numbers',
]
