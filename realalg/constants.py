
from realalg.kernel.real_algebraic_number import RealAlgebraicNumber
from realalg.sympy_types import x

ONE_THIRD = RealAlgebraicNumber(3*x - 1, '91625968981/274877906944', '45812984491/137438953472')

MINUS_SQRT3 = RealAlgebraicNumber(x**2 - 3, '-238051250353/137438953472', '-14878203147/8589934592')

SQRT2 = RealAlgebraicNumber(x**2 - 2, 1, 2)

GOLDEN_RATIO = RealAlgebraicNumber(x**2 - x - 1, 1, 2)
