# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from decimal import Decimal
from fractions import Fraction
from operator import add, mul, neg, sub, truediv

from isect.vec import V
from utest import utest, utest_approx, utest_exc, utest_val


# Arithmetic.

utest(V(-1,-2), neg, V(1,2))
utest(V(4,6), add, V(1,2), V(3,4))
utest(V(0,0), sub, V(1,2), V(1,2))
utest(V(2,4), mul, V(1,2), 2)
utest(V(2,4), mul, 2, V(1,2))
utest(V(3,8), mul, V(1,2), V(3,4))
utest(V(0.5, 1), truediv, V(1,2), 2)
utest(V(Fraction(1,2), Fraction(3,2)), mul, V(Fraction(1), Fraction(3)), Fraction(1,2))

utest_exc(TypeError, add, V(1,2), 1)
utest_exc(TypeError, mul, V(1,2), 'x')


# Sequence protocol.

utest_val(2, len(V(1,2)))
utest_val([1, 2], list(V(1,2)))
utest_val(2, V(1,2)[1])
utest_val(2, V(1,2)[-1])
utest_val(False, bool(V()))
utest_val(True, bool(V(0, 1)))


# Formatting.

utest('V(1,2)', repr, V(1,2))
utest('(0.5,-3)', str, V(0.5, -3.0))
utest('(1/3,2)', str, V(Fraction(1,3), 2))
utest('(-inf,inf)', str, V(float('-inf'), float('inf')))


# Products.

utest(0, V.dot_perp, V(1, 0), V(1, 0))
utest(1, V.dot_perp, V(1, 0), V(0, 1))
utest(-1, V.dot_perp, V(0, 1), V(1, 0))
utest(0, V.dot_perp, V(2, 4), V(-1, -2)) # Antiparallel.
utest(0, V.dot_perp, V(0, 0), V(3, 5)) # Zero vector.
utest(-2, V.dot_perp, V(1, 2), V(3, 4))

utest(11, V.dot, V(1, 2), V(3, 4))


# Magnitude and normalization.

utest_val(5.0, V(3, 4).mag)
utest_val(25, V(3, 4).mag2)
utest_val(Decimal(5), V(Decimal(3), Decimal(4)).mag)
utest_approx(5e200, lambda v: v.mag, V(3e200, 4e200))
utest_approx(5e-200, lambda v: v.mag, V(3e-200, 4e-200), _abs_tol=0)
utest_approx(V(0.6, 0.8), lambda v: v.norm_or_zero, V(3e200, 4e200))
utest(V(0.0, 1.0), lambda v: v.norm_or_zero, V(0.0, 1e-200))

utest_approx(V(0.6, 0.8), lambda v: v.norm, V(3, 4))
utest_exc(ValueError('Cannot normalize zero vector: (0,0).'), lambda v: v.norm, V(0, 0))

utest_approx(V(0.6, 0.8), lambda v: v.norm_or_zero, V(3, 4))
utest(V(0, 0), lambda v: v.norm_or_zero, V(0, 0))
utest(V(0, 0), lambda v: v.norm_or_zero, V(0.0, -0.0))
utest(V(Decimal('0.6'), Decimal('0.8')), lambda v: v.norm_or_zero, V(Decimal(3), Decimal(4)))

utest_val(True, V(1, 2).is_finite)
utest_val(False, V(1, float('nan')).is_finite)
