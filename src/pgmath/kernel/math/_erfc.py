"""Complementary Error Function.

Rational Chebyshev approximations of erfc(x) as described by Cody [1], with
polynomial coefficients from Temme [2] and netlib specfun [3]. Maximum
relative error against the C library erfc is about 1.08e-9.

Regions:
    x < -6.0036...          2
    x < -eps                2 - erfc(-x)
    |x| < eps               1
    eps <= x < 0.5          1 - x P(x^2) / Q(x^2)
    0.5 <= x < 4            exp(-x^2) P(x) / Q(x)
    4 <= x < 26.6157...     exp(-x^2) (1/sqrt(pi) + z R(z)) / x,  z = 1/x^2
    x >= 26.6157...         0

References:
    [1] Cody, W. J. Rational Chebyshev approximations for the error function.
        Math. Comp. 23 (1969), 631-637.
    [2] Temme, N. (1994). A Set of Algorithms for the Incomplete Gamma
        Functions. Probability in the Engineering and Informational Sciences,
        8(2), 291-307.
    [3] https://www.netlib.org/specfun/erf
"""

import math

from pgmath.optim import optimized_jit
from ._constants import DBL_EPSILON, DBL_MIN, ONE_SQRTPI

__all__ = [
    'erfc',
]


# erfc saturates to 2 below this and to 0 above BIG_VAL
SMALL_VAL = -6.003636680306125
BIG_VAL = 26.615717509251258


@optimized_jit
def _erfc_nonnegative(x: float) -> float:
    """erfc for x >= -eps (every region except the reflected one)."""
    if x < DBL_EPSILON:
        return 1.0

    if x < 0.5:
        p0 = 3.20937758913846947e+03
        p1 = 3.77485237685302021e+02
        p2 = 1.13864154151050156e+02
        p3 = 3.16112374387056560e+00
        p4 = 1.85777706184603153e-01
        q0 = 2.84423683343917062e+03
        q1 = 1.28261652607737228e+03
        q2 = 2.44024637934444173e+02
        q3 = 2.36012909523441209e+01
        z = x * x
        return 1.0 - x * ((((p4 * z + p3) * z + p2) * z + p1) * z + p0) / \
            ((((z + q3) * z + q2) * z + q1) * z + q0)

    if x < 4.0:
        p0 = 7.3738883116
        p1 = 6.8650184849
        p2 = 3.0317993362
        p3 = 5.6316961891e-01
        p4 = 4.3187787405e-05
        q0 = 7.3739608908
        q1 = 1.5184908190e+01
        q2 = 1.2795529509e+01
        q3 = 5.3542167949
        return math.exp(-x * x) * ((((p4 * x + p3) * x + p2) * x + p1) * x + p0) / \
            ((((x + q3) * x + q2) * x + q1) * x + q0)

    if x < BIG_VAL:
        z = x * x
        y = math.exp(-z)

        # The product below would underflow
        if x * DBL_MIN > y * ONE_SQRTPI:
            return 0.0

        p0 = -4.25799643553e-02
        p1 = -1.96068973726e-01
        p2 = -5.16882262185e-02
        q0 = 1.50942070545e-01
        q1 = 9.21452411694e-01
        z = 1.0 / z
        z *= ((p2 * z + p1) * z + p0) / ((z + q1) * z + q0)
        return y * (ONE_SQRTPI + z) / x

    return 0.0


@optimized_jit
def erfc(x: float) -> float:
    """Complementary error function of a real argument.

    Total function: never raises, saturates to 2 for very negative x and to
    0 for large x.

    Args:
        x: Real argument

    Returns:
        erfc(x) in [0, 2]
    """
    if x < SMALL_VAL:
        return 2.0
    if x < -DBL_EPSILON:
        # Reflection, -x lands in the non-negative evaluator
        return 2.0 - _erfc_nonnegative(-x)
    return _erfc_nonnegative(x)
