"""Numerical constants shared by the pgmath kernels.

Module-level floats and arrays are frozen into compiled code by Numba, so
kernels read them at no cost.
"""

import sys

__all__ = [
    'PI2_8',
    'LOGPI_2',
    'LS2PI',
    'MAX_EXP',
    'ONE_SQRTPI',
    'DBL_EPSILON',
    'DBL_MIN',
    'CONFLUENT_EPSILON',
    'CONFLUENT_MAX_TERMS',
]


PI2_8 = 1.233700550136169  # pi^2 / 8
LOGPI_2 = 0.4515827052894548  # log(pi / 2)
LS2PI = 0.9189385332046727  # log(sqrt(2 * pi))
MAX_EXP = 708.3964202663686  # maximum allowed exp() argument
ONE_SQRTPI = 0.5641895835477563  # 1 / sqrt(pi)

DBL_EPSILON = sys.float_info.epsilon
DBL_MIN = sys.float_info.min

# Modified Lentz stopping rule
CONFLUENT_EPSILON = 1e-07
CONFLUENT_MAX_TERMS = 100
