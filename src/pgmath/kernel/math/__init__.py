"""Special Function Kernels.

Scalar special functions compiled with Numba, accurate to about 1e-9
relative error against the C library / scipy.special equivalents.

Strategy:
    - Table lookups and published rational approximations, no runtime fits
    - Saturate instead of overflowing: results stay finite
    - Every kernel is a plain scalar function callable from @njit code

Submodules:
    erfc: Complementary error function
    lgamma: Log-gamma function with a log-factorial table
    confluent: Continued fractions for the confluent ratio G(p, x)
    igamma: Upper incomplete gamma function, normalized or raw
"""

from ._constants import (
    PI2_8,
    LOGPI_2,
    LS2PI,
    MAX_EXP,
    ONE_SQRTPI,
    DBL_EPSILON,
    DBL_MIN,
    CONFLUENT_EPSILON,
    CONFLUENT_MAX_TERMS,
)

from ._erfc import erfc

from ._lgamma import (
    lgamma,
    LOGFACTORIAL,
)

from ._confluent import (
    lentz_x_smaller,
    lentz_p_smaller,
    confluent_x_smaller,
    confluent_p_smaller,
    confluent_ratio,
)

from ._igamma import (
    gammaq_integer_series,
    gammaq_half_integer_series,
    gammaq_continued_fraction,
    upper_incomplete_gamma,
)

__all__ = [
    # Constants
    'PI2_8',
    'LOGPI_2',
    'LS2PI',
    'MAX_EXP',
    'ONE_SQRTPI',
    'DBL_EPSILON',
    'DBL_MIN',
    'CONFLUENT_EPSILON',
    'CONFLUENT_MAX_TERMS',

    # Error function
    'erfc',

    # Log-gamma
    'lgamma',
    'LOGFACTORIAL',

    # Continued fractions
    'lentz_x_smaller',
    'lentz_p_smaller',
    'confluent_x_smaller',
    'confluent_p_smaller',
    'confluent_ratio',

    # Incomplete gamma
    'gammaq_integer_series',
    'gammaq_half_integer_series',
    'gammaq_continued_fraction',
    'upper_incomplete_gamma',
]
