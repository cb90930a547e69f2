"""pgmath Kernel Module.

Scalar numerical kernels, implemented using Numba JIT.

Submodules:
    math: Special functions (erfc, lgamma, confluent ratio, incomplete gamma)
    truncated_gamma: Left-truncated Gamma sampler

All kernels take and return float64 scalars and can be called from user
@njit code.
"""

from . import math
from . import truncated_gamma

__all__ = [
    'math',
    'truncated_gamma',
]
