"""Eager compilation of the pgmath kernels.

Numba compiles a kernel on its first call, which makes the first draw or
evaluation orders of magnitude slower than the rest. ``warmup`` triggers
compilation for float64 arguments up front and logs how long each kernel
took.
"""

import time
from typing import Dict, Optional

import numpy as np

from ._logging import get_logger

__all__ = [
    'warmup',
]


_log = get_logger('warmup')


def warmup(rng: Optional[np.random.Generator] = None) -> Dict[str, float]:
    """Compile every public kernel for float64 arguments.

    Args:
        rng: Generator used to compile the sampler. A fresh
            ``numpy.random.default_rng()`` is used when omitted.

    Returns:
        Mapping of kernel name to first-call wall time in seconds.
    """
    # Imported here: kernel modules import optim at import time
    from pgmath.kernel.math import (
        erfc, lgamma, confluent_ratio, upper_incomplete_gamma,
    )
    from pgmath.kernel.truncated_gamma import random_left_bounded_gamma

    if rng is None:
        rng = np.random.default_rng()

    calls = (
        ('erfc', lambda: erfc(0.5)),
        ('lgamma', lambda: lgamma(2.5)),
        ('confluent_ratio', lambda: confluent_ratio(2.5, 1.5)),
        ('upper_incomplete_gamma', lambda: upper_incomplete_gamma(2.5, 1.5, True)),
        ('random_left_bounded_gamma', lambda: random_left_bounded_gamma(rng, 2.5, 1.0, 1.0)),
    )

    timings = {}
    for name, call in calls:
        start = time.perf_counter()
        call()
        timings[name] = time.perf_counter() - start
        _log.info("compiled %s in %.3fs", name, timings[name])

    return timings
