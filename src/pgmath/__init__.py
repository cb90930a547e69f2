"""pgmath: special functions and a truncated Gamma sampler, compiled with Numba.

Public API:
    erfc(x)                                   complementary error function
    lgamma(z)                                 log-gamma, z > 0
    confluent_ratio(p, x)                     confluent hypergeometric ratio G(p, x)
    upper_incomplete_gamma(p, x, normalized)  Q(p, x) or Gamma(p, x)
    random_left_bounded_gamma(rng, a, b, t)   Gamma(a, rate=b) draw conditioned on > t
    sample_left_truncated_gamma(a, b, t, random_state=None)
                                              checked Python entry point for the sampler
"""

import logging

from .optim import (
    enable_logging,
    disable_logging,
    warmup,
)

from .kernel.math import (
    erfc,
    lgamma,
    confluent_ratio,
    upper_incomplete_gamma,
)

from .kernel.truncated_gamma import (
    random_left_bounded_gamma,
    sample_left_truncated_gamma,
)

from ._numba import (
    ReplayGenerator,
    make_replay_generator,
)

__version__ = '0.1.0'

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    '__version__',

    # Special functions
    'erfc',
    'lgamma',
    'confluent_ratio',
    'upper_incomplete_gamma',

    # Sampling
    'random_left_bounded_gamma',
    'sample_left_truncated_gamma',
    'ReplayGenerator',
    'make_replay_generator',

    # Ambient
    'enable_logging',
    'disable_logging',
    'warmup',
]
