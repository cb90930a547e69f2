"""Left-Truncated Gamma Sampler.

Draws X ~ Gamma(shape=a, rate=b) conditioned on X > t.

Regimes:
    a > 1:   rejection from a shifted exponential envelope, Dagpunar (1978)
    a == 1:  truncated exponential, t + E / b
    a < 1:   rejection from a shifted Pareto-like proposal, algorithm A4 of
             Philippe (1997)

The generator is passed in by the caller and only needs ``random()`` and
``standard_exponential()``; ``numpy.random.Generator`` and
``pgmath.ReplayGenerator`` both work. Acceptance tests use log1p(-u)
instead of log(1 - u).

Design:
    - random_left_bounded_gamma: nopython kernel, no argument checks
    - sample_left_truncated_gamma: Python entry point that validates
      arguments and builds a generator from ``random_state``

References:
    Dagpunar, J. S. (1978). Sampling of variates from a truncated gamma
    distribution. Journal of Statistical Computation and Simulation, 8(1),
    59-64.
    Philippe, A. (1997). Simulation of right and left truncated gamma
    distributions by mixtures. Statistics and Computing, 7, 173-181.
"""

import math

import numpy as np

from pgmath.optim import optimized_jit, get_logger

__all__ = [
    'random_left_bounded_gamma',
    'sample_left_truncated_gamma',
]


_log = get_logger('truncated_gamma')


# =============================================================================
# Kernel
# =============================================================================

@optimized_jit
def random_left_bounded_gamma(rng, a: float, b: float, t: float) -> float:
    """Sample from Gamma(a, rate=b) truncated to (t, inf).

    Each rejection round draws one exponential, then one uniform. The
    a == 1 case draws a single exponential.

    Args:
        rng: Generator with random() and standard_exponential()
        a: Shape, a > 0
        b: Rate, b > 0
        t: Truncation point, t > 0

    Returns:
        A draw greater than or equal to t
    """
    if a > 1.0:
        # Work with the rate-1 variable scaled so the bound sits at b * t
        b = t * b
        amin1 = a - 1.0
        bmina = b - a
        c0 = 0.5 * (bmina + math.sqrt(bmina * bmina + 4.0 * b)) / b
        one_minus_c0 = 1.0 - c0
        log_m = amin1 * (math.log(amin1 / one_minus_c0) - 1.0)

        while True:
            x = b + rng.standard_exponential() / c0
            threshold = amin1 * math.log(x) - x * one_minus_c0 - log_m
            if math.log1p(-rng.random()) <= threshold:
                return t * (x / b)

    if a == 1.0:
        return t + rng.standard_exponential() / b

    amin1 = a - 1.0
    tb = t * b
    while True:
        x = 1.0 + rng.standard_exponential() / tb
        if math.log1p(-rng.random()) <= amin1 * math.log(x):
            return t * x


# =============================================================================
# Python Entry Point
# =============================================================================

def _as_generator(random_state):
    """Turn ``random_state`` into something the kernel can draw from."""
    if isinstance(random_state, np.random.RandomState):
        raise TypeError(
            "numpy.random.RandomState is not supported, "
            "pass a numpy.random.Generator instead"
        )
    if isinstance(random_state, np.random.Generator):
        return random_state
    if hasattr(random_state, 'standard_exponential') and hasattr(random_state, 'random'):
        return random_state
    return np.random.default_rng(random_state)


def sample_left_truncated_gamma(a: float, b: float, t: float, random_state=None) -> float:
    """Draw one sample from Gamma(a, rate=b) truncated to (t, inf).

    Args:
        a: Shape, finite and > 0
        b: Rate, finite and > 0
        t: Truncation point, finite and > 0
        random_state: None, an int seed, a SeedSequence, a BitGenerator,
            a numpy.random.Generator or a ReplayGenerator. Generators are
            advanced in place.

    Returns:
        The sample as a float

    Raises:
        ValueError: If a, b or t is not a finite positive number
        TypeError: If random_state is a legacy RandomState
    """
    for name, value in (('a', a), ('b', b), ('t', t)):
        if not (math.isfinite(value) and value > 0):
            raise ValueError(f"`{name}` must be a finite positive number, got {value!r}")

    rng = _as_generator(random_state)
    _log.debug("left-truncated gamma draw a=%r b=%r t=%r", a, b, t)
    return random_left_bounded_gamma(rng, float(a), float(b), float(t))
