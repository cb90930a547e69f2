"""Deterministic generators for the sampler kernels.

The sampler kernels only need two methods from a generator:

    random() -> float in [0, 1)
    standard_exponential() -> float >= 0

``numpy.random.Generator`` provides both in nopython mode. ``ReplayGenerator``
is a jitclass with the same two methods that replays fixed sequences and
counts how many draws were consumed, which makes rejection loops
reproducible draw by draw.
"""

from typing import Sequence

import numpy as np
from numba import float64, int64
from numba.experimental import jitclass

__all__ = [
    'ReplayGenerator',
    'make_replay_generator',
]


_spec = [
    ('uniforms', float64[:]),
    ('exponentials', float64[:]),
    ('n_uniform', int64),
    ('n_exponential', int64),
]


@jitclass(_spec)
class ReplayGenerator:
    """Generator replaying fixed uniform and exponential draws.

    Attributes:
        uniforms: Values returned by random(), in order
        exponentials: Values returned by standard_exponential(), in order
        n_uniform: Number of uniform draws consumed so far
        n_exponential: Number of exponential draws consumed so far
    """

    def __init__(self, uniforms, exponentials):
        self.uniforms = uniforms
        self.exponentials = exponentials
        self.n_uniform = 0
        self.n_exponential = 0

    def random(self):
        if self.n_uniform >= self.uniforms.shape[0]:
            raise IndexError("ReplayGenerator: uniform draws exhausted")
        u = self.uniforms[self.n_uniform]
        self.n_uniform += 1
        return u

    def standard_exponential(self):
        if self.n_exponential >= self.exponentials.shape[0]:
            raise IndexError("ReplayGenerator: exponential draws exhausted")
        e = self.exponentials[self.n_exponential]
        self.n_exponential += 1
        return e


def make_replay_generator(
    uniforms: Sequence[float] = (),
    exponentials: Sequence[float] = ()
) -> ReplayGenerator:
    """Build a ReplayGenerator from any float sequences.

    Args:
        uniforms: Draws for random(), each in [0, 1)
        exponentials: Draws for standard_exponential(), each >= 0

    Returns:
        ReplayGenerator with both counters at zero
    """
    u = np.ascontiguousarray(uniforms, dtype=np.float64).reshape(-1)
    e = np.ascontiguousarray(exponentials, dtype=np.float64).reshape(-1)
    return ReplayGenerator(u, e)
