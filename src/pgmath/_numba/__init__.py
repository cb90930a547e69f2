"""Numba types used by the pgmath kernels."""

from ._generators import (
    ReplayGenerator,
    make_replay_generator,
)

__all__ = [
    'ReplayGenerator',
    'make_replay_generator',
]
