"""JIT configuration defaults.

All kernels in pgmath are compiled through ``optimized_jit``, which merges
per-kernel options over the defaults defined here.

Defaults:
    nogil=True          kernels are pure and release the GIL
    cache=False         on-disk cache, enable with PGMATH_JIT_CACHE=1
    fastmath=False      the DBL_MIN underflow guards need strict IEEE semantics
    boundscheck=False
    error_model='numpy' division by zero yields inf/nan instead of raising
"""

import os
from typing import Any, Dict

__all__ = [
    'JIT_DEFAULTS',
    'jit_options',
    'env_flag',
]


_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})


def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


JIT_DEFAULTS: Dict[str, Any] = {
    'nogil': True,
    'cache': env_flag('PGMATH_JIT_CACHE'),
    'fastmath': False,
    'boundscheck': False,
    'error_model': 'numpy',
}


def jit_options(**overrides) -> Dict[str, Any]:
    """Return the default numba options with ``overrides`` applied.

    Args:
        **overrides: numba ``njit`` keyword arguments

    Returns:
        New dict, the defaults are never mutated.
    """
    options = dict(JIT_DEFAULTS)
    options.update(overrides)
    return options
