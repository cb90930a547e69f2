"""JIT Decorator for pgmath Kernels.

This module provides the decorator every pgmath kernel is compiled with.
It wraps Numba's @njit and applies the package-wide defaults from
``_config`` (strict IEEE math, numpy error model, GIL released).

The decorator returns the plain Numba Dispatcher, so decorated kernels can
call each other in nopython mode and can be called from user @njit code.

Usage:
    from pgmath.optim import optimized_jit

    @optimized_jit
    def half(x):
        return 0.5 * x

Options:
    @optimized_jit(cache=True, inline='always')
    def my_func(...):
        ...
"""

from typing import Callable, Dict, List, Optional, Union

from numba import njit
from numba.core.dispatcher import Dispatcher

from ._config import jit_options
from ._logging import get_logger


__all__ = [
    'optimized_jit',
    'registered_kernels',
]


_log = get_logger('jit')

# name -> dispatcher, in registration order
_REGISTRY: Dict[str, Dispatcher] = {}


# =============================================================================
# JIT Decorator
# =============================================================================

def optimized_jit(
    func: Optional[Callable] = None,
    **numba_options
) -> Union[Callable[[Callable], Dispatcher], Dispatcher]:
    """JIT decorator for scalar numerical kernels.

    Args:
        func: Function to compile (when used without parentheses)
        **numba_options: Numba ``njit`` options, merged over JIT_DEFAULTS

    Returns:
        Numba Dispatcher wrapping the function

    Example:
        @optimized_jit
        def square(x):
            return x * x

        @optimized_jit(inline='always')
        def cube(x):
            return x * x * x
    """
    options = jit_options(**numba_options)

    def decorator(fn: Callable) -> Dispatcher:
        dispatcher = njit(**options)(fn)
        name = f"{fn.__module__}.{fn.__qualname__}"
        _REGISTRY[name] = dispatcher
        _log.debug("registered kernel %s with options %s", name, options)
        return dispatcher

    # Handle both @optimized_jit and @optimized_jit()
    if func is not None:
        return decorator(func)
    return decorator


def registered_kernels() -> List[str]:
    """Names of all kernels compiled through optimized_jit so far."""
    return list(_REGISTRY)
