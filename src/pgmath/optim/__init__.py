"""pgmath Optimization Toolkit.

JIT, configuration and logging support shared by every pgmath kernel.

Quick Start:
    from pgmath.optim import optimized_jit

    @optimized_jit
    def scaled_log(x, s):
        return s * math.log(x)

Available Components:

    JIT Decorators:
        - optimized_jit: @njit with the package defaults (strict IEEE math,
          numpy error model, nogil)
        - registered_kernels: names of kernels compiled so far

    Configuration:
        - JIT_DEFAULTS: default numba options
        - jit_options: defaults merged with overrides

    Logging:
        - enable_logging(level): attach a stream handler to the pgmath logger
        - disable_logging(): silence the pgmath logger
        - get_logger(name): package logger or a child of it

    Utilities:
        - warmup(rng): compile every kernel ahead of first use
"""

from ._config import (
    JIT_DEFAULTS,
    jit_options,
)

from ._logging import (
    logger,
    get_logger,
    enable_logging,
    disable_logging,
)

from ._jit import (
    optimized_jit,
    registered_kernels,
)

from ._warmup import warmup

__all__ = [
    # Configuration
    'JIT_DEFAULTS',
    'jit_options',

    # Logging
    'logger',
    'get_logger',
    'enable_logging',
    'disable_logging',

    # JIT Decorators
    'optimized_jit',
    'registered_kernels',

    # Utilities
    'warmup',
]
