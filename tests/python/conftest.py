"""Pytest configuration for pgmath tests."""

import sys
import os

# Add src to path so pgmath can be imported without installing
_src = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..', 'src'))
if _src not in sys.path:
    sys.path.insert(0, _src)

import pytest
import numpy as np

from pgmath.optim import disable_logging

disable_logging()


# =============================================================================
# Markers
# =============================================================================

def pytest_configure(config):
    config.addinivalue_line("markers", "slow: slow tests")


# =============================================================================
# Fixtures - Generators
# =============================================================================

@pytest.fixture
def rng():
    """Seeded numpy Generator."""
    return np.random.default_rng(42)


@pytest.fixture
def replay():
    """Factory for ReplayGenerator with fixed draws."""
    from pgmath import make_replay_generator
    return make_replay_generator


# =============================================================================
# Fixtures - Argument Grids
# =============================================================================

@pytest.fixture
def erfc_grid():
    """Arguments covering every erfc region, away from subnormal results."""
    return np.concatenate([
        np.linspace(-7.0, -0.01, 200),
        np.array([-1e-17, 0.0, 1e-17, 1e-10, 1e-5]),
        np.linspace(0.01, 25.0, 500),
    ])


@pytest.fixture
def lgamma_grid():
    """Non-integer positive arguments covering every lgamma branch."""
    z = np.concatenate([
        np.geomspace(1e-12, 0.49, 60),
        np.linspace(0.5, 1.5, 41),
        np.linspace(1.51, 3.99, 50),
        np.linspace(4.0, 12.0, 81),
        np.geomspace(12.01, 1e6, 60),
    ])
    return z[z != np.round(z)]
