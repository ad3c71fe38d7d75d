"""
Pytest configuration for expint tests.

This file ensures JAX x64 mode is enabled before any tests run and provides
arbitrary-precision reference values from mpmath.
"""

import os

# Set x64 mode via environment variable BEFORE any imports
os.environ["JAX_ENABLE_X64"] = "true"

# Now import expint which will also set x64 mode
import expint  # noqa: E402, F401

import mpmath  # noqa: E402
import pytest  # noqa: E402

REFERENCE_DPS = 30


@pytest.fixture(scope="session")
def reference_e1():
    """E1(x) for real x > 0 at 30 significant digits, rounded to float."""
    def _e1(x):
        with mpmath.workdps(REFERENCE_DPS):
            return float(mpmath.e1(mpmath.mpf(x)))
    return _e1


@pytest.fixture(scope="session")
def reference_en():
    """Eν(z) at 30 significant digits, rounded to complex."""
    def _en(nu, z):
        nu = complex(nu)
        z = complex(z)
        with mpmath.workdps(REFERENCE_DPS):
            n = mpmath.mpf(nu.real) if nu.imag == 0 else mpmath.mpc(nu.real, nu.imag)
            w = mpmath.mpf(z.real) if z.imag == 0 else mpmath.mpc(z.real, z.imag)
            return complex(mpmath.expint(n, w))
    return _en


@pytest.fixture(scope="session")
def reference_gamma():
    """Γ(w) at 30 significant digits, rounded to complex."""
    def _gamma(w):
        w = complex(w)
        with mpmath.workdps(REFERENCE_DPS):
            return complex(mpmath.gamma(mpmath.mpc(w.real, w.imag)))
    return _gamma
