"""
expint: exponential integrals E1(x) and Eν(z) in double precision.

E1 evaluates the real first-order exponential integral with fixed
piecewise approximations; En evaluates the generalized exponential integral
for complex order and argument by choosing between origin series,
continued fractions and Taylor continuation.
"""

# Enable 64-bit precision in JAX; the real E1 kernel is jitted and must
# run in double precision.
# Note: If jax has already been imported elsewhere, you may need to set
# the environment variable JAX_ENABLE_X64=true before running Python.
import os
os.environ.setdefault("JAX_ENABLE_X64", "true")
import jax
jax.config.update("jax_enable_x64", True)

__version__ = "0.1.0"

from . import constants
from .constants import ORIGIN_EXPAND_THRESHOLD
from .real_e1 import DomainError, expint_e1
from .en import ConvergenceWarning, EnResult, Region, En, evaluate_en

E1 = expint_e1

__all__ = [
    # Version
    "__version__",
    # Submodules
    "constants",
    # Entry points
    "E1",
    "En",
    "expint_e1",
    "evaluate_en",
    # Diagnostics
    "EnResult",
    "Region",
    # Errors and warnings
    "DomainError",
    "ConvergenceWarning",
    # Configuration
    "ORIGIN_EXPAND_THRESHOLD",
]
