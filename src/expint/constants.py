"""
Numerical constants used throughout expint.

Thresholds, iteration caps and tolerances shared by the series,
continued-fraction and continuation algorithms. Functions that use them
take the value as a keyword default so it can be overridden per call.
"""

import numpy as np

# Euler-Mascheroni constant
euler_gamma = 0.57721566490153286060651209008240243104215933593992

# Machine epsilon for float64
float64_eps = float(np.finfo(np.float64).eps)

# Relative tolerance for series sums and continued-fraction convergents
CONVERGENCE_TOLERANCE = 10 * float64_eps

# |z| below which Eν(z) is evaluated by its expansion about the origin
ORIGIN_EXPAND_THRESHOLD = 3.0

# Continued-fraction iteration cap
DEFAULT_MAX_ITER = 1000

# Term cap for the origin series and the Taylor continuation step
SERIES_MAX_TERMS = 100

# Continuant magnitude at which all four recurrence values are rescaled
RESCALE_THRESHOLD = 1e50

# Largest |Δ| used for a single Taylor continuation step
TAYLOR_MAX_STEP = 0.5

# Imaginary-part boundary min(1 + 0.5|ν|, 50) below which the continued
# fraction converges too slowly for Re(z) < 0 (empirical, 500 iterations)
STEPPING_BOUNDARY_SCALE = 0.5
STEPPING_BOUNDARY_CAP = 50.0

# Upper bound on how many times the seed search doubles its imaginary offset
MAX_SEED_DOUBLINGS = 10

# E1(x) underflows to zero in double precision at and above this x
E1_UNDERFLOW = 740.0

# The gamma decomposition Γ(1-ν)z^(ν-1) + correction is only trusted while
# |gamma term| ≤ GAMMA_CANCELLATION_LIMIT·|Eν| with Eν from the gamma-free fraction
GAMMA_CANCELLATION_LIMIT = 10.0
