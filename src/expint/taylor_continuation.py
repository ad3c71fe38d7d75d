"""
Analytic continuation of Eν(z) by Taylor steps.

Given Eν(z₀), the value at z₀ + Δ follows from the Taylor expansion in Δ
described by Amos (1980), "Computation of Exponential Integrals",
ACM TOMS 6(3). The coefficients of exp(z₀)·Eν(z₀ + Δ) satisfy a short
recurrence in k, so each term is built from the previous coefficient and Δ,
divided by z₀. Convergence is fast for |Δ| ≤ 0.5, so longer distances are
covered in several steps along a straight line.
"""

import math
from typing import NamedTuple

import numpy as np

from .constants import CONVERGENCE_TOLERANCE, SERIES_MAX_TERMS, TAYLOR_MAX_STEP


class ContinuationResult(NamedTuple):
    """Value reached by `walk_to`, the point it belongs to and the number of steps."""
    value: complex
    z: complex
    steps: int


def taylor_step(nu, start, z0, delta, max_terms=SERIES_MAX_TERMS,
                tol=CONVERGENCE_TOLERANCE) -> complex:
    """
    Compute Eν(z₀ + Δ) from start = Eν(z₀).

    Parameters
    ----------
    nu : complex
        Order ν.
    start : complex
        Eν(z₀).
    z0 : complex
        Expansion point, z₀ ≠ 0.
    delta : complex
        Displacement Δ, ideally |Δ| ≤ 0.5.
    max_terms : int
        Cap on the number of Taylor terms.
    tol : float
        Relative tolerance on the change of the partial sum.

    Returns
    -------
    complex
        Eν(z₀ + Δ).
    """
    nu = complex(nu)
    z0 = np.complex128(z0)
    delta = complex(delta)

    with np.errstate(over='ignore', invalid='ignore'):
        a = np.exp(z0) * start
        a_sum = a
        # (-Δ)^(k+1) / (k+1)!
        delta_power = -delta
        for k in range(max_terms):
            a = (delta_power + a * delta * (nu - k - 1) / (k + 1)) / z0
            a_prev = a_sum
            a_sum = a_sum + a
            if np.abs(a_sum - a_prev) < tol * np.abs(a_sum):
                break
            delta_power *= -delta / (k + 2)

        return complex(np.exp(-z0) * a_sum)


def walk_to(nu, start, z0, target, max_step=TAYLOR_MAX_STEP,
            max_terms=SERIES_MAX_TERMS) -> ContinuationResult:
    """
    Carry Eν from z₀ to ``target`` in equal Taylor steps of size ≤ max_step.

    Parameters
    ----------
    nu : complex
        Order ν.
    start : complex
        Eν(z₀).
    z0 : complex
        Starting point.
    target : complex
        End point. The straight segment from z₀ must avoid the origin.
    max_step : float
        Largest allowed |Δ|.
    max_terms : int
        Term cap for each step.

    Returns
    -------
    ContinuationResult
        Value at the end point, the end point as accumulated from the steps,
        and the number of steps. A zero-length walk returns ``start``.
    """
    z = complex(z0)
    distance = abs(complex(target) - z)
    n_steps = math.ceil(distance / max_step)
    if n_steps == 0:
        return ContinuationResult(complex(start), z, 0)

    delta = (complex(target) - z) / n_steps
    value = complex(start)
    for _ in range(n_steps):
        value = taylor_step(nu, value, z, delta, max_terms)
        z += delta

    return ContinuationResult(value, z, n_steps)
