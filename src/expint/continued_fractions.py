"""
Continued fractions for the generalized exponential integral Eν(z).

Two representations are implemented:

- `cf_nogamma`: a continued fraction free of the gamma function
  (https://functions.wolfram.com/GammaBetaErf/ExpIntegralE/10/0001/),
  valid for all ν.
- `cf_gamma`: Γ(1 - ν) z^(ν-1) plus a continued-fraction correction
  (https://functions.wolfram.com/GammaBetaErf/ExpIntegralE/10/0005/).

Both are evaluated with the fundamental recurrences for the numerator A
and denominator B of the convergent A/B. The recurrence state is carried in
an immutable `ContinuantState` so that each step can be checked on its own.
`cf_select` picks whichever representation is better conditioned.
"""

from typing import NamedTuple

import numpy as np

from .constants import (CONVERGENCE_TOLERANCE, DEFAULT_MAX_ITER, GAMMA_CANCELLATION_LIMIT,
                        RESCALE_THRESHOLD)
from .gamma_term import safe_gamma_term


class ContinuantState(NamedTuple):
    """
    Numerators and denominators of the two most recent convergents.

    The current convergent is ``A / B`` and the previous one is
    ``A_prev / B_prev``.
    """
    A: complex
    A_prev: complex
    B: complex
    B_prev: complex

    @property
    def convergent(self) -> complex:
        return self.A / self.B


def advance(state: ContinuantState, a, b) -> ContinuantState:
    """
    Apply one step of the fundamental recurrence.

    A ← a·A + b·A_prev and B ← a·B + b·B_prev, shifting the old values into
    the ``_prev`` slots.
    """
    return ContinuantState(
        A=a * state.A + b * state.A_prev,
        A_prev=state.A,
        B=a * state.B + b * state.B_prev,
        B_prev=state.B,
    )


def has_converged(state: ContinuantState, tol=CONVERGENCE_TOLERANCE) -> bool:
    """
    Relative convergence test |A_prev·B - A·B_prev| < tol·|B·B_prev|.

    This is the relative difference between the last two convergents.
    """
    cross = state.A_prev * state.B - state.A * state.B_prev
    return abs(cross) < tol * abs(state.B * state.B_prev)


def rescale(state: ContinuantState, threshold=RESCALE_THRESHOLD) -> ContinuantState:
    """
    Divide all four values by ``threshold`` once A or B grows past it.

    The ratios A/B and A_prev/B_prev are unchanged.
    """
    A = complex(state.A)
    B = complex(state.B)
    if max(abs(A.real), abs(A.imag), abs(B.real), abs(B.imag)) > threshold:
        return ContinuantState(*(v / threshold for v in state))
    return state


class ContinuedFractionResult(NamedTuple):
    """Result of `cf_nogamma`."""
    value: complex
    iterations: int
    converged: bool


class GammaFractionResult(NamedTuple):
    """Result of `cf_gamma`, keeping the two additive parts separate."""
    gamma_part: complex
    cf_part: complex
    iterations: int
    converged: bool

    @property
    def value(self) -> complex:
        return self.gamma_part + self.cf_part


class SelectedFraction(NamedTuple):
    """Result of `cf_select`."""
    value: complex
    iterations: int
    converged: bool
    used_gamma: bool


def _times_exp_minus_z(cf_part, z) -> complex:
    exp_part = np.exp(-z)
    if np.isinf(exp_part.real) and np.isinf(exp_part.imag):
        # factor the infinity out so that inf * 0 cannot produce NaN
        factor = complex(np.sign(exp_part.real), np.sign(exp_part.imag))
        w = factor * cf_part
        return complex(np.inf * w.real, np.inf * w.imag)
    return complex(cf_part * exp_part)


def cf_nogamma(nu, z, max_iter=DEFAULT_MAX_ITER, tol=CONVERGENCE_TOLERANCE,
               rescale_threshold=RESCALE_THRESHOLD) -> ContinuedFractionResult:
    """
    Evaluate Eν(z) with the gamma-free continued fraction.

    Each iteration performs two recurrence steps, one per layer of the
    fraction ``z + (i-1)/(1 + (ν+i-1)/(z + ...))``.

    Parameters
    ----------
    nu : complex
        Order ν.
    z : complex
        Argument, z ≠ 0.
    max_iter : int
        Iteration cap; the loop runs at most ``max_iter - 1`` iterations.
        Hitting the cap is not an error.
    tol : float
        Relative convergence tolerance.
    rescale_threshold : float
        Magnitude at which the recurrence state is rescaled.

    Returns
    -------
    ContinuedFractionResult
        ``(A/B)·exp(-z)``, the iteration count, and whether the
        convergence test was met.
    """
    nu = complex(nu)
    z = complex(z)
    state = ContinuantState(A=np.complex128(1), A_prev=np.complex128(1),
                            B=np.complex128(z + nu), B_prev=np.complex128(z))

    iterations = 0
    converged = False
    with np.errstate(over='ignore', invalid='ignore', divide='ignore'):
        for i in range(2, max_iter + 1):
            iterations += 1
            state = advance(state, z, i - 1)
            state = advance(state, 1, nu + i - 1)
            if has_converged(state, tol):
                converged = True
                break
            state = rescale(state, rescale_threshold)

        value = _times_exp_minus_z(state.convergent, z)

    return ContinuedFractionResult(value, iterations, converged)


def cf_gamma(nu, z, max_iter=DEFAULT_MAX_ITER, tol=CONVERGENCE_TOLERANCE,
             rescale_threshold=RESCALE_THRESHOLD) -> GammaFractionResult:
    """
    Evaluate Eν(z) as Γ(1 - ν) z^(ν-1) plus a continued-fraction part.

    The correction is -exp(-z)·z^(ν-1)·γ(1-ν, z), with the lower incomplete
    gamma function expanded as

        γ(a, z) = z^a exp(-z) / (a - a z/(a+1 + z/(a+2 - (a+1) z/(a+3 + 2z/(...)))))

    for a = 1 - ν. The partial denominators are i - ν; the partial numerators
    alternate between -(i/2 - ν)·z for even i and ((i-1)/2)·z for odd i.
    Convergence is only accepted once i > Re(ν): while partial denominators
    still have negative real part the convergents can stall on a wrong value.

    Parameters
    ----------
    nu : complex
        Order ν.
    z : complex
        Argument, z ≠ 0.
    max_iter : int
        Iteration cap, as in `cf_nogamma`.
    tol : float
        Relative convergence tolerance.
    rescale_threshold : float
        Magnitude at which the recurrence state is rescaled.

    Returns
    -------
    GammaFractionResult
        The gamma term (see `safe_gamma_term`), the continued-fraction part
        ``-exp(-z)·A/B``, the iteration count and the convergence flag.
        A/B converges to exp(z)·z^(ν-1)·γ(1-ν, z).
    """
    nu = complex(nu)
    z = complex(z)
    # state after the leading 1/(1 - ν) layer
    state = ContinuantState(A=np.complex128(1), A_prev=np.complex128(0),
                            B=np.complex128(1 - nu), B_prev=np.complex128(1))

    iterations = 0
    converged = False
    with np.errstate(over='ignore', invalid='ignore', divide='ignore'):
        for i in range(2, max_iter + 1):
            iterations += 1
            if i % 2 == 0:
                numerator = -(i // 2 - nu) * z
            else:
                numerator = (i // 2) * z
            state = advance(state, i - nu, numerator)
            if i > nu.real and has_converged(state, tol):
                converged = True
                break
            state = rescale(state, rescale_threshold)

        cf_part = complex(-np.exp(-z) * state.convergent)

    return GammaFractionResult(safe_gamma_term(nu, z), cf_part, iterations, converged)


def cf_select(nu, z, max_iter=DEFAULT_MAX_ITER) -> SelectedFraction:
    """
    Evaluate Eν(z) with the better conditioned continued fraction.

    The gamma decomposition is trusted when its gamma term is finite,
    larger than 1 in magnitude and larger than the correction term, and the
    gamma term is at most `GAMMA_CANCELLATION_LIMIT` times |Eν(z)| as
    estimated by the gamma-free fraction; otherwise the gamma-free fraction
    is used. The magnitude comes from the gamma-free fraction because a
    correction term that has lost accuracy can make the gamma sum look
    well conditioned.
    """
    with_gamma = cf_gamma(nu, z, max_iter)
    gamma_abs = np.abs(with_gamma.gamma_part)
    cf_abs = np.abs(with_gamma.cf_part)
    dominant = np.isfinite(gamma_abs) and gamma_abs > 1.0 and gamma_abs > cf_abs

    without_gamma = cf_nogamma(nu, z, max_iter)
    if dominant and gamma_abs <= GAMMA_CANCELLATION_LIMIT * np.abs(without_gamma.value):
        return SelectedFraction(with_gamma.value, with_gamma.iterations,
                                with_gamma.converged, True)

    return SelectedFraction(without_gamma.value, without_gamma.iterations,
                            without_gamma.converged, False)
