"""
Generalized exponential integral Eν(z) for complex order and argument.

Eν(z) = ∫₁^∞ exp(-z*t) / t^ν dt, continued analytically to the whole
complex plane with the branch cut along the negative real axis.

The evaluation is split into regions:

1. z = 0 and ν = 0 have closed forms.
2. If exp(-z)/z underflows to 0 the result is 0.
3. |z| < `ORIGIN_EXPAND_THRESHOLD`: series about the origin.
4. Otherwise a continued fraction. The gamma-containing fraction is used
   when its gamma term dominates, the gamma-free fraction for Re(z) > 0.
5. Re(z) ≤ 0 with small |Im z|: the continued fraction converges poorly, so
   the value is computed at a seed point higher up in the plane and carried
   down to z by Taylor steps. On the negative real axis with real ν the
   imaginary part is then replaced by its closed form.

Conjugate symmetry Eν̄(z̄) = conj(Eν(z)) is used so that only Im z ≥ 0 has
to be handled in step 5.
"""

import enum
import warnings
from typing import NamedTuple

import numpy as np

from .branch_cut import branch_cut_imag
from .constants import (DEFAULT_MAX_ITER, MAX_SEED_DOUBLINGS, ORIGIN_EXPAND_THRESHOLD,
                        STEPPING_BOUNDARY_CAP, STEPPING_BOUNDARY_SCALE, TAYLOR_MAX_STEP)
from .continued_fractions import cf_select
from .origin_series import origin_series
from .taylor_continuation import walk_to


class ConvergenceWarning(RuntimeWarning):
    """Issued when a returned value comes from a continued fraction that hit its iteration cap."""
    pass


class Region(enum.Enum):
    """Which algorithm produced an Eν(z) value."""
    ZERO_ARGUMENT = "zero_argument"
    ZERO_ORDER = "zero_order"
    UNDERFLOW = "underflow"
    ORIGIN_SERIES = "origin_series"
    CF_GAMMA = "cf_gamma"
    CF_NO_GAMMA = "cf_nogamma"
    TAYLOR_STEPPING = "taylor_stepping"


class EnResult(NamedTuple):
    """
    Eν(z) together with diagnostics.

    ``iterations`` is the number of continued-fraction iterations behind the
    value (for Taylor stepping, those of the seed), the number of series
    terms in the origin region, and 0 for closed forms. ``converged`` is
    False only if that continued fraction hit its cap.
    """
    value: complex
    region: Region
    iterations: int
    converged: bool


def stepping_boundary(nu) -> float:
    """Imaginary part above which the continued fraction is used directly when Re(z) ≤ 0."""
    return min(1.0 + STEPPING_BOUNDARY_SCALE * abs(nu), STEPPING_BOUNDARY_CAP)


def _fraction_region(used_gamma: bool) -> Region:
    return Region.CF_GAMMA if used_gamma else Region.CF_NO_GAMMA


def _warn_unconverged(nu, z, iterations, stacklevel):
    warnings.warn(
        f"continued fraction for E_nu(z) did not converge in {iterations} "
        f"iterations (nu = {nu}, z = {z}); returning best estimate",
        ConvergenceWarning,
        stacklevel=stacklevel,
    )


def _find_seed(nu, re_z, boundary, max_iter):
    """
    Evaluate Eν at Re(z) + i·s, doubling s from ``boundary`` until the
    continued fraction converges or `MAX_SEED_DOUBLINGS` is reached.
    """
    im_start = boundary
    z0 = complex(re_z, im_start)
    seed = cf_select(nu, z0, max_iter)
    doublings = 0
    while not seed.converged and doublings < MAX_SEED_DOUBLINGS:
        im_start *= 2
        z0 = complex(re_z, im_start)
        seed = cf_select(nu, z0, max_iter)
        doublings += 1
    return z0, seed


def _left_half_plane(nu, z, max_iter) -> EnResult:
    """Eν(z) for Re(z) ≤ 0 and Im(z) ≥ 0, outside the origin region."""
    # warnings point at the caller of evaluate_en, two frames up
    boundary = stepping_boundary(nu)
    if z.imag > boundary:
        res = cf_select(nu, z, max_iter)
        if not res.converged:
            _warn_unconverged(nu, z, res.iterations, stacklevel=4)
        return EnResult(res.value, _fraction_region(res.used_gamma),
                        res.iterations, res.converged)

    z0, seed = _find_seed(nu, z.real, boundary, max_iter)
    if not seed.converged:
        _warn_unconverged(nu, z0, seed.iterations, stacklevel=4)

    value = walk_to(nu, seed.value, z0, z, TAYLOR_MAX_STEP).value
    # the closed form holds for real ν only; otherwise the walked value stands
    if z.imag == 0 and nu.imag == 0:
        value = value.real + branch_cut_imag(nu, z)

    return EnResult(complex(value), Region.TAYLOR_STEPPING,
                    seed.iterations, seed.converged)


def evaluate_en(nu, z, max_iter=DEFAULT_MAX_ITER,
                origin_threshold=ORIGIN_EXPAND_THRESHOLD) -> EnResult:
    """
    Compute Eν(z) and report how it was obtained.

    Parameters
    ----------
    nu : complex
        Order ν.
    z : complex
        Argument.
    max_iter : int
        Continued-fraction iteration cap.
    origin_threshold : float
        |z| below which the series about the origin is used.

    Returns
    -------
    EnResult
        Value, region, iteration count and convergence flag.
    """
    nu = complex(nu)
    z = complex(z)

    if z == 0:
        if nu != 1 and nu.real > 0:
            value = 1.0 / (nu - 1)
        else:
            value = complex(np.inf, 0.0)
        return EnResult(complex(value), Region.ZERO_ARGUMENT, 0, True)

    with np.errstate(over='ignore', invalid='ignore'):
        asymptote = complex(np.exp(-z) / z)
    if nu == 0:
        return EnResult(asymptote, Region.ZERO_ORDER, 0, True)
    # https://functions.wolfram.com/GammaBetaErf/ExpIntegralE/06/02/0003/
    if asymptote == 0:
        return EnResult(0j, Region.UNDERFLOW, 0, True)

    if abs(z) < origin_threshold:
        series = origin_series(nu, z)
        return EnResult(series.value, Region.ORIGIN_SERIES, series.terms, True)

    guess = cf_select(nu, z, max_iter)
    if guess.used_gamma or z.real > 0:
        if not guess.converged:
            _warn_unconverged(nu, z, guess.iterations, stacklevel=3)
        return EnResult(guess.value, _fraction_region(guess.used_gamma),
                        guess.iterations, guess.converged)

    conjugate = z.imag < 0
    if conjugate:
        z = z.conjugate()
        nu = nu.conjugate()

    res = _left_half_plane(nu, z, max_iter)
    if conjugate:
        res = res._replace(value=res.value.conjugate())
    return res


def En(nu, z, max_iter=DEFAULT_MAX_ITER,
       origin_threshold=ORIGIN_EXPAND_THRESHOLD) -> complex:
    """
    Compute the generalized exponential integral Eν(z).

    Parameters
    ----------
    nu : complex
        Order ν.
    z : complex
        Argument. On the negative real axis the value above the cut is
        returned.
    max_iter : int
        Continued-fraction iteration cap. Non-convergence is not an error;
        see `evaluate_en` for the diagnostics.
    origin_threshold : float
        |z| below which the series about the origin is used.

    Returns
    -------
    complex
        Eν(z). At z = 0 this is 1/(ν - 1) for Re(ν) > 0, ν ≠ 1, and +inf
        otherwise.

    Examples
    --------
    >>> En(0, 2.0)  # doctest: +SKIP
    (0.06766764161830635+0j)
    >>> En(1, 1.0)  # doctest: +SKIP
    (0.21938393439552029+0j)
    """
    return evaluate_en(nu, z, max_iter, origin_threshold).value
