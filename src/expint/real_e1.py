"""
Double-precision first-order exponential integral for real arguments.

Implements E1(x) = ∫₁^∞ exp(-x*t) / t dt for x ≥ 0 using piecewise
approximations: truncated Taylor series about the origin for x ≤ 2.15 and
rational continued-fraction approximants exp(-x) * N(x) / D(x) above.
The breakpoints and orders are

    x ≤ 4.4e-3   Taylor, order 4
    x ≤ 0.053    Taylor, order 8
    x ≤ 0.6      Taylor, order 15
    x ≤ 2.15     Taylor, order 37
    x < 3        continued fraction, depth 18
    x < 4        continued fraction, depth 16
    x < 6.1      continued fraction, depth 14
    x < 8.15     continued fraction, depth 9
    x < 25       continued fraction, depth 8
    x < 200      continued fraction, depth 8
    x < 740      continued fraction, depth 4
    x ≥ 740      0 (exp(-x) underflows)

Accurate to a few ulps over the whole range.
"""

import numpy as np
import jax.numpy as jnp
from jax import jit

from . import e1_coefficients as coef
from .constants import E1_UNDERFLOW
from .polynomial import evalpoly


class DomainError(ValueError):
    """Raised when a real-only function receives an argument outside its domain."""
    pass


def _taylor(x, coefficients):
    return evalpoly(x, coefficients) - jnp.log(x)


def _rational(x, numerator, denominator):
    return jnp.exp(-x) * evalpoly(x, numerator) / evalpoly(x, denominator)


@jit
def _e1_piecewise(x):
    """
    Piecewise E1(x) kernel for x ≥ 0.

    No argument checking is done here; see `expint_e1`.

    Parameters
    ----------
    x : float or array
        Non-negative argument.

    Returns
    -------
    float or array
        E1(x), with +inf at x = 0 and 0 for x ≥ 740.
    """
    # Taylor branches near the origin
    small = jnp.where(
        x <= 4.4e-3,
        _taylor(x, coef.TAYLOR_ORDER_4),
        jnp.where(
            x <= 0.053,
            _taylor(x, coef.TAYLOR_ORDER_8),
            jnp.where(
                x <= 0.6,
                _taylor(x, coef.TAYLOR_ORDER_15),
                _taylor(x, coef.TAYLOR_ORDER_37)
            )
        )
    )

    # Rational approximants, fewer terms as x grows
    large = jnp.where(
        x < 3.0,
        _rational(x, coef.CF_X_LT_3_NUM, coef.CF_X_LT_3_DEN),
        jnp.where(
            x < 4.0,
            _rational(x, coef.CF_X_LT_4_NUM, coef.CF_X_LT_4_DEN),
            jnp.where(
                x < 6.1,
                _rational(x, coef.CF_X_LT_6_1_NUM, coef.CF_X_LT_6_1_DEN),
                jnp.where(
                    x < 8.15,
                    _rational(x, coef.CF_X_LT_8_15_NUM, coef.CF_X_LT_8_15_DEN),
                    jnp.where(
                        x < 25.0,
                        _rational(x, coef.CF_X_LT_25_NUM, coef.CF_X_LT_25_DEN),
                        jnp.where(
                            x < 200.0,
                            _rational(x, coef.CF_X_LT_200_NUM, coef.CF_X_LT_200_DEN),
                            _rational(x, coef.CF_X_LT_740_NUM, coef.CF_X_LT_740_DEN)
                        )
                    )
                )
            )
        )
    )

    return jnp.where(
        x == 0.0,
        jnp.inf,
        jnp.where(
            x <= 2.15,
            small,
            jnp.where(x < E1_UNDERFLOW, large, 0.0)
        )
    )


def expint_e1(x) -> float:
    """
    Compute the exponential integral E1(x) for real x ≥ 0.

    E1(x) = ∫₁^∞ exp(-x*t) / t dt

    Parameters
    ----------
    x : real scalar
        Argument. Integers and numpy scalars are converted to float.

    Returns
    -------
    float
        E1(x). Returns +inf at x = 0 and exactly 0.0 for x ≥ 740.
        NaN input gives NaN.

    Raises
    ------
    DomainError
        If x < 0.

    Examples
    --------
    >>> expint_e1(0.0)
    inf
    >>> expint_e1(1.0)  # doctest: +SKIP
    0.21938393439552029
    """
    x = float(x)
    if x < 0:
        raise DomainError(f"E1 requires a non-negative argument, got x = {x}")
    if np.isnan(x):
        return x
    return float(_e1_piecewise(x))
