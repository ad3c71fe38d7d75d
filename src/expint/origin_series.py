"""
Expansion of Eν(z) about the origin.

For non-integer ν (https://functions.wolfram.com/GammaBetaErf/ExpIntegralE/06/01/04/01/01/0003/):

    Eν(z) = Γ(1 - ν) z^(ν-1) - Σₖ (-z)^k / (k! (k + 1 - ν))

For positive integer n the k = n - 1 term of the sum has a vanishing
denominator and is replaced by a logarithmic term
(https://functions.wolfram.com/GammaBetaErf/ExpIntegralE/06/01/04/01/02/0005/):

    En(z) = (-z)^(n-1) / (n-1)! (ψ(n) - log z) - Σₖ≠ₙ₋₁ (-z)^k / (k! (k + 1 - n))

Both series converge for all z but are only used for |z| below
`ORIGIN_EXPAND_THRESHOLD`, where cancellation between terms stays small.
"""

from typing import NamedTuple

import numpy as np
from scipy import special

from .constants import CONVERGENCE_TOLERANCE, SERIES_MAX_TERMS
from .gamma_term import safe_gamma_term


class SeriesResult(NamedTuple):
    """Value of a truncated series and the number of terms summed."""
    value: complex
    terms: int


def is_integer_order(nu) -> bool:
    """True if the complex order ν has zero imaginary part and an integer real part."""
    nu = complex(nu)
    return nu.imag == 0 and float(nu.real).is_integer()


def origin_series_general(nu, z, max_terms=SERIES_MAX_TERMS,
                          tol=CONVERGENCE_TOLERANCE) -> SeriesResult:
    """
    Origin series for Eν(z), valid when k + 1 - ν never vanishes.

    Each term is obtained from the previous one by multiplying with -z/k,
    so no factorials are formed explicitly.

    Parameters
    ----------
    nu : complex
        Order ν, not a positive integer.
    z : complex
        Argument.
    max_terms : int
        Hard cap on the number of terms.
    tol : float
        Relative tolerance on the change of the partial sum.

    Returns
    -------
    SeriesResult
    """
    nu = complex(nu)
    z = complex(z)
    gamma_term = safe_gamma_term(nu, z)

    frac = 1 + 0j
    sum_term = frac / (1 - nu)
    k = 1
    while k < max_terms:
        frac *= -z / k
        prev = sum_term
        sum_term += frac / (k + 1 - nu)
        if abs(sum_term - prev) < tol * abs(sum_term):
            break
        k += 1

    return SeriesResult(gamma_term - sum_term, k)


def origin_series_integer(n: int, z, max_terms=SERIES_MAX_TERMS,
                          tol=CONVERGENCE_TOLERANCE) -> SeriesResult:
    """
    Origin series for En(z) with positive integer order n.

    Parameters
    ----------
    n : int
        Order, n ≥ 1.
    z : complex
        Argument, z ≠ 0.
    max_terms : int
        Hard cap on the number of terms.
    tol : float
        Relative tolerance on the change of the partial sum.

    Returns
    -------
    SeriesResult
    """
    n = int(n)
    if n < 1:
        raise ValueError(f"integer-order origin series requires n >= 1, got n = {n}")
    z = complex(z)

    # (-z)^(n-1) / (n-1)!
    log_term = 1 + 0j
    for i in range(1, n):
        log_term *= -z / i
    log_term *= special.digamma(n) - np.log(z)

    sum_term = 0j if n == 1 else complex(1 / (1 - n))
    frac = 1 + 0j
    k = 1
    while k < max_terms:
        frac *= -z / k
        # the k = n - 1 term is carried by the log term
        if k != n - 1:
            prev = sum_term
            sum_term += frac / (k + 1 - n)
            if abs(sum_term - prev) < tol * abs(sum_term):
                break
        k += 1

    return SeriesResult(complex(log_term - sum_term), k)


def origin_series(nu, z, max_terms=SERIES_MAX_TERMS,
                  tol=CONVERGENCE_TOLERANCE) -> SeriesResult:
    """
    Expansion of Eν(z) about z = 0, choosing the integer or general form.

    Positive integer orders take the logarithmic form. Non-positive integer
    orders have a finite Γ(1 - ν) and no vanishing denominator, so they use
    the general form.
    """
    nu = complex(nu)
    if is_integer_order(nu) and nu.real >= 1:
        return origin_series_integer(int(nu.real), z, max_terms, tol)
    return origin_series_general(nu, z, max_terms, tol)
