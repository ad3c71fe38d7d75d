"""
Overflow-safe evaluation of the term Γ(1 - ν) z^(ν - 1).

This term appears in the expansion of Eν(z) about the origin and in the
gamma-containing continued fraction. Either factor can overflow on its own
while the product is representable, so the product falls back to
exp((ν - 1) log z + log Γ(1 - ν)) whenever a factor is infinite.
"""

import numpy as np
from scipy import special


def is_gamma_pole(w) -> bool:
    """True if Γ(w) has a pole at w, i.e. w is a non-positive integer."""
    w = complex(w)
    return w.imag == 0 and w.real <= 0 and float(w.real).is_integer()


def safe_gamma_term(nu, z):
    """
    Compute Γ(1 - ν) z^(ν - 1) without spurious overflow.

    Parameters
    ----------
    nu : complex
        Order ν.
    z : complex
        Argument, principal branch of the power.

    Returns
    -------
    complex
        The product. Complex +inf at the poles of Γ(1 - ν) (ν a positive
        integer), and 0 when Γ(1 - ν) underflows to 0.
    """
    nu = complex(nu)
    z = complex(z)
    w = 1 - nu
    if is_gamma_pole(w):
        return complex(np.inf, 0.0)

    with np.errstate(over='ignore', invalid='ignore', divide='ignore'):
        g = special.gamma(w)
        p = np.power(z, nu - 1)
        if np.isinf(g) or np.isinf(p):
            return complex(np.exp((nu - 1) * np.log(z) + special.loggamma(w)))
    if g == 0:
        return 0j
    return complex(g * p)
