"""
Imaginary part of Eν(x) on the negative real axis for real order ν.

For real ν and x < 0, approached from above
(https://functions.wolfram.com/GammaBetaErf/ExpIntegralE/04/05/01/0003/):

    Im Eν(x + i0) = Im[π i exp(-iπν) x^(ν-1) / Γ(ν)] = -π |x|^(ν-1) / Γ(ν)

with the principal power of the negative real x. For complex ν the
bracketed term is not the imaginary part of Eν, so the closed form is
only offered for real orders.
"""

import numpy as np
from scipy import special


def branch_cut_imag(nu, x) -> complex:
    """
    Return i·Im Eν(x) for real ν and x on the negative real axis.

    Parameters
    ----------
    nu : real
        Order ν. A complex value is accepted only if its imaginary part is 0.
    x : real or complex
        Point on the negative real axis; only its real part is used.

    Returns
    -------
    complex
        Purely imaginary value. Zero when ν is a non-positive integer,
        where 1/Γ(ν) vanishes.

    Raises
    ------
    ValueError
        If ν has a non-zero imaginary part.
    """
    nu = complex(nu)
    if nu.imag != 0:
        raise ValueError(f"branch-cut closed form requires a real order, got nu = {nu}")
    nu = nu.real
    # +0.0 imaginary part keeps the power on the upper side of the cut
    x = complex(complex(x).real, 0.0)
    with np.errstate(over='ignore', invalid='ignore'):
        im_part = (np.pi * 1j * np.exp(-np.pi * 1j * nu)
                   * np.power(x, nu - 1) * special.rgamma(nu))
    return complex(0.0, float(np.imag(im_part)))
