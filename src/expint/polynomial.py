"""
Polynomial evaluation by Horner's scheme.
"""

from typing import Sequence


def evalpoly(x, coefficients: Sequence[float]):
    """
    Evaluate c[0] + c[1]*x + ... + c[n]*x**n by nested multiplication.

    Works for Python and numpy scalars, complex values and traced JAX
    arrays, since only ``*`` and ``+`` are used. The loop unrolls at trace
    time when called inside a jitted function.

    Parameters
    ----------
    x : float, complex or array
        Evaluation point.
    coefficients : sequence of float
        Coefficients in ascending order of power.

    Returns
    -------
    same type as x
        Polynomial value. An empty coefficient list evaluates to 0.0.

    Examples
    --------
    >>> evalpoly(2.0, (1.0, 2.0, 3.0))
    17.0
    """
    if len(coefficients) == 0:
        return 0.0
    result = coefficients[-1]
    for c in reversed(coefficients[:-1]):
        result = result * x + c
    return result
