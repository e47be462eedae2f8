"""
Newton divided differences: the coefficients of the polynomial interpolating
a set of points.

Adapted from the SLATEC routine POLINT,
https://netlib.org/slatec/src/polint.f
"""

import numpy as np
import numba as nb

from .errors import POLINT_SUCCESS, POLINT_FAILURE, POLINT_NOT_DISTINCT
from .errors import raise_for_status
from .lib import as_1d


@nb.njit
def _polint(X, Y, C):
    """
    The "kernel" of Newton divided differences, computed in place.

    Parameters
    ----------
    X : ndarray(float, 1d)
        The independent data.  Need not be sorted, but must be distinct.

    Y : ndarray(float, 1d)
        The dependent data, with the same length as `X`.

    C : ndarray(float, 1d)
        Output array, with the same length as `X`.  On success, `C` holds the
        coefficients of the Newton form of the interpolating polynomial,
            P(t) = C[0] + C[1] (t - X[0]) + C[2] (t - X[0]) (t - X[1]) + ...
        On failure, `C` is partially written and must not be used.

    Returns
    -------
    status : int
        `POLINT_SUCCESS`, or `POLINT_FAILURE` if `X` is empty, or
        `POLINT_NOT_DISTINCT` if two elements of `X` are exactly equal.

    Notes
    -----
    Each pass over `k` needs `C[0:k]` fully updated by the previous pass, so the
    loop order (`k` ascending, then `i` ascending) must be kept as is.

    The arithmetic is done in the precision of the inputs; `numba` compiles a
    separate specialization for float32 and for float64 data.
    """
    n = len(X)
    if n == 0:
        return POLINT_FAILURE

    C[0] = Y[0]
    for k in range(1, n):
        C[k] = Y[k]
        for i in range(k):
            dif = X[i] - X[k]
            if dif == 0:  # exact test; no tolerance
                return POLINT_NOT_DISTINCT
            C[k] = (C[i] - C[k]) / dif

    return POLINT_SUCCESS


def polint(X, Y):
    """
    Coefficients of the Newton form of the polynomial interpolating `Y` at `X`.

    Parameters
    ----------
    X : ndarray(float, 1d)
        Independent data, with distinct elements.

    Y : ndarray(float, 1d)
        Dependent data, with the same length and dtype as `X`.

    Returns
    -------
    C : ndarray(float, 1d)
        Newton coefficients, with the same dtype as `X`.  Evaluate the
        polynomial at `x` by `polyvl(x, X, C)`.

    Raises
    ------
    EmptyInput
        If `X` is empty.

    AbscissaeNotDistinct
        If two elements of `X` are exactly equal.

    Examples
    --------
    >>> X = np.array([0.0, 1.0, 2.0])
    >>> C = polint(X, X ** 2)
    >>> C
    array([0., 1., 1.])
    """
    X = as_1d(X, "X")
    Y = as_1d(Y, "Y")
    if X.dtype != Y.dtype:
        raise TypeError(f"Expected `X` and `Y` of equal dtype; got {X.dtype}, {Y.dtype}")
    if len(X) != len(Y):
        raise ValueError(
            f"Expected `X` and `Y` of equal length; got {len(X)}, {len(Y)}"
        )

    C = np.empty_like(X)
    raise_for_status(_polint(X, Y, C), X)
    return C


@nb.guvectorize(
    [
        (nb.f4[:], nb.f4[:], nb.f4[:]),
        (nb.f8[:], nb.f8[:], nb.f8[:]),
    ],
    "(n),(n)->(n)",
    nopython=True,
)
def polint_u(X, Y, C):
    """
    Universal version of `polint`, for many interpolation problems at once.

    `X` and `Y` may be N-dimensional, so long as they are mutually
    broadcastable; each 1D problem lies along their last dimension.
    A problem with no data or with repeated abscissae gets all-NaN coefficients
    rather than raising an exception.
    """
    if _polint(X, Y, C) != POLINT_SUCCESS:
        C[:] = np.nan
