"""
Evaluate the Newton form of an interpolating polynomial by nested
multiplication.

Adapted from the SLATEC routine POLYVL (without its derivative terms),
https://netlib.org/slatec/src/polyvl.f
"""

import numpy as np
import numba as nb

from .errors import EmptyInput, EmptyCoefficients
from .lib import as_1d


@nb.njit
def _polyvl(x, X, C):
    """
    The "kernel" of evaluating a Newton polynomial.

    Parameters
    ----------
    x : float
        Evaluation site.  Should have the same dtype as `X` and `C`.

    X : ndarray(float, 1d)
        The abscissae given to `polint`.  `len(X) >= 1` is assumed, not checked.

    C : ndarray(float, 1d)
        The coefficients returned by `polint` for these `X`.

    Returns
    -------
    y : float
        The polynomial evaluated at `x`.

    Notes
    -----
    The products
        pi_k = (x - X[0]) (x - X[1]) ... (x - X[k-1])
    are accumulated left to right alongside the partial sums, so
        y = C[0] + pi_1 C[1] + pi_2 C[2] + ...
    in O(n) time.  The first product is `(x - X[0]) * 1`, taken here as just
    `x - X[0]` so that no literal promotes float32 data to float64.
    """
    n = len(X)
    pone = C[0]
    if n == 1:
        return pone

    pione = x - X[0]
    pone = pone + pione * C[1]
    for k in range(2, n):
        pione = (x - X[k - 1]) * pione
        pone = pone + pione * C[k]

    return pone


@nb.guvectorize(
    [
        (nb.f4, nb.f4[:], nb.f4[:], nb.f4[:]),
        (nb.f8, nb.f8[:], nb.f8[:], nb.f8[:]),
    ],
    "(),(n),(n)->()",
    nopython=True,
)
def polyvl_u(x, X, C, y):
    """
    Universal version of `polyvl`.

    `x` may be N-dimensional and `X`, `C` may be (N+1)-dimensional, so long as
    they are mutually broadcastable.  A problem with no data evaluates to NaN.
    """
    if len(X) == 0:
        y[0] = np.nan
    else:
        y[0] = _polyvl(x, X, C)


def polyvl(x, X, C):
    """
    Evaluate a Newton polynomial built by `polint`.

    Parameters
    ----------
    x : float or ndarray
        Evaluation site(s).  Cast to the dtype of `X`.

    X : ndarray(float, 1d)
        The abscissae given to `polint`.

    C : ndarray(float, 1d)
        The coefficients returned by `polint`.  Pairing `C` with the same `X`
        that built it is the caller's responsibility.

    Returns
    -------
    y : float or ndarray
        The polynomial evaluated at `x`: a numpy scalar of the dtype of `X` when
        `x` is a scalar, else an ndarray shaped like `x`.

    Raises
    ------
    EmptyInput
        If `X` is empty.

    EmptyCoefficients
        If `C` is empty but `X` is not.
    """
    X = as_1d(X, "X")
    C = as_1d(C, "C")
    if len(X) == 0:
        raise EmptyInput()
    if len(C) == 0:
        raise EmptyCoefficients()
    if len(X) != len(C):
        raise ValueError(
            f"Expected `X` and `C` of equal length; got {len(X)}, {len(C)}"
        )
    if X.dtype != C.dtype:
        raise TypeError(f"Expected `X` and `C` of equal dtype; got {X.dtype}, {C.dtype}")

    dtype = X.dtype.type
    if np.ndim(x) == 0:
        # numba returns a Python float; restore the precision of the data.
        return dtype(_polyvl(dtype(x), X, C))
    return polyvl_u(np.asarray(x, dtype=X.dtype), X, C)
