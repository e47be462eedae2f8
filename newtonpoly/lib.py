import numpy as np
import numba as nb


FLOAT_DTYPES = (np.dtype(np.float32), np.dtype(np.float64))


@nb.njit
def find_slot(X, x):
    """Index of the first element of `X` that is at least `x`.

    Parameters
    ----------
    X : ndarray(float, 1d)
        Abscissae, expected to be sorted in increasing order.

    x : float
        The value being inserted.

    Returns
    -------
    i : int
        First `i` such that `X[i] >= x`, or `len(X)` if there is none.

    Notes
    -----
    This is a linear scan, not a bisection, so the result is well defined even
    when a merge has left `X` slightly out of order: the first satisfying slot
    wins.  If `x` is NaN, `len(X)` is returned.
    """
    for i in range(len(X)):
        if X[i] >= x:
            return i
    return len(X)


def check_dtype(dtype):
    """Return `dtype` as a numpy dtype, if it is float32 or float64.

    Raises
    ------
    TypeError
        If `dtype` is any other type.
    """
    try:
        dt = np.dtype(dtype)
    except TypeError:
        raise TypeError(f"Expected a float32 or float64 dtype; got {dtype!r}")
    if dt not in FLOAT_DTYPES:
        raise TypeError(f"Expected a float32 or float64 dtype; got {dt}")
    return dt


def as_1d(X, name):
    """View `X` as a 1D float32 or float64 ndarray, without changing its precision.

    Python sequences and integer arrays are promoted to float64.
    """
    X = np.asarray(X)
    if X.dtype.kind in "biu":
        X = X.astype(np.float64)
    check_dtype(X.dtype)
    if X.ndim != 1:
        raise ValueError(f"Expected `{name}` to be 1 dimensional; got {X.ndim} dims")
    return np.ascontiguousarray(X)
