"""
An incremental polynomial interpolator.

Points are added one at a time with `PolyInterpolator.add`, and kept sorted by
abscissa.  No two abscissae may be alike, so points whose abscissae are within
a threshold of an existing point merge into it, at the arithmetic mean of all
the points merged there.  Once all points are in, `interpolate` builds the
Newton coefficients, and the interpolator can be called to evaluate the
polynomial.
"""

import warnings

import numpy as np

from .errors import raise_for_status
from .lib import check_dtype, find_slot
from .polint import _polint
from .polyvl import polyvl


class PolyInterpolator:
    """
    Polynomial interpolator over a growing set of points.

    Parameters
    ----------
    thres : float, Default 0.0
        Minimum separation between abscissae.  A new point whose abscissa is
        within `thres` of a neighbour merges into that neighbour.  With the
        default, only points of exactly equal abscissa merge.

    dtype : data-type, Default numpy.float64
        Precision of the stored data and of all arithmetic: `numpy.float32` or
        `numpy.float64`.  Fixed for the life of the interpolator.

    verbose : bool, Default False
        If True, print a message whenever a point merges into an existing one.

    Notes
    -----
    The points are held in four index-aligned arrays: abscissae `X`, ordinates
    `Y`, merge counts `N` and Newton coefficients `C`.  Every mutation builds its
    new values first and then assigns them, so an exception part way through
    `add` leaves all four arrays as they were.

    The coefficients are not rebuilt automatically.  After any `add`, call
    `interpolate` again before evaluating; otherwise the results are
    meaningless.  `stale` reports whether this is needed.

    Merging moves the merged abscissa to the mean of its points.  If `thres`
    is comparable to the spacing of the points, a merged abscissa can round
    onto its neighbour, so the abscissae are no longer strictly increasing.  They
    are not re-sorted, and `interpolate` then raises `AbscissaeNotDistinct`.

    An interpolator is meant to have a single owner.  Concurrent calls to
    `evaluate` are safe, but `add`, `interpolate` and `clear` must not overlap
    with any other call.

    Examples
    --------
    >>> poly = PolyInterpolator(thres=0.2)
    >>> poly.add(1.0, 10.0)
    >>> poly.add(1.1, 20.0)  # merges with the first point
    >>> poly.size()
    1
    >>> poly.interpolate()
    >>> float(poly(5.0))
    15.0
    """

    def __init__(self, thres=0.0, dtype=np.float64, verbose=False):
        self._dtype = check_dtype(dtype).type
        self._thres = self._dtype(0)
        self.verbose = verbose
        self.clear()
        self.set_threshold(thres)

    def __repr__(self):
        return (
            f"{type(self).__name__}(size={self.size()}, thres={self._thres}, "
            f"dtype={np.dtype(self._dtype).name})"
        )

    def __len__(self):
        return self.size()

    def __call__(self, x):
        return self.evaluate(x)

    @property
    def dtype(self):
        return np.dtype(self._dtype)

    @property
    def thres(self):
        """Minimum separation between abscissae."""
        return self._thres

    @property
    def stale(self):
        """True if the points changed since the coefficients were last built."""
        return self._stale

    @property
    def abscissae(self):
        return self._X.copy()

    @property
    def ordinates(self):
        return self._Y.copy()

    @property
    def counts(self):
        return self._N.copy()

    @property
    def coefficients(self):
        return self._C.copy()

    def set_threshold(self, value):
        """Set the minimum separation between abscissae.

        A negative (or NaN) `value` is ignored, keeping the previous threshold,
        and a `RuntimeWarning` is issued.
        """
        value = self._dtype(value)
        if 0 <= value:
            self._thres = value
        else:
            warnings.warn(
                f"Ignoring invalid threshold {value}; keeping {self._thres}",
                RuntimeWarning,
                2,
            )

    def add(self, x, y):
        """Add the point `(x, y)`, merging it into a neighbour if one is within `thres`."""
        x = self._dtype(x)
        y = self._dtype(y)
        X = self._X

        # First i with X[i] >= x, or len(X) if there is none
        i = find_slot(X, x)

        if i > 0 and x - X[i - 1] <= self._thres:
            self._merge(i - 1, x, y)
        elif i < len(X) and X[i] - x <= self._thres:
            self._merge(i, x, y)
        else:
            X, Y, N, C = (
                np.insert(X, i, x),
                np.insert(self._Y, i, y),
                np.insert(self._N, i, 1),
                np.insert(self._C, i, 0),
            )
            self._X, self._Y, self._N, self._C = X, Y, N, C

        self._stale = True

    def _merge(self, i, x, y):
        # Running mean, weighted by the number of points already merged here
        n = self._dtype(self._N[i])
        X_i = (x + self._X[i] * n) / (n + 1)
        Y_i = (y + self._Y[i] * n) / (n + 1)

        if self.verbose:
            print(
                f"Merged ({x}, {y}) into point {i}: "
                f"({self._X[i]}, {self._Y[i]}) -> ({X_i}, {Y_i}), "
                f"{self._N[i] + 1} points"
            )

        self._X[i] = X_i
        self._Y[i] = Y_i
        self._N[i] += 1

    def extend(self, xs, ys):
        """Add each of the points `(xs[j], ys[j])` in turn.

        Raises `ValueError`, having added nothing, if `xs` and `ys` differ in
        length.
        """
        xs = np.ravel(xs)
        ys = np.ravel(ys)
        if len(xs) != len(ys):
            raise ValueError(
                f"Expected `xs` and `ys` of equal length; got {len(xs)}, {len(ys)}"
            )
        for x, y in zip(xs, ys):
            self.add(x, y)

    def interpolate(self):
        """Build the Newton coefficients from the current points.

        Raises
        ------
        EmptyInput
            If no points have been added.

        AbscissaeNotDistinct
            If two abscissae are exactly equal.  The coefficients are then
            unusable; do not evaluate until `interpolate` succeeds.
        """
        self._stale = True
        raise_for_status(_polint(self._X, self._Y, self._C), self._X)
        self._stale = False

    def evaluate(self, x):
        """Evaluate the interpolating polynomial at `x`.

        With no points, `x` itself is returned.  Otherwise the result has the
        precision of the interpolator: a numpy scalar for scalar `x`, else an
        ndarray shaped like `x`.
        """
        if self.size() == 0:
            return x
        return polyvl(x, self._X, self._C)

    def size(self):
        """Number of (possibly merged) interpolating points."""
        return len(self._N)

    def clear(self):
        """Remove all points.  The threshold and precision are kept."""
        self._X = np.empty(0, dtype=self._dtype)
        self._Y = np.empty(0, dtype=self._dtype)
        self._C = np.empty(0, dtype=self._dtype)
        self._N = np.empty(0, dtype=np.int64)
        self._stale = True
