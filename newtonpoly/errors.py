"""
Exceptions raised when building or evaluating a Newton interpolating polynomial,
and the status codes returned by the `numba` kernels that detect them.

The kernels in `.polint` cannot raise informative exceptions from inside
`nopython` code, so they return one of the status codes below.  The checked
wrappers (`polint`, `polyvl`) translate a failing status into an exception
with `raise_for_status`.
"""

POLINT_SUCCESS = 0
POLINT_FAILURE = -1  # no data
POLINT_NOT_DISTINCT = -2  # two abscissae are exactly equal


class InterpolationError(ValueError):
    """Base class for failures of the Newton interpolation routines."""


class EmptyInput(InterpolationError):
    """The builder or the evaluator was given zero interpolation points."""

    def __init__(self, msg="No interpolation points were given."):
        super().__init__(msg)


class EmptyCoefficients(EmptyInput):
    """The evaluator was given abscissae but no coefficients."""

    def __init__(self, msg="No coefficients were given; call `interpolate` first."):
        super().__init__(msg)


class AbscissaeNotDistinct(InterpolationError):
    """Two abscissae are exactly equal, so no interpolating polynomial exists.

    Parameters
    ----------
    i, k : int or None
        Indices of the offending pair of abscissae, when known.
    """

    def __init__(self, i=None, k=None):
        self.i = i
        self.k = k
        if i is None:
            msg = "Abscissae are not distinct."
        else:
            msg = f"Abscissae are not distinct: X[{i}] == X[{k}]."
        super().__init__(msg)


def raise_for_status(status, X=None):
    """Raise the exception matching a `_polint` status code.

    Parameters
    ----------
    status : int
        Status returned by `newtonpoly.polint._polint`.

    X : ndarray, optional
        The abscissae given to `_polint`.  If given and `status` signals
        non-distinct abscissae, the first offending pair is located and reported.
    """
    if status == POLINT_SUCCESS:
        return
    if status == POLINT_FAILURE:
        raise EmptyInput()
    if status == POLINT_NOT_DISTINCT:
        i = k = None
        if X is not None:
            # Same visiting order as the kernel: k ascending, then i ascending.
            for kk in range(1, len(X)):
                for ii in range(kk):
                    if X[ii] == X[kk]:
                        i, k = ii, kk
                        break
                if i is not None:
                    break
        raise AbscissaeNotDistinct(i, k)
    raise InterpolationError(f"Unknown status {status}")
