"""
Incremental polynomial interpolation in one dimension.

Interpolation is done in two steps:
    1. Compute the coefficients of the Newton form of the interpolating
       polynomial, by divided differences (`polint`),
    2. Evaluate the polynomial by nested multiplication (`polyvl`).

`PolyInterpolator` wraps both steps around a set of points that grows one
point at a time, merging points whose abscissae are too close together.

The core numerical methods handle just one interpolation problem.  The `"_u"`
variants are "universal", handling many mutually broadcastable problems with
one call, via `numba`'s `guvectorize` decorator.  `make_newton` selects among
these variants.

Everything works in either single or double precision, chosen by the dtype of
the input data.
"""

__version__ = "1.0.0"

import importlib as _importlib

# Import from modules
from .errors import InterpolationError, EmptyInput, EmptyCoefficients
from .errors import AbscissaeNotDistinct
from .interpolator import PolyInterpolator
from .polint import polint, polint_u
from .polyvl import polyvl, polyvl_u
from .tools import make_newton

# List of modules not explicitly imported above
modules = ["errors", "interpolator", "lib", "polint", "polyvl", "tools"]

__all__ = modules + [
    k for (k, v) in locals().items() if callable(v) and not k.startswith("_")
]  # all local, public functions and classes


def __dir__():
    return __all__


# Lazy load of submodules
def __getattr__(name):
    if name in modules:
        return _importlib.import_module(f"newtonpoly.{name}")
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(f"Module 'newtonpoly' has no attribute '{name}'")
