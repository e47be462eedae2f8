import functools as ft
from importlib import import_module


@ft.lru_cache(maxsize=10)
def make_newton(out="coeffs", kind="1"):
    """Select a function for Newton polynomial interpolation.

    Parameters
    ----------

    out : str, Default "coeffs"
        If `"coeffs"`, return a function that builds the Newton coefficients,
        taking `X` and `Y`.

        If `"interp"`, return a function that evaluates a Newton polynomial,
        taking `x`, `X` and `C`.

    kind : str, Default "1"
        Either "1" (single; a checked function for one interpolation problem,
        raising `newtonpoly.errors.InterpolationError` on bad data) or "u"
        (universal; a `numba.guvectorize`d function looping over many
        broadcastable problems, signalling bad data with NaN).

    Returns
    -------
    f : function
        One of `polint`, `polint_u`, `polyvl`, `polyvl_u`.

    Examples
    --------
    >>> build = make_newton("coeffs", "u")
    >>> evaluate = make_newton("interp", "u")
    >>> C = build(X, Y)  # X, Y of shape (m, n): m problems of n points each
    >>> y = evaluate(x, X, C)  # x of shape (m,)
    """

    if out not in ("coeffs", "interp"):
        raise ValueError(f"Expected `out` in ('coeffs', 'interp'); got {out}")

    if kind not in ("1", "u"):
        raise ValueError(f"Expected `kind` in ('1', 'u'); got {kind}")

    module = "polint" if out == "coeffs" else "polyvl"
    fcn_name = module + ("_u" if kind == "u" else "")

    # Below is equivalent to
    # from newtonpoly.`module` import `fcn_name`
    return getattr(import_module("newtonpoly." + module), fcn_name)
