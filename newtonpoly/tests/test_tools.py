import numpy as np
import pytest

from newtonpoly import make_newton, polint, polint_u, polyvl, polyvl_u

N = 3  # number of interpolation problems
K = 6  # number of points in each problem

X = np.tile(np.linspace(0, 10, K) ** 1.2, (N, 1))
Y = np.stack([np.sqrt(X[0]), np.cos(X[0] / 4), X[0] ** 2 - X[0]])


@pytest.mark.parametrize(
    "out,kind,fcn",
    [
        ("coeffs", "1", polint),
        ("coeffs", "u", polint_u),
        ("interp", "1", polyvl),
        ("interp", "u", polyvl_u),
    ],
)
def test_make_newton(out, kind, fcn):
    assert make_newton(out, kind) is fcn


def test_make_newton_bad_args():
    with pytest.raises(ValueError):
        make_newton("ppc", "1")
    with pytest.raises(ValueError):
        make_newton("coeffs", "n")


def test_universal_matches_single():
    build = make_newton("coeffs", "u")
    evaluate = make_newton("interp", "u")
    C = build(X, Y)
    x = np.array([0.5, 3.3, 14.0])
    y = evaluate(x, X, C)
    for i in range(N):
        Ci = make_newton("coeffs", "1")(X[i], Y[i])
        assert np.allclose(C[i], Ci)
        assert np.isclose(y[i], make_newton("interp", "1")(x[i], X[i], Ci))
