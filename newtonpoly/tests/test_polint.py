import numpy as np
import pytest

from newtonpoly import polint, polint_u, polyvl
from newtonpoly import AbscissaeNotDistinct, EmptyInput
from newtonpoly.errors import POLINT_SUCCESS, POLINT_FAILURE, POLINT_NOT_DISTINCT
from newtonpoly.polint import _polint
from scipy.interpolate import BarycentricInterpolator

K = 8  # number of interpolation points

# Distinct, non-uniform, unsorted independent data
rng = np.random.default_rng(seed=42)
X1 = np.linspace(-1.0, 1.0, K) + rng.uniform(-0.05, 0.05, K)
X1 = X1[rng.permutation(K)]
Y1 = np.sin(2 * X1) + 0.5 * X1**2

# Tolerance per precision
tol = {np.float32: 1e-4, np.float64: 1e-10}


@pytest.mark.parametrize("dtype", [np.float32, np.float64])
def test_polint_reproduces_data(dtype):
    X = X1.astype(dtype)
    Y = Y1.astype(dtype)
    C = polint(X, Y)
    assert C.dtype == dtype

    y = np.array([polyvl(x, X, C) for x in X])
    assert np.allclose(y, Y, rtol=0, atol=tol[dtype])


def test_polint_random_ordinates():
    # Interpolation is exact at the abscissae for arbitrary ordinates
    for n in range(1, 11):
        X = np.linspace(-1.0, 1.0, n) + rng.uniform(-0.05, 0.05, n)
        Y = rng.normal(0.0, 10.0, n)
        C = polint(X, Y)
        y = np.array([polyvl(x, X, C) for x in X])
        assert np.allclose(y, Y, rtol=1e-10, atol=1e-8)


def test_polint_vs_scipy():
    X = np.sort(X1)
    x_midpts = X[0:-1] + np.diff(X) / 2
    fn = BarycentricInterpolator(X, Y1[np.argsort(X1)])
    C = polint(X, Y1[np.argsort(X1)])
    y = np.array([polyvl(x, X, C) for x in x_midpts])
    assert np.allclose(y, fn(x_midpts))


def test_polint_known_coeffs():
    # x^2 = 0 + 1 (x - 0) + 1 (x - 0) (x - 1)
    X = np.array([0.0, 1.0, 2.0])
    C = polint(X, X**2)
    assert np.array_equal(C, [0.0, 1.0, 1.0])


def test_polint_single_point():
    C = polint([4.0], [-3.0])
    assert np.array_equal(C, [-3.0])


def test_polint_empty():
    with pytest.raises(EmptyInput):
        polint([], [])


def test_polint_not_distinct():
    X = np.array([0.0, 2.0, 1.0, 2.0])
    with pytest.raises(AbscissaeNotDistinct) as excinfo:
        polint(X, np.ones(4))
    assert (excinfo.value.i, excinfo.value.k) == (1, 3)


def test_polint_bad_args():
    with pytest.raises(ValueError):
        polint([0.0, 1.0], [0.0])
    with pytest.raises(TypeError):
        polint(np.zeros(2, dtype=np.float32), np.zeros(2, dtype=np.float64))
    with pytest.raises(ValueError):
        polint(np.zeros((2, 2)), np.zeros((2, 2)))


def test_kernel_status():
    X = np.array([0.0, 1.0, 1.0])
    C = np.empty(3)
    assert _polint(X[:0], X[:0], C[:0]) == POLINT_FAILURE
    assert _polint(X[:2], X[:2], C[:2]) == POLINT_SUCCESS
    assert _polint(X, X, C) == POLINT_NOT_DISTINCT


@pytest.mark.parametrize("dtype", [np.float32, np.float64])
def test_polint_u(dtype):
    N = 4  # number of interpolation problems
    X = np.tile(np.sort(X1), (N, 1)).astype(dtype)
    Y = np.stack([np.sin(X1), np.cos(X1), X1**3, np.ones(K)]).astype(dtype)
    X[3, 5] = X[3, 4]  # repeated abscissa in the last problem

    C = polint_u(X, Y)
    assert C.shape == (N, K)
    assert C.dtype == dtype

    for i in range(N - 1):
        assert np.array_equal(C[i], polint(X[i], Y[i]))
    assert np.all(np.isnan(C[N - 1]))
