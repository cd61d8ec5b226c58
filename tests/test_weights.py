import warnings
import pytest
import numpy as np
from gaussquad.config import config
from scipy.special import roots_legendre
from gaussquad import legendre_coefficients, parity, find_roots, \
    compute_weights, DegenerateRoot, ToleranceWarning

def rule(N):
    a = legendre_coefficients(N)
    m = parity(N)
    x = find_roots(a, N, m)[0]
    return x, compute_weights(x, a, N, m)

@pytest.mark.parametrize('N', range(1, 17))
def test_weights(N):
    x, w = rule(N)
    assert w.shape == (N,)
    assert np.all(w > 0)
    assert abs(w.sum() - 2) < 1e-9
    i = np.argsort(x)
    assert np.allclose(w[i], roots_legendre(N)[1], rtol=1e-8)

@pytest.mark.parametrize('N', range(2, 13))
def test_symmetry(N):
    x, w = rule(N)
    i = np.argsort(x)
    assert np.allclose(w[i], w[i][::-1], rtol=1e-8)

def test_known():
    x, w = rule(3)
    assert np.allclose(np.sort(x), [-np.sqrt(3/5), 0, np.sqrt(3/5)])
    assert np.allclose(w[np.argsort(x)], [5/9, 8/9, 5/9])

def test_degenerate_root():
    a = legendre_coefficients(2)
    with pytest.raises(DegenerateRoot) as e:
        compute_weights([0.5, 1.0], a, 2, 0)
    assert e.value.indices == (1,)

    # P_2'(0) = 0
    with pytest.raises(DegenerateRoot) as e:
        compute_weights([0.0, -1.0, 0.3, np.nan], a, 2, 0)
    assert e.value.indices == (0, 1, 3)


def test_collapsed_roots():
    a = legendre_coefficients(2)
    with pytest.raises(DegenerateRoot) as e:
        compute_weights([0.5, 0.5], a, 2, 0)
    assert e.value.indices == (0, 1)

    a = legendre_coefficients(4)
    x = find_roots(a, 4, 0)[0]
    x[3] = x[2] + 1e-9
    with pytest.raises(DegenerateRoot) as e:
        compute_weights(x, a, 4, 0)
    assert e.value.indices == (2, 3)

def test_weight_sum_warning():
    # Perturbed roots of P_2, weights sum to about 1.991
    a = legendre_coefficients(2)
    with pytest.warns(ToleranceWarning):
        w = compute_weights([0.58, -0.58], a, 2, 0)
    assert abs(w.sum() - 2) > 1e-3

def test_weight_sum_tolerance(monkeypatch):
    monkeypatch.setitem(config['weights'], 'sum_tolerance', 1e-2)
    a = legendre_coefficients(2)
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        compute_weights([0.58, -0.58], a, 2, 0)

@pytest.mark.skipif(np.finfo(np.longdouble).eps >= np.finfo(float).eps,
                    reason='No extended precision')
@pytest.mark.parametrize('N', (20, 24, 28))
def test_extended_precision(N):
    x, w = rule(N)
    assert w.dtype == np.longdouble
    assert abs(w.sum() - 2) < 1e-9
    i = np.argsort(x)
    assert np.allclose(w[i].astype(float), roots_legendre(N)[1], rtol=1e-8)


if __name__ == '__main__':
    test_weights(6)
