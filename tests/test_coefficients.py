import pytest
import numpy as np
import sympy as sp
from numpy.polynomial import legendre as leg
from gaussquad import legendre_coefficients, format_polynomial, parity, \
    check_order, InvalidOrder

x = sp.Symbol('x', real=True)

@pytest.mark.parametrize('N', range(1, 16))
def test_coefficients(N):
    a = legendre_coefficients(N)
    assert a.shape == (N+1,)
    assert a.dtype == np.longdouble
    assert np.allclose(a, leg.leg2poly([0]*N+[1]))
    exact = sp.Poly(sp.legendre(N, x), x).all_coeffs()[::-1]
    assert np.allclose(a, np.array(exact, dtype=float), rtol=1e-12, atol=1e-14)

@pytest.mark.parametrize('N', range(1, 12))
def test_parity(N):
    a = legendre_coefficients(N)
    m = parity(N)
    assert m == N % 2
    # Only terms of the polynomial's own parity are nonzero
    assert np.all(a[1-m::2] == 0)
    # P_N(1) = 1
    assert abs(a.sum()-1) < 1e-10

def test_known():
    assert np.allclose(legendre_coefficients(1), [0, 1])
    assert np.allclose(legendre_coefficients(2), [-0.5, 0, 1.5])
    assert np.allclose(legendre_coefficients(3), [0, -1.5, 0, 2.5])
    assert np.allclose(legendre_coefficients(4), [3/8, 0, -30/8, 0, 35/8])

def test_new_array():
    a = legendre_coefficients(5)
    a[:] = 0
    assert legendre_coefficients(5)[5] == 63/8

@pytest.mark.parametrize('N', (0, -1, -10, 2.5, '3', True, None))
def test_invalid_order(N):
    with pytest.raises(InvalidOrder):
        legendre_coefficients(N)

def test_check_order():
    assert check_order(np.int64(4)) == 4
    assert isinstance(check_order(np.int32(3)), int)
    with pytest.raises(ValueError):
        check_order(0)

def test_format_polynomial():
    assert format_polynomial(legendre_coefficients(1)) == '(1) X'
    assert format_polynomial(legendre_coefficients(2)) == '-0.5 + (1.5) X^2'
    assert format_polynomial(legendre_coefficients(3)) == '(-1.5) X + (2.5) X^3'
    assert format_polynomial(legendre_coefficients(4)) == '0.375 + (-3.75) X^2 + (4.375) X^4'


if __name__ == '__main__':
    test_coefficients(8)
    test_format_polynomial()
