import numpy as np
import numba as nb

__all__ = ['legendre_value', 'legendre_derivative', 'legendre_newton']

@nb.jit(nopython=True, cache=True)
def legendre_value(a, N, m, x, zero_shortcut):
    p = 0.0
    if m == 0:
        if zero_shortcut and x == 0:
            return p
        for i in range(0, N+1, 2):
            p += a[i]*x**i
    else:
        for i in range(1, N+1, 2):
            p += a[i]*x**i
    return p

@nb.jit(nopython=True, cache=True)
def legendre_derivative(a, N, m, x, zero_shortcut):
    p = 0.0
    if m == 0:
        if zero_shortcut and x == 0:
            return p
        for i in range(2, N+1, 2):
            p += i*a[i]*x**(i-1)
    else:
        for i in range(1, N+1, 2):
            p += i*a[i]*x**(i-1)
    return p

@nb.jit(nopython=True, cache=True)
def legendre_newton(a, N, m, z0, eps, maxiter, relax, zero_shortcut):
    l = z0
    count = 0
    k = 0
    tol = eps
    while True:
        d = legendre_derivative(a, N, m, l, zero_shortcut)
        if d == 0:
            return np.nan, k
        v = l
        l = v - legendre_value(a, N, m, v, zero_shortcut)/d
        count += 1
        if count > maxiter:
            count = 0
            k += 1
            tol = eps*relax**k
        if not abs(l - v) > tol:
            return l, k
