"""
Evaluate Legendre polynomials, and their derivatives, from monomial
coefficients. Only the terms of the polynomial's own parity are summed.

With ``config['legendre']['zero_shortcut']`` the even sum is cut short at
x = 0, so that an even :math:`P_N(0)` evaluates to 0 instead of :math:`a_0`.
This legacy behaviour is kept for bit-compatibility with earlier results,
but it is off by default since it contradicts the definition of
:math:`P_N`. Roots of even polynomials are never 0, so quadrature rules
are the same either way.

Evaluation uses the floating point type of the active kernels, see
:func:`~gaussquad.optimization.real_type`.
"""
import numpy as np
from gaussquad.config import config
from gaussquad.optimization import runtimeoptimizer, real_type

__all__ = ['evaluate_polynomial', 'evaluate_derivative']


@runtimeoptimizer
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

@runtimeoptimizer
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

def evaluate_polynomial(a, N, m, x):
    r"""Return :math:`P_N(x)`

    Parameters
    ----------
    a : array
        Coefficients of :math:`P_N`
    N : int
        Degree
    m : int
        Parity of :math:`P_N`, 0 (even) or 1 (odd)
    x : float
        Point of evaluation

    Note
    ----
    With ``config['legendre']['zero_shortcut']`` set, even polynomials
    return 0 at x = 0 instead of :math:`a_0`.
    """
    rt = real_type()
    a = np.asarray(a, dtype=rt)
    return rt(legendre_value(a, int(N), int(m), rt(x),
                             bool(config['legendre']['zero_shortcut'])))

def evaluate_derivative(a, N, m, x):
    r"""Return :math:`P'_N(x)`

    Parameters are as in :func:`evaluate_polynomial`.
    """
    rt = real_type()
    a = np.asarray(a, dtype=rt)
    return rt(legendre_derivative(a, int(N), int(m), rt(x),
                                  bool(config['legendre']['zero_shortcut'])))
