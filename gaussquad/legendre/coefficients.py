r"""
Coefficients of Legendre polynomials in the monomial basis.

The Legendre polynomial of degree :math:`N` is written as

.. math::

    P_N(x) = \sum_{i=0}^{N} a_i x^i,

and the coefficients :math:`a_i` are computed from Bonnet's recursion

.. math::

    (n+1) P_{n+1}(x) = (2n+1) x P_n(x) - n P_{n-1}(x),

applied coefficient by coefficient to a triangular table that holds all
degrees :math:`0, 1, \ldots, N`.
"""
import numbers
import numpy as np
from gaussquad.utilities import InvalidOrder

__all__ = ['legendre_coefficients', 'format_polynomial', 'parity', 'check_order']


def check_order(N):
    """Return `N` as int if it is a valid (positive integer) order

    Raises
    ------
    InvalidOrder
        If `N` is not an integer, or if `N` < 1
    """
    if isinstance(N, bool) or not isinstance(N, numbers.Integral):
        raise InvalidOrder(N)
    if N <= 0:
        raise InvalidOrder(N)
    return int(N)

def parity(N):
    """Return 0 for even and 1 for odd Legendre polynomials"""
    return N % 2

def _coefficient_table(N):
    T = np.zeros((N+1, N+1), dtype=np.longdouble)
    T[0, 0] = 1
    T[1, 1] = 1
    for n in range(1, N):
        T[n+1, 0] = -n*T[n-1, 0]/(n+1)
        T[n+1, 1:] = ((2*n+1)*T[n, :-1] - n*T[n-1, 1:])/(n+1)
    return T

def legendre_coefficients(N):
    """Return coefficients of the Legendre polynomial of degree `N`

    Parameters
    ----------
    N : int
        Degree (quadrature order), N >= 1

    Returns
    -------
    Array of length N+1, where item i is the coefficient of :math:`x^i`.
    The coefficients are computed in extended precision (``np.longdouble``).

    Example
    -------
    >>> from gaussquad.legendre import legendre_coefficients
    >>> print(legendre_coefficients(2))
    [-0.5  0.   1.5]
    """
    N = check_order(N)
    return _coefficient_table(N)[N].copy()

def format_polynomial(a):
    """Return string representation of Legendre polynomial

    Only the terms of the polynomial's own parity are printed.

    Parameters
    ----------
    a : array
        Coefficients as returned by :func:`legendre_coefficients`
    """
    N = len(a)-1
    if parity(N) == 0:
        terms = ['%.10g' % a[0]]
        terms += ['(%.10g) X^%d' % (a[i], i) for i in range(2, N+1, 2)]
    else:
        terms = ['(%.10g) X' % a[1]]
        terms += ['(%.10g) X^%d' % (a[i], i) for i in range(3, N+1, 2)]
    return ' + '.join(terms)
