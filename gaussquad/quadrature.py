r"""
Gauss-Legendre quadrature on a finite interval.

The integral of a function :math:`f` over :math:`[a, b]` is approximated
as

.. math::

    \int_a^b f(x) dx \approx \frac{b-a}{2} \sum_{i=0}^{N-1} w_i f(u_i),

where :math:`x_i` are the roots of the Legendre polynomial :math:`P_N`,
:math:`w_i` the corresponding weights, and

.. math::

    u_i = \frac{(b-a) x_i + a + b}{2}

are the roots mapped from :math:`[-1, 1]` to :math:`[a, b]`. The rule is
exact for polynomials of degree up to :math:`2N-1`.
"""
import numbers
import warnings
from collections import namedtuple
import numpy as np
from gaussquad.legendre import legendre_coefficients, find_roots, \
    compute_weights, parity
from gaussquad.config import config
from gaussquad.utilities import ToleranceWarning, integrand

__all__ = ['QuadratureResult', 'map_nodes', 'nodes_and_weights',
           'gauss_legendre', 'integrate']

QuadratureResult = namedtuple('QuadratureResult', ('coefficients', 'roots', 'weights',
                                                   'nodes', 'value', 'diagnostics'))
QuadratureResult.__doc__ = """Outcome of :func:`gauss_legendre`

All arrays are empty, and value is None, if the order was not positive.
"""


def _empty_result():
    e = np.zeros(0)
    return QuadratureResult(e, e.copy(), e.copy(), e.copy(), None, [])

def map_nodes(roots, a, b):
    """Return `roots` mapped from [-1, 1] to [a, b]"""
    roots = np.asarray(roots, dtype=float)
    return ((b-a)*roots + (a+b))/2

def nodes_and_weights(N):
    """Return roots, weights and root diagnostics of order `N` rule on [-1, 1]

    Parameters
    ----------
    N : int
        Number of quadrature points
    """
    a = legendre_coefficients(N)
    m = parity(N)
    roots, diagnostics = find_roots(a, N, m)
    return roots, compute_weights(roots, a, N, m), diagnostics

def _check_bound(x):
    if isinstance(x, bool) or not isinstance(x, numbers.Real) or not np.isfinite(x):
        raise ValueError('Integration bounds must be finite real numbers, got %r' % (x,))
    return float(x)

def gauss_legendre(N, a, b, f):
    """Integrate `f` over [a, b] with `N` point Gauss-Legendre quadrature

    Parameters
    ----------
    N : int
        Quadrature order. Orders <= 0, integral or not, return an empty
        result without any computation.
    a, b : numbers
        Lower and upper integration bound
    f : callable, Sympy Expr or str
        The integrand, evaluated one point at a time. See
        :func:`~gaussquad.utilities.integrand`.

    Returns
    -------
    :class:`QuadratureResult`

    Note
    ----
    A :class:`~gaussquad.utilities.ToleranceWarning` is issued if any root
    only converged with a tolerance above ``config['roots']['warn']``.
    Every root that needed a relaxed tolerance is listed in the diagnostics
    of the result.
    """
    if isinstance(N, numbers.Real) and not isinstance(N, bool) and N <= 0:
        return _empty_result()
    a = _check_bound(a)
    b = _check_bound(b)
    f = integrand(f)
    coef = legendre_coefficients(N)
    m = parity(N)
    roots, diagnostics = find_roots(coef, N, m)
    loose = [d for d in diagnostics if d.epsilon > config['roots']['warn']]
    if loose:
        warnings.warn('Relaxed tolerance for roots: ' +
                      ', '.join('%d (epsilon=%g)' % d for d in loose),
                      ToleranceWarning, stacklevel=2)
    weights = compute_weights(roots, coef, N, m)
    nodes = map_nodes(roots, a, b)
    s = 0.0
    for wi, ui in zip(weights, nodes):
        s += wi*f(float(ui))
    return QuadratureResult(coef, roots, weights, nodes, float(s*(b-a)/2), diagnostics)

def integrate(N, a, b, f):
    """Return integral of `f` over [a, b] with `N` point Gauss-Legendre quadrature

    Returns None if `N` <= 0. See :func:`gauss_legendre` for parameters.

    Example
    -------
    >>> from gaussquad import integrate
    >>> round(integrate(2, 0, 2, lambda x: x**3), 12)
    4.0
    """
    return gauss_legendre(N, a, b, f).value
