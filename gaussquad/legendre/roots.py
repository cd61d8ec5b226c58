r"""
Roots of Legendre polynomials by Newton-Raphson iterations.

Root number :math:`i` of :math:`P_N` is found starting from the asymptotic
guess

.. math::

    z_i = \cos\left(\pi \frac{i + 3/4}{N + 1/2}\right),

and the iteration stops when two consecutive iterates are closer than a
tolerance :math:`\epsilon`. If a root has not converged after
``config['roots']['maxiter']`` iterations, the tolerance is multiplied by
``config['roots']['relax']`` and the iteration continues. Roots that needed
a relaxed tolerance are reported as :class:`RootDiagnostic`.
"""
from collections import namedtuple
import numpy as np
from gaussquad.config import config
from gaussquad.optimization import runtimeoptimizer, real_type
from .coefficients import check_order
from .evaluate import legendre_value, legendre_derivative

__all__ = ['find_roots', 'initial_guess', 'RootDiagnostic']

#: Root `index` converged only with relaxed tolerance `epsilon`
RootDiagnostic = namedtuple('RootDiagnostic', ('index', 'epsilon'))


def initial_guess(i, N):
    """Return starting point for root `i` of Legendre polynomial of degree `N`"""
    return np.cos(np.pi*(i+0.75)/(N+0.5))

@runtimeoptimizer
def legendre_newton(a, N, m, z0, eps, maxiter, relax, zero_shortcut):
    """Return root, and number of times the tolerance was relaxed

    The tolerance after k relaxations is eps*relax**k. A vanishing
    derivative returns nan for the root.
    """
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

def find_roots(a, N, m):
    """Return the `N` roots of a Legendre polynomial

    Parameters
    ----------
    a : array
        Coefficients of the Legendre polynomial
    N : int
        Degree
    m : int
        Parity, 0 (even) or 1 (odd)

    Returns
    -------
    roots : array
        The N roots, root i started from :func:`initial_guess` (i, N)
    diagnostics : list of :class:`RootDiagnostic`
        Roots that did not reach the initial tolerance

    Note
    ----
    The roots are computed in the floating point type of the active kernels,
    see :func:`~gaussquad.optimization.real_type`.
    """
    N = check_order(N)
    rt = real_type()
    a = np.asarray(a, dtype=rt)
    opts = config['roots']
    eps0 = float(opts['epsilon'])
    relax = float(opts['relax'])
    if not (eps0 > 0 and relax > 1):
        raise ValueError("config['roots'] needs epsilon > 0 and relax > 1")
    shortcut = bool(config['legendre']['zero_shortcut'])
    roots = np.zeros(N, dtype=rt)
    diagnostics = []
    for i in range(N):
        roots[i], k = legendre_newton(a, N, int(m), rt(initial_guess(i, N)), eps0,
                                      int(opts['maxiter']), relax, shortcut)
        if k > 0:
            # 15 significant digits
            diagnostics.append(RootDiagnostic(i, float('%.15g' % (eps0*relax**k))))
    return roots, diagnostics
