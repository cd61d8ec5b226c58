import warnings
import numpy as np
from gaussquad.config import config
from gaussquad.optimization import real_type
from gaussquad.utilities import DegenerateRoot, ToleranceWarning
from .evaluate import evaluate_derivative

__all__ = ['compute_weights']


def _collapsed(roots, N):
    # Roots of P_N are spaced about pi/(N+1/2) apart in arccos(x)
    theta = np.arccos(roots.astype(float))
    order = np.argsort(theta)
    close = np.flatnonzero(np.diff(theta[order]) < 0.5*np.pi/(N+1))
    return sorted(set(order[close].tolist()) | set(order[close+1].tolist()))

def compute_weights(roots, a, N, m):
    r"""Return Gauss-Legendre weights

    .. math::

        w_i = \frac{2}{(1-x_i^2) P'_N(x_i)^2}

    Parameters
    ----------
    roots : array
        Roots :math:`x_i` of :math:`P_N`
    a : array
        Coefficients of :math:`P_N`
    N : int
        Degree
    m : int
        Parity, 0 (even) or 1 (odd)

    Raises
    ------
    DegenerateRoot
        For roots not strictly inside (-1, 1), with a vanishing derivative,
        or that have collapsed onto a neighbouring root. All offending
        indices are reported together.

    Note
    ----
    A :class:`~gaussquad.utilities.ToleranceWarning` is issued if the sum of
    the weights differs from 2 by more than
    ``config['weights']['sum_tolerance']``.
    """
    rt = real_type()
    roots = np.asarray(roots, dtype=rt)
    dP = np.array([evaluate_derivative(a, N, m, x) for x in roots], dtype=rt)
    bad = ~np.isfinite(roots) | ~np.isfinite(dP) | (dP == 0)
    bad[~bad] = abs(roots[~bad]) >= 1
    if bad.any():
        raise DegenerateRoot(np.flatnonzero(bad).tolist())
    collapsed = _collapsed(roots, N)
    if collapsed:
        raise DegenerateRoot(collapsed)
    w = 2/((1-roots**2)*dP**2)
    err = abs(float(w.sum()) - 2)
    if err > config['weights']['sum_tolerance']:
        warnings.warn('Sum of weights deviates from 2 by %g' % err,
                      ToleranceWarning, stacklevel=2)
    return w
