"""
Module for utility functions and exceptions used throughout gaussquad.
"""
import sympy as sp

__all__ = ['InvalidOrder', 'DegenerateRoot', 'ToleranceWarning', 'integrand']


class InvalidOrder(ValueError):
    """Raised for a quadrature order that is not a positive integer"""

    def __init__(self, order):
        ValueError.__init__(self, 'Order must be a positive integer, got %r' % (order,))
        self.order = order


class DegenerateRoot(ArithmeticError):
    """Raised when a quadrature weight cannot be computed

    This happens for roots that are not strictly inside (-1, 1), or where
    the derivative of the Legendre polynomial vanishes.

    Parameters
    ----------
    indices : sequence of ints
        Index of every offending root
    """

    def __init__(self, indices):
        self.indices = tuple(indices)
        ArithmeticError.__init__(self, 'Degenerate root(s) at index %s' % (list(self.indices),))


class ToleranceWarning(RuntimeWarning):
    """Newton iteration converged only after relaxing the tolerance"""


def integrand(f):
    """Return scalar callable for integrand `f`

    Parameters
    ----------
    f : callable, Sympy Expr or str
        Callables are returned unchanged. Sympy expressions, or strings that
        Sympy can parse, are lambdified using their single free symbol.

    Example
    -------
    >>> from gaussquad.utilities import integrand
    >>> f = integrand('x**2 + 1')
    >>> f(2.0)
    5.0
    """
    if callable(f) and not isinstance(f, sp.Basic):
        return f
    f = sp.sympify(f)
    sym = tuple(f.free_symbols)
    if len(sym) > 1:
        raise ValueError('Integrand must depend on one variable, got %s' % (sym,))
    if len(sym) == 0:
        c = float(f)
        return lambda x: c
    return sp.lambdify(sym[0], f, 'math')
