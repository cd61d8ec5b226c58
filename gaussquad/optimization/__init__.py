"""Module for optimized functions

The scalar kernels of the quadrature pipeline (polynomial evaluation and the
Newton iteration) are called many times per root. In this optimization
module we place optimized versions that are used instead of the default
Python kernels when the configuration asks for them.

"""
from functools import wraps
import numpy as np
from gaussquad.config import config
from . import numba


"""

runtimeoptimizer

A decorator that chooses optimized function at runtime

At runtime the decorator looks at::

    config['optimization']['mode']
    config['optimization']['verbose']

and returns the optimized function of choice.

"""
class runtimeoptimizer:

    def __init__(self, func):
        self.func = func
        self.__doc__ = func.__doc__
        self.__name__ = func.__name__
        self.__qualname__ = func.__qualname__

    def __call__(self, *args, **kwargs):
        fun = optimizer(self.func, wrap=False)
        return fun(*args, **kwargs)

def optimizer(func, wrap=True):
    """Decorator used to wrap calls to optimized versions of functions.

    The optimized version must be implemented in the numba module, under
    the same name. For example, the Newton iteration
    :func:`~gaussquad.legendre.roots.legendre_newton` has a jitted
    counterpart in :func:`~gaussquad.optimization.numba.legendre.legendre_newton`.

    Parameters
    ----------
    func : The function to optimize
    wrap : bool, optional
        If True, return function wrapped using functools wraps.
        If False, return unwrapped function.
    """
    mod = config['optimization']['mode']
    verbose = config['optimization']['verbose']

    if mod.lower() != 'numba':
        # Use python function
        if verbose:
            print(func.__qualname__ + ' not optimized')
        return func
    fun = getattr(numba, func.__name__, func)
    if verbose:
        if fun is func:
            print(fun.__qualname__ + ' not optimized')
    if wrap is False:
        return fun
    @wraps(func)
    def wrapped_function(*args, **kwargs):
        return fun(*args, **kwargs)
    return wrapped_function

def real_type():
    """Return floating point type used by the active kernels

    The Python kernels work in extended precision (``np.longdouble``).
    Numba cannot compile extended precision, so the numba kernels work in
    ``np.float64``.
    """
    if config['optimization']['mode'].lower() == 'numba':
        return np.float64
    return np.longdouble
