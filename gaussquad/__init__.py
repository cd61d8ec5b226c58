"""
This is the **gaussquad** package

What is **gaussquad**?
================================

``gaussquad`` computes definite integrals of functions of one real variable
over finite intervals with Gauss-Legendre quadrature of a chosen order N.
The quadrature rule is built from scratch: the monomial coefficients of the
Legendre polynomial :math:`P_N` are generated with Bonnet's recursion, the
roots of :math:`P_N` are found with Newton-Raphson iterations, and the
weights follow from the derivative of :math:`P_N` at the roots.

The scalar kernels can be compiled with `Numba <https://numba.pydata.org>`_
by setting ``config['optimization']['mode'] = 'numba'``.

"""
#pylint: disable=wildcard-import,no-name-in-module

__version__ = '1.0.0'

from .config import config, dumpconfig
from . import legendre
from .legendre import *
from .quadrature import *
from .utilities import *
