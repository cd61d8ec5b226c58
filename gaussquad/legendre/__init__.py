"""Functionality for working with Legendre polynomials"""
from . import coefficients, evaluate, roots, weights
from .coefficients import *
from .evaluate import *
from .roots import *
from .weights import *

__all__ = (coefficients.__all__ + evaluate.__all__ + roots.__all__ +
           weights.__all__)
