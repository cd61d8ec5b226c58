from .legendre import *
