#!/usr/bin/env python

import os
import re
from setuptools import setup

cwd = os.path.abspath(os.path.dirname(__file__))

def version():
    srcdir = os.path.join(cwd, 'gaussquad')
    with open(os.path.join(srcdir, '__init__.py')) as f:
        m = re.search(r"__version__\s*=\s*'(.*)'", f.read())
        return m.groups()[0]

with open(os.path.join(cwd, "README.rst"), "r") as fh:
    long_description = fh.read()

if __name__ == '__main__':
    setup(name="gaussquad",
          version=version(),
          description="gaussquad -- Gauss-Legendre quadrature of any order",
          long_description=long_description,
          classifiers=[
              'Development Status :: 4 - Beta',
              'Intended Audience :: Developers',
              'Intended Audience :: Science/Research',
              'Intended Audience :: Education',
              'Programming Language :: Python',
              'Programming Language :: Python :: 3',
              'License :: OSI Approved :: BSD License',
              'Topic :: Scientific/Engineering :: Mathematics',
              'Topic :: Software Development :: Libraries :: Python Modules',
              ],
          packages=["gaussquad",
                    "gaussquad.legendre",
                    "gaussquad.optimization",
                    "gaussquad.optimization.numba",
                    "gaussquad.utilities"
                   ],
          package_dir={"gaussquad": "gaussquad"},
          install_requires=["numpy", "sympy", "pyyaml", "numba"],
          extras_require={"test": ["pytest", "scipy"]},
         )
