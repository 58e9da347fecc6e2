#!/usr/bin/env python
from setuptools import setup, find_packages

setup(
    name = 'colortools',
    version = '1.0.0',
    description = 'Symbolic SU(N) colour algebra for perturbative QCD',
    packages = find_packages(exclude=['tests', 'tests.*']),
    python_requires = '>=3.7',
    install_requires = ['numpy', 'bidict'],
    extras_require = {
        'test' : ['pytest'],
    },
)
