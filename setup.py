""" Python Packaging information

This file allows the module to be pip-installed into a python kernel.

See https://packaging.python.org/tutorials/packaging-projects/

To install your working copy into your local conda environment in "editable mode":

    pip install -e /path/to/working/copy

"""

from setuptools import setup, find_namespace_packages

setup(
    name = 'multregt',
    version = '0.0.0',
    description = 'Region to region transmissibility multipliers for structured reservoir grids',
    packages = find_namespace_packages(include = ['multregt', 'multregt.*']),
    python_requires = '>=3.8',
    install_requires = ['numpy', 'pandas'],
    extras_require = {'tests': ['pytest', 'pytest-mock', 'packaging']},
)
