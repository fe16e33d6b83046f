# -*- coding: utf-8 -*-
from setuptools import setup, find_packages

long_description = "Hilbert Transform cycle indicators (HT_* and MAMA) for Pandas, TA-Lib compatible"

setup(
    name = "pandas_ta_cycle",
    packages = find_packages(exclude=["tests", "tests.*", "scripts"]),
    version = "0.1.0",
    description=long_description,
    long_description=long_description,
    keywords = ['technical analysis', 'hilbert transform', 'mama', 'python3', 'pandas'],
    license="The MIT License (MIT)",
    python_requires=">=3.9",
    classifiers = [
        'Programming Language :: Python :: 3',
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Intended Audience :: Developers',
        'Intended Audience :: Financial and Insurance Industry',
        'Topic :: Office/Business :: Financial :: Investment',
    ],
    install_requires=['numpy', 'numba', 'pandas'],

    # List additional groups of dependencies here (e.g. development dependencies).
    # You can install these using the following syntax, for example:
    # $ pip install -e .[dev,test]
    extras_require = {
        'dev': ['ta-lib', 'jupyterlab', 'pytest'],
        'talib': ['ta-lib'],
        'test': ['pytest'],
    },
)
