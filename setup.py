# -*- coding: utf-8 -*-
"""
Created on Thu Jul 25 16:02:44 2013
"""
from setuptools import setup, find_packages

setup(
    name="LCUtils",
    version="1.0.0",
    description="Statistics, preprocessing and text I/O utilities for astronomical light curves",
    long_description="Generic sample statistics (mean, variance, quantile), NaN handling, light curve error filtering, time sorting and date-range trimming, and delimited-text readers and writers for light curves and tables.",
    license="BSD-3-Clause",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Astronomy",
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(),
    install_requires=[
        "numpy",
        "pandas",
        "progress",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.9",
)
