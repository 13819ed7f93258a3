# -*- coding: utf-8 -*-
"""
Utilities for astronomical light-curve analysis: generic sample
statistics, NaN handling, light-curve preprocessing and text-table I/O.
"""
__version__ = "1.0.0"
