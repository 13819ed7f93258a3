# -*- coding: utf-8 -*-
"""
Created on Thu Apr 11 16:20:05 2013

Functions for handling data containing NaN values.
"""
import numpy as np

def is_nan(x):
    """
    Tests whether a floating-point number is undefined.

    Both quiet and signaling NaN compare unequal to themselves, so
    no call into the math library is needed.

    Parameters
    ----------
        x : float
            The number to test.

    Returns
    -------
        bool
            True if and only if x is not-a-number.
    """
    return x != x

def is_nan_or_inf(x):
    """
    Tests whether a floating-point number is non-finite.

    Parameters
    ----------
        x : float
            The number to test.

    Returns
    -------
        bool
            True if x is NaN, +inf or -inf.
    """
    return is_nan(x) or x == np.inf or x == -np.inf

class NotNan:
    """
    Stateless predicate returning True iff its argument is not NaN.

    Meant to be handed to higher-order functions, for example:

    >>> from LCUtils.nan import NotNan
    >>> list(filter(NotNan(), [1.0, float('nan'), 3.0]))
    [1.0, 3.0]
    """

    def __call__(self, x):
        return not is_nan(x)
