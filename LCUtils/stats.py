# -*- coding: utf-8 -*-
"""
Created on Thu Jul 21 10:12:48 2011

Speed-optimized sample statistics that work on any iterable (lists,
tuples, deques, generators, numpy arrays) without first converting
the data to an array.

mean(), variance() and is_sorted() need only a single forward pass, so
they can be used on iterators that cannot be rewound. quantile() sorts
a private copy and therefore needs a sized, indexable sequence.

The result of mean() and variance() has the type of the data. Integer
samples are summed and divided exactly, truncating toward zero only at
the very end, so arbitrarily large Python ints lose no precision.
"""
from collections.abc import Iterable, Sequence
from numbers import Integral
from typing import Any

import numpy as np

from LCUtils.exceptions import NotEnoughData

def mean(data: Iterable) -> Any:
    """
    Arithmetic mean of the values in data.

    Parameters
    ----------
        data : iterable
            The sample. Must contain at least one value and no NaN.

    Returns
    -------
        The mean, with the same numeric type as the elements of data.

    Raises
    ------
        NotEnoughData
            If data is empty.
    """
    total = 0
    count = 0
    for value in data:
        total = total + value
        count += 1

    if count <= 0:
        raise NotEnoughData('Not enough data to compute mean')

    if isinstance(total, Integral):
        # Exact integer division, truncated toward zero
        exact = int(total)
        quotient = abs(exact) // count
        return type(total)(quotient if exact >= 0 else -quotient)

    return type(total)(total / float(count))

def variance(data: Iterable) -> Any:
    """
    Unbiased sample variance of the values in data.

    Uses the one-pass sum/sum-of-squares formula, which is less stable
    than a two-pass algorithm for ill-conditioned data but only needs
    to see each value once.

    Parameters
    ----------
        data : iterable
            The sample. Must contain at least two values and no NaN.

    Returns
    -------
        The variance, with the same numeric type as the elements of data.

    Raises
    ------
        NotEnoughData
            If data has fewer than two elements.
    """
    total = 0
    total_sq = 0
    count = 0
    for value in data:
        total = total + value
        total_sq = total_sq + value*value
        count += 1

    if count <= 1:
        raise NotEnoughData('Not enough data to compute variance')

    if isinstance(total, Integral):
        # n*sumsq - sum**2 is exact and never negative for integer data
        exact_sum, exact_sq = int(total), int(total_sq)
        numerator = count*exact_sq - exact_sum*exact_sum
        return type(total)(numerator // (count*(count - 1)))

    n = float(count)
    # Single division of the largest possible dividend
    return type(total)((total_sq - total*total/n) / (n - 1))

def quantile(data: Sequence, q: float) -> Any:
    """
    Uninterpolated quantile of the values in data, which need not be sorted.

    The sample is copied and sorted, and the element at index
    floor(q*n) is returned (index n-1 for q == 1). This is a
    nearest-rank convention: the result is always one of the data
    values, never an interpolation between two of them.

    Parameters
    ----------
        data : sequence
            The sample. Must support len() and indexing, and contain no NaN.
        q : float
            The quantile to recover, between 0 and 1 inclusive.

    Returns
    -------
        The selected element of data.

    Raises
    ------
        ValueError
            If q is not in the interval [0, 1].
        NotEnoughData
            If data is empty.
        TypeError
            If data is not a random-access sequence.
    """
    if not (0.0 <= q <= 1.0):
        try:
            message = 'Invalid quantile of {} passed to quantile()'.format(q)
        except (TypeError, ValueError):
            message = 'Invalid quantile passed to quantile()'
        raise ValueError(message)

    if not (isinstance(data, (Sequence, np.ndarray)) or
            (hasattr(data, '__len__') and hasattr(data, '__getitem__'))):
        raise TypeError('quantile() requires a random-access sequence, got {}'.format(type(data).__name__))

    size = len(data)
    if size < 1:
        raise NotEnoughData('Supplied empty data set to quantile()')

    # Sort a copy so the caller's data is left untouched
    ordered = sorted(data)

    if q < 1.0:
        index = int(q*size)
    else:
        index = size - 1

    return ordered[index]

def is_sorted(data: Iterable) -> bool:
    """
    Tests whether data is sorted in ascending (non-strict) order.

    A sample with fewer than two elements is always sorted.

    Parameters
    ----------
        data : iterable
            The values to test, traversed once.

    Returns
    -------
        bool
            True if every element is less than or equal to its successor.
    """
    iterator = iter(data)
    try:
        previous = next(iterator)
    except StopIteration:
        return True

    for current in iterator:
        if current < previous:
            return False
        previous = current

    return True
