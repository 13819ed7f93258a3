# -*- coding: utf-8 -*-
"""
Created on Sun Feb 6 15:41:22 2011

Light curve preprocessing: error filtering, time sorting and date-range
trimming of parallel (time, value, error) arrays.

None of these functions modify their arguments. Each builds new arrays
and returns them, so if anything fails part-way through, the caller
still holds the original, unaltered data. Rebind to the output:

>>> time, mag, magerr = error_filter(0.2, time, mag, magerr)
>>> time, mag, magerr = sort_by_time(time, mag, magerr)
>>> time, mag, magerr = filter_light_curve(2456000, 2456100, time, mag, magerr)
"""
from warnings import warn

import numpy as np

from LCUtils.exceptions import NoValidTimes

def _as_parallel_arrays(*columns):
    """
    Converts the input columns to 1D arrays of equal length.

    Args:
        *columns (array-like): The parallel columns of a light curve.

    Returns:
        List of 1D ndarrays, in the input order.
    """
    arrays = [np.asarray(column) for column in columns]

    for array in arrays:
        if array.ndim != 1:
            raise ValueError('Light curve columns must be one-dimensional, got an array of shape {}'.format(array.shape))

    lengths = [len(array) for array in arrays]
    if len(set(lengths)) > 1:
        raise ValueError('Mismatched light curve columns (lengths {})'.format(', '.join(str(n) for n in lengths)))

    return arrays

def error_filter(max_error, times, values, errors):
    """
    Removes all (time, value, error) triplets whose error exceeds max_error.

    The surviving points keep their relative order. Points with a NaN
    error are removed as well, since NaN never satisfies error <= max_error.

    Args:
        max_error (float): The maximum error to tolerate in a data point.
        times (array-like): Time of each observation.
        values (array-like): Measurement (typically flux or magnitude)
            observed at each time.
        errors (array-like): Error on each measurement.

    Returns:
        The filtered times, values and errors arrays.

    Raises:
        ValueError: If the three columns differ in length.
    """
    times, values, errors = _as_parallel_arrays(times, values, errors)

    mask = errors <= max_error
    if len(errors) > 0 and not np.any(mask):
        warn('No data points have an error below {}, returning empty arrays.'.format(max_error))

    return times[mask], values[mask], errors[mask]

def sort_by_time(times, values, errors=None):
    """
    Sorts the (time, value) pairs, or (time, value, error) triplets, in time order.

    A stable sort is used, so observations with identical times keep
    their input order, and the time and value columns come out in the
    same order whether or not errors are given.

    Args:
        times (array-like): Time of each observation.
        values (array-like): Measurement observed at each time.
        errors (array-like, optional): Error on each measurement. Defaults to None.

    Returns:
        The sorted times and values arrays, followed by the sorted errors
        array if errors was given.

    Raises:
        ValueError: If the columns differ in length.
    """
    if errors is None:
        columns = _as_parallel_arrays(times, values)
    else:
        columns = _as_parallel_arrays(times, values, errors)

    order = np.argsort(columns[0], kind='stable')

    return tuple(column[order] for column in columns)

def filter_light_curve(date1, date2, times, arr1, arr2):
    """
    Trims a light curve to the observations taken between date1 and date2, inclusive.

    Note:
        times must already be sorted in ascending order (see sort_by_time).
        This is not checked. Because times is sorted, the observations
        in [date1, date2] form one contiguous block, which is what gets
        returned.

    Args:
        date1 (float): The earliest date to keep.
        date2 (float): The latest date to keep.
        times (array-like): Sorted times of each observation.
        arr1, arr2 (array-like): Columns corresponding to times, to be
            trimmed in parallel.

    Returns:
        The trimmed times, arr1 and arr2 arrays.

    Raises:
        NoValidTimes: If date2 < date1 or no time falls in [date1, date2].
        ValueError: If the three columns differ in length.
    """
    times, arr1, arr2 = _as_parallel_arrays(times, arr1, arr2)

    # First time >= date1, then the first time after it that is > date2
    first_ok = int(np.searchsorted(times, date1, side='left'))
    first_not_ok = max(first_ok, int(np.searchsorted(times, date2, side='right')))

    if first_ok == first_not_ok:
        try:
            message = 'No photometry in [{}, {}]'.format(date1, date2)
        except (TypeError, ValueError):
            message = 'No photometry in range'
        raise NoValidTimes(message)

    window = slice(first_ok, first_not_ok)

    return times[window].copy(), arr1[window].copy(), arr2[window].copy()
