# -*- coding: utf-8 -*-
"""
Created on Wed Jul 24 11:02:37 2013

Exceptions raised by the statistics, light curve and table I/O functions.
"""

class CheckedException(Exception):
    """
    Base class for conditions that are foreseeable and can, in principle,
    be handled at run time (as opposed to programming errors).
    """

class NotEnoughData(ValueError):
    """
    Raised if a sample does not contain enough data to calculate
    the desired statistic.
    """

class NoValidTimes(CheckedException):
    """
    Raised when a time series has no data in the requested date range.
    """

class FileIoError(RuntimeError):
    """
    Raised when a file could not be opened, read, parsed or written to.
    """
