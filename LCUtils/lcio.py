# -*- coding: utf-8 -*-
"""
Created on Fri Feb 4 17:55:09 2011

Reading and writing light curves and two-column tables as delimited text.

Every failure to open, read, parse or write a file is reported as a
FileIoError, with the underlying exception chained to it. Readers build
their output from scratch and only return it once the whole file has
been parsed, so a failed read never hands back partial data.
"""
import warnings
from warnings import warn

import numpy as np
import pandas as pd
from progress import bar

from LCUtils.exceptions import FileIoError
from LCUtils.lcmanip import error_filter, sort_by_time

#Defaults shared by the readers and writers
COMMENT_CHAR = '#'
NUMBER_FORMAT = '%7.4f'
COLUMN_SEPARATOR = '\t'

def file_check_open(filename, mode='r'):
    """
    Opens a file, converting any failure into a FileIoError.

    Args:
        filename (str): The file to open.
        mode (str): Mode passed to open(). Defaults to 'r'.

    Returns:
        The open file object, usable as a context manager.
    """
    try:
        return open(filename, mode)
    except OSError as e:
        raise FileIoError('Could not open {}: {}'.format(filename, e)) from e

def read_table(source, usecols, delimiter=None, comments=COMMENT_CHAR):
    """
    Reads selected columns of a numeric text table.

    Lines starting with the comment character are ignored, as is anything
    after it on a data line.

    Args:
        source (str or file): Path of the file to read, or an open file handle.
        usecols (tuple): Indices of the columns to return, in that order.
        delimiter (str, optional): Column separator. Defaults to None,
            in which case any whitespace separates columns.
        comments (str): The comment character. Defaults to '#'.

    Returns:
        Tuple with one float array per entry of usecols. All arrays
        have the same length, which may be zero.

    Raises:
        FileIoError: If the file cannot be read or a row is misformatted.
    """
    usecols = tuple(usecols)

    try:
        with warnings.catch_warnings():
            warnings.filterwarnings('ignore', message='.*input contained no data.*')
            data = np.loadtxt(source, usecols=usecols, delimiter=delimiter,
                comments=comments, dtype=float, ndmin=2)
    except OSError as e:
        raise FileIoError('Could not read {}: {}'.format(source, e)) from e
    except (ValueError, IndexError) as e:
        raise FileIoError('Misformatted file {}: {}'.format(source, e)) from e

    if data.size == 0:
        return tuple(np.array([], dtype=float) for _ in usecols)

    return tuple(data[:, i].copy() for i in range(len(usecols)))

def read_csv_table(source, usecols, comments=COMMENT_CHAR):
    """
    Reads selected columns of a comma-delimited numeric table.

    Whitespace around the commas is allowed. The table has no header row;
    lines starting with the comment character are skipped.

    Args:
        source (str or file): Path of the file to read, or an open file handle.
        usecols (tuple): Indices of the columns to return, in that order.
        comments (str): The comment character. Defaults to '#'.

    Returns:
        Tuple with one float array per entry of usecols.

    Raises:
        FileIoError: If the file cannot be read or a row is misformatted.
    """
    usecols = tuple(usecols)

    try:
        #Read as text so missing or empty fields can be told apart from a literal nan
        csv = pd.read_csv(source, header=None, comment=comments, dtype=str,
            na_filter=False, skipinitialspace=True, skip_blank_lines=True)
    except pd.errors.EmptyDataError:
        return tuple(np.array([], dtype=float) for _ in usecols)
    except OSError as e:
        raise FileIoError('Could not read {}: {}'.format(source, e)) from e
    except ValueError as e:
        raise FileIoError('Misformatted file {}: {}'.format(source, e)) from e

    if len(csv) == 0:
        return tuple(np.array([], dtype=float) for _ in usecols)

    columns = []
    for i in usecols:
        try:
            column = csv.iloc[:, i]
        except IndexError as e:
            raise FileIoError('Misformatted file {}: no column {}'.format(source, i)) from e

        # Short rows are padded with NaN, empty fields are left as ''
        if column.isna().any() or (column.str.strip() == '').any():
            raise FileIoError('Misformatted file {}: missing value in column {}'.format(source, i))

        try:
            columns.append(column.to_numpy(dtype=float))
        except (ValueError, TypeError) as e:
            raise FileIoError('Misformatted file {}: {}'.format(source, e)) from e

    return tuple(columns)

def read_wg_light_curve(filename, err_max):
    """
    Reads a light curve stored as three whitespace-separated columns:
    time, measurement and measurement error.

    Points with an error exceeding err_max are discarded.

    Args:
        filename (str): The file to read.
        err_max (float): The maximum error to tolerate in a data point.

    Returns:
        The times, values and errors arrays, sorted by time.

    Raises:
        FileIoError: If the file cannot be read or is misformatted.
    """
    times, values, errors = read_table(filename, usecols=(0, 1, 2))
    times, values, errors = error_filter(err_max, times, values, errors)

    return sort_by_time(times, values, errors)

def read_wg2_light_curve(filename, err_max):
    """
    Reads a light curve stored as five whitespace-separated columns:
    running index, time, measurement, measurement error and detection limit.

    The index and detection limit are ignored. Points with an error
    exceeding err_max are discarded.

    Args:
        filename (str): The file to read.
        err_max (float): The maximum error to tolerate in a data point.

    Returns:
        The times, values and errors arrays, sorted by time.

    Raises:
        FileIoError: If the file cannot be read or is misformatted.
    """
    times, values, errors = read_table(filename, usecols=(1, 2, 3))
    times, values, errors = error_filter(err_max, times, values, errors)

    return sort_by_time(times, values, errors)

def read_mc_light_curve(filename):
    """
    Reads a light curve stored as two whitespace-separated columns,
    time and measurement.

    Returns:
        The times and values arrays, sorted by time.
    """
    times, values = read_table(filename, usecols=(0, 1))

    return sort_by_time(times, values)

def read_csv_light_curve(filename):
    """
    Reads a light curve stored as two comma-separated columns,
    time and measurement.

    Returns:
        The times and values arrays, sorted by time.
    """
    times, values = read_csv_table(filename, usecols=(0, 1))

    return sort_by_time(times, values)

def read_file_names(filename):
    """
    Reads a file listing one file name per line.

    Comment lines and empty lines are skipped. Only the trailing newline is
    removed from each name, so names containing spaces survive intact.

    Note:
        Earlier versions of this reader returned blank lines as empty
        file names; they are now dropped.

    Args:
        filename (str): The list file to read.

    Returns:
        List of file names, possibly empty.

    Raises:
        FileIoError: If the file cannot be opened or read.
    """
    names = []
    with file_check_open(filename, 'r') as handle:
        try:
            for line in handle:
                if line.startswith(COMMENT_CHAR):
                    continue
                name = line.rstrip('\r\n')
                if name:
                    names.append(name)
        except (OSError, UnicodeDecodeError) as e:
            raise FileIoError('Misformatted file {}: {}'.format(filename, e)) from e

    return names

def load_light_curves(list_file, reader=read_mc_light_curve, verbose=True, **kwargs):
    """
    Loads every light curve named in a list file.

    Note:
        Relative paths in list_file are resolved against the current
        working directory, not the directory of list_file.

    Args:
        list_file (str): File listing one light curve file per line,
            see read_file_names.
        reader (function): Light curve reader applied to each file.
            Defaults to read_mc_light_curve.
        verbose (bool): If True a progress bar is displayed. Defaults to True.
        **kwargs: Extra keyword arguments passed on to reader, such as err_max.

    Returns:
        List of the tuples returned by reader, in list-file order.

    Raises:
        FileIoError: If the list file or any of the light curves cannot be read.
    """
    filenames = read_file_names(list_file)
    if len(filenames) == 0:
        warn('No light curve files listed in {}'.format(list_file))
        return []

    if verbose:
        progress_bar = bar.FillingSquaresBar('Loading light curves......', max=len(filenames))

    light_curves = []
    try:
        for filename in filenames:
            light_curves.append(reader(filename, **kwargs))
            if verbose:
                progress_bar.next()
    finally:
        if verbose:
            progress_bar.finish()

    if verbose:
        print('Loaded {} light curves from {}'.format(len(light_curves), list_file))

    return light_curves

def _write_columns(destination, header, col1, col2, footer='', caller='print_table()'):
    """
    Writes two columns with np.savetxt, to a path or an open handle.
    """
    rows = np.column_stack((col1, col2)) if len(col1) > 0 else np.empty((0, 2))
    fmt = COLUMN_SEPARATOR.join([NUMBER_FORMAT, NUMBER_FORMAT])

    try:
        np.savetxt(destination, rows, fmt=fmt, header=header, footer=footer, comments='')
    except OSError as e:
        raise FileIoError('Could not write data in {}: {}'.format(caller, e)) from e

def print_table(destination, header, col1, col2):
    """
    Writes a two-column, tab-separated table. An existing file is replaced.

    Args:
        destination (str or file): Path of the file to write, or an open file handle.
        header (str): Line printed at the start of the file.
        col1, col2 (array-like): Values to print, of equal length.

    Raises:
        ValueError: If col1 and col2 differ in length.
        FileIoError: If the file cannot be written.
    """
    if len(col1) != len(col2):
        raise ValueError('Mismatched vectors passed to print_table() (gave {} and {})'.format(len(col1), len(col2)))

    _write_columns(destination, header, col1, col2, caller='print_table()')

def print_hist(destination, bin_edges, values):
    """
    Writes a histogram as a two-column table of left bin edges and bin values.

    The final row holds only the right edge of the last bin.

    Args:
        destination (str or file): Path of the file to write, or an open file handle.
        bin_edges (array-like): The bin edges, one more than there are values.
        values (array-like): values[i] is the content of the bin between
            bin_edges[i] and bin_edges[i+1].

    Raises:
        ValueError: If len(bin_edges) != len(values) + 1.
        FileIoError: If the file cannot be written.
    """
    if len(bin_edges) != len(values) + 1:
        raise ValueError('Mismatched vectors passed to print_hist() (gave {} and {})'.format(len(bin_edges), len(values)))

    footer = NUMBER_FORMAT % bin_edges[len(values)]
    header = COLUMN_SEPARATOR.join(['Bin Start', 'Value'])
    _write_columns(destination, header, bin_edges[:len(values)], values, footer=footer, caller='print_hist()')

def print_periodogram(filename, freq, power, threshold, fap):
    """
    Writes a periodogram, preceded by a line giving the false alarm
    probability of the significance threshold.

    Args:
        filename (str or file): The file to write.
        freq (array-like): Frequencies at which the periodogram was measured.
        power (array-like): Periodogram power at each frequency.
        threshold (float): The significance threshold.
        fap (float): The false alarm probability associated with threshold.

    Raises:
        ValueError: If freq and power differ in length.
        FileIoError: If the file cannot be written.
    """
    if fap < 0.05:
        fap_line = 'FAP %.1g%% above %7.1f' % (fap*100.0, threshold)
    else:
        fap_line = 'FAP %.0f%% above %7.1f' % (fap*100.0, threshold)

    print_table(filename, fap_line + '\n' + 'Freq\tPower', freq, power)

def print_acf(filename, times, acf):
    """Writes an autocorrelation function as offset and correlation columns."""
    print_table(filename, 'Offset\tACF', times, acf)

def print_dmdt(filename, delta_t, delta_m):
    """Writes a delta-m delta-t scatter plot as time and magnitude difference columns."""
    print_table(filename, 'Offset\tMag Diff.', delta_t, delta_m)

def print_rms_t(filename, times, rms_vals):
    """Writes an RMS versus time-interval scatter plot."""
    print_table(filename, 'Interval\tRMS', times, rms_vals)
