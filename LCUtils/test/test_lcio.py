# -*- coding: utf-8 -*-
"""
    Created on Thu Jul 25 10:21:40 2013
"""
import io
import os
import shutil
import tempfile
import unittest

import numpy as np

from LCUtils import lcio
from LCUtils.exceptions import FileIoError

WG_LC = """# time mag err
3.0 15.3 0.05
1.0 15.1 0.10
# bad night
2.0 15.2 0.90
4.0 15.4 0.02
"""

WG2_LC = """# id time mag err limit
1 2456002.5 17.2 0.04 19.0
2 2456001.5 17.1 0.30 19.0
3 2456000.5 17.0 0.02 19.1
"""

MC_LC = """5.0 1.5
1.0 1.1
3.0 1.3
"""

CSV_LC = """# time, flux
2.0, 20.0
1.0 , 10.0
3.0,30.0
"""

class Test(unittest.TestCase):
    """Unittest for the light curve and table readers and writers.
    """

    def setUp(self):
        self.folder = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.folder)

    def _write(self, name, text):
        path = os.path.join(self.folder, name)
        with open(path, 'w') as handle:
            handle.write(text)
        return path

    def _read(self, path):
        with open(path) as handle:
            return handle.read()

    def test_read_table(self):
        path = self._write('table.dat', MC_LC)
        col1, col2 = lcio.read_table(path, usecols=(0, 1))
        np.testing.assert_array_equal(col1, [5.0, 1.0, 3.0])
        np.testing.assert_array_equal(col2, [1.5, 1.1, 1.3])

        col2, col1 = lcio.read_table(io.StringIO(MC_LC), usecols=(1, 0))
        np.testing.assert_array_equal(col1, [5.0, 1.0, 3.0])
        np.testing.assert_array_equal(col2, [1.5, 1.1, 1.3])

    def test_read_table_single_row(self):
        col1, col2, col3 = lcio.read_table(io.StringIO('1.0 2.0 3.0\n'), usecols=(0, 1, 2))
        np.testing.assert_array_equal(col1, [1.0])
        np.testing.assert_array_equal(col3, [3.0])

    def test_read_table_errors(self):
        self.assertRaises(FileIoError, lcio.read_table, os.path.join(self.folder, 'missing.dat'), (0, 1))

        path = self._write('bad.dat', '1.0 2.0\n3.0 abc\n')
        self.assertRaises(FileIoError, lcio.read_table, path, (0, 1))

    def test_read_wg_light_curve(self):
        path = self._write('wg.dat', WG_LC)
        times, values, errors = lcio.read_wg_light_curve(path, err_max=0.2)

        np.testing.assert_array_equal(times, [1.0, 3.0, 4.0])
        np.testing.assert_array_equal(values, [15.1, 15.3, 15.4])
        np.testing.assert_array_equal(errors, [0.10, 0.05, 0.02])

    def test_read_wg2_light_curve(self):
        path = self._write('wg2.dat', WG2_LC)
        times, values, errors = lcio.read_wg2_light_curve(path, err_max=0.1)

        np.testing.assert_array_equal(times, [2456000.5, 2456002.5])
        np.testing.assert_array_equal(values, [17.0, 17.2])
        np.testing.assert_array_equal(errors, [0.02, 0.04])

    def test_read_mc_light_curve(self):
        path = self._write('mc.dat', MC_LC)
        times, values = lcio.read_mc_light_curve(path)

        np.testing.assert_array_equal(times, [1.0, 3.0, 5.0])
        np.testing.assert_array_equal(values, [1.1, 1.3, 1.5])

    def test_read_csv_light_curve(self):
        path = self._write('lc.csv', CSV_LC)
        times, values = lcio.read_csv_light_curve(path)

        np.testing.assert_array_equal(times, [1.0, 2.0, 3.0])
        np.testing.assert_array_equal(values, [10.0, 20.0, 30.0])

    def test_read_csv_light_curve_errors(self):
        self.assertRaises(FileIoError, lcio.read_csv_light_curve, os.path.join(self.folder, 'missing.csv'))

        path = self._write('bad.csv', '1.0, 2.0\n2.0, oops\n')
        self.assertRaises(FileIoError, lcio.read_csv_light_curve, path)

        path = self._write('short.csv', '1.0,10.0\n2.0\n3.0,30.0\n')
        self.assertRaises(FileIoError, lcio.read_csv_light_curve, path)
        self.assertRaises(FileIoError, lcio.read_csv_table, io.StringIO('1.0,10.0\n2.0\n3.0,30.0\n'), (0, 1))

        path = self._write('blank_field.csv', '1.0,10.0\n2.0,\n3.0,30.0\n')
        self.assertRaises(FileIoError, lcio.read_csv_light_curve, path)

        path = self._write('one_column.csv', '1.0\n2.0\n')
        self.assertRaises(FileIoError, lcio.read_csv_light_curve, path)

    def test_read_csv_table_nan(self):
        col1, col2 = lcio.read_csv_table(io.StringIO('1.0,nan\n2.0,20.0\n'), (0, 1))
        np.testing.assert_array_equal(col1, [1.0, 2.0])
        self.assertTrue(np.isnan(col2[0]), msg="an explicit nan should be read as NaN.")
        self.assertEqual(col2[1], 20.0)

    def test_read_file_names(self):
        path = self._write('list.txt', '# light curves\nfirst.dat\nwith space .dat\r\n\nlast.dat')
        names = lcio.read_file_names(path)
        self.assertEqual(names, ['first.dat', 'with space .dat', 'last.dat'])

        self.assertEqual(lcio.read_file_names(self._write('empty.txt', '')), [])
        self.assertRaises(FileIoError, lcio.read_file_names, os.path.join(self.folder, 'missing.txt'))

    def test_load_light_curves(self):
        first = self._write('first.dat', WG_LC)
        second = self._write('second.dat', WG_LC)
        list_file = self._write('list.txt', first + '\n' + second + '\n')

        light_curves = lcio.load_light_curves(list_file, reader=lcio.read_wg_light_curve, verbose=False, err_max=0.2)
        self.assertEqual(len(light_curves), 2)
        np.testing.assert_array_equal(light_curves[1][0], [1.0, 3.0, 4.0])

        list_file = self._write('broken.txt', first + '\n' + os.path.join(self.folder, 'missing.dat') + '\n')
        self.assertRaises(FileIoError, lcio.load_light_curves, list_file, verbose=False)

    def test_print_table(self):
        path = os.path.join(self.folder, 'table.txt')
        lcio.print_table(path, 'Time\tFlux', [1.0, 2.5], [10.0, -0.25])

        self.assertEqual(self._read(path), 'Time\tFlux\n 1.0000\t10.0000\n 2.5000\t-0.2500\n')

        self.assertRaises(ValueError, lcio.print_table, path, 'Time\tFlux', [1.0, 2.0], [1.0])
        self.assertRaises(FileIoError, lcio.print_table, os.path.join(self.folder, 'no', 'dir.txt'), 'x', [1.0], [1.0])

    def test_print_table_handle(self):
        handle = io.StringIO()
        lcio.print_table(handle, 'A\tB', [1.0], [2.0])
        self.assertEqual(handle.getvalue(), 'A\tB\n 1.0000\t 2.0000\n')

    def test_print_hist(self):
        path = os.path.join(self.folder, 'hist.txt')
        lcio.print_hist(path, [0.0, 1.0, 2.0], [5.0, 3.0])

        self.assertEqual(self._read(path), 'Bin Start\tValue\n 0.0000\t 5.0000\n 1.0000\t 3.0000\n 2.0000\n')
        self.assertRaises(ValueError, lcio.print_hist, path, [0.0, 1.0], [5.0, 3.0])

    def test_print_periodogram(self):
        path = os.path.join(self.folder, 'periodogram.txt')
        lcio.print_periodogram(path, [0.1, 0.2], [3.0, 4.0], threshold=12.5, fap=0.01)
        lines = self._read(path).splitlines()
        self.assertEqual(lines[0], 'FAP 1% above    12.5')
        self.assertEqual(lines[1], 'Freq\tPower')
        self.assertEqual(len(lines), 4)

        lcio.print_periodogram(path, [0.1], [3.0], threshold=12.5, fap=0.5)
        self.assertEqual(self._read(path).splitlines()[0], 'FAP 50% above    12.5')

    def test_print_named_tables(self):
        path = os.path.join(self.folder, 'out.txt')

        lcio.print_acf(path, [0.0], [1.0])
        self.assertTrue(self._read(path).startswith('Offset\tACF\n'))

        lcio.print_dmdt(path, [0.0], [1.0])
        self.assertTrue(self._read(path).startswith('Offset\tMag Diff.\n'))

        lcio.print_rms_t(path, [0.0], [1.0])
        self.assertTrue(self._read(path).startswith('Interval\tRMS\n'))

if __name__ == '__main__':
    unittest.main()
