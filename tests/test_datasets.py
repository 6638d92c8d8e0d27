# Copyright (c) 2025 rapidcentroid
# Licensed under the Apache License, Version 2.0

"""
Tests for reading indicator tables.
"""

import os
import shutil
import tempfile
import unittest

import numpy as np

from rapidcentroid.clusterer import ValidationError, read_table


class ReadTableTest(unittest.TestCase):
    """Test cases for read_table with CSV input."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def _write(self, name, text):
        path = os.path.join(self.temp_dir, name)
        with open(path, "w") as f:
            f.write(text)
        return path

    def test_leading_columns(self):
        path = self._write("data.csv", "a,b,label\n1,2,x\n3,4,y\n5,6,z\n")
        names, matrix = read_table(path, columns=2)

        self.assertEqual(names, ["a", "b"])
        np.testing.assert_array_equal(matrix, [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])

    def test_named_columns(self):
        path = self._write("data.csv", "a,b,c\n1,2,3\n4,5,6\n")
        names, matrix = read_table(path, columns=["c", "a"])

        self.assertEqual(names, ["c", "a"])
        np.testing.assert_array_equal(matrix, [[3.0, 1.0], [6.0, 4.0]])

    def test_drops_non_numeric_rows(self):
        path = self._write("data.csv", "a,b\n1,2\noops,5\n3,\n7,8\n")
        with self.assertLogs("rapidcentroid.clusterer.datasets", level="WARNING") as logs:
            _, matrix = read_table(path)

        np.testing.assert_array_equal(matrix, [[1.0, 2.0], [7.0, 8.0]])
        self.assertIn("Dropped 2 of 4 rows", logs.output[0])

    def test_no_valid_rows(self):
        path = self._write("data.csv", "a,b\nx,y\nz,w\n")
        with self.assertRaises(ValidationError):
            read_table(path)

    def test_unknown_columns(self):
        path = self._write("data.csv", "a,b\n1,2\n")
        with self.assertRaises(ValidationError):
            read_table(path, columns=["a", "missing"])
        with self.assertRaises(ValidationError):
            read_table(path, columns=3)


if __name__ == "__main__":
    unittest.main()
