# Copyright (c) 2025 rapidcentroid
# Licensed under the Apache License, Version 2.0

"""
Tests for the distance metric and min-max normalization.
"""

import unittest
from unittest import mock

import numpy as np

from rapidcentroid.clusterer import distance
from rapidcentroid.clusterer import (
    ValidationError,
    euclidean_distance,
    min_max_normalize,
    pairwise_distances,
)


class EuclideanDistanceTest(unittest.TestCase):
    """Test cases for euclidean_distance and pairwise_distances."""

    def test_known_distance(self):
        self.assertAlmostEqual(euclidean_distance([0.0, 0.0], [3.0, 4.0]), 5.0)

    def test_symmetric(self):
        rng = np.random.default_rng(3)
        for _ in range(20):
            a, b = rng.normal(size=(2, 5))
            self.assertEqual(euclidean_distance(a, b), euclidean_distance(b, a))

    def test_zero_iff_equal(self):
        self.assertEqual(euclidean_distance([1.5, -2.0, 7.0], [1.5, -2.0, 7.0]), 0.0)
        self.assertGreater(euclidean_distance([1.5, -2.0, 7.0], [1.5, -2.0, 7.000001]), 0.0)

    def test_dimension_mismatch(self):
        with self.assertRaises(ValidationError):
            euclidean_distance([1.0, 2.0], [1.0, 2.0, 3.0])

    def test_pairwise_matches_single(self):
        points = np.array([[0.0, 0.0], [1.0, 1.0], [4.0, 5.0]])
        centers = np.array([[0.0, 1.0], [3.0, 3.0]])
        distances = pairwise_distances(points, centers)

        self.assertEqual(distances.shape, (3, 2))
        for i, point in enumerate(points):
            for j, center in enumerate(centers):
                self.assertAlmostEqual(distances[i, j], euclidean_distance(point, center))

    def test_pairwise_blocks_match_single_pass(self):
        rng = np.random.default_rng(17)
        points = rng.normal(size=(23, 4))
        centers = rng.normal(size=(5, 4))
        expected = np.sqrt(((points[:, None, :] - centers[None, :, :]) ** 2).sum(axis=2))

        with mock.patch.object(distance, "BLOCK_ELEMENTS", 7):
            blocked = pairwise_distances(points, centers)

        np.testing.assert_allclose(blocked, expected)


class MinMaxNormalizeTest(unittest.TestCase):
    """Test cases for min_max_normalize."""

    def test_rescales_each_dimension(self):
        normalized = min_max_normalize([[1.0, 10.0], [3.0, 30.0], [2.0, 20.0]])
        np.testing.assert_allclose(normalized, [[0.0, 0.0], [1.0, 1.0], [0.5, 0.5]])

    def test_zero_range_dimension_maps_to_half(self):
        normalized = min_max_normalize([[1.0, 5.0], [3.0, 5.0], [2.0, 5.0]])
        self.assertTrue(np.all(normalized[:, 1] == 0.5))
        np.testing.assert_allclose(normalized[:, 0], [0.0, 1.0, 0.5])

    def test_output_within_unit_interval(self):
        rng = np.random.default_rng(11)
        data = rng.normal(loc=50.0, scale=20.0, size=(40, 4))
        normalized = min_max_normalize(data)

        self.assertEqual(normalized.shape, data.shape)
        self.assertTrue(np.all(normalized >= 0.0))
        self.assertTrue(np.all(normalized <= 1.0))
        np.testing.assert_allclose(normalized.min(axis=0), 0.0)
        np.testing.assert_allclose(normalized.max(axis=0), 1.0)

    def test_accepts_numeric_strings(self):
        normalized = min_max_normalize([["1", 2], ["3", 4]])
        np.testing.assert_allclose(normalized, [[0.0, 0.0], [1.0, 1.0]])

    def test_does_not_modify_input(self):
        data = np.array([[1.0, 2.0], [3.0, 4.0]])
        min_max_normalize(data)
        np.testing.assert_array_equal(data, [[1.0, 2.0], [3.0, 4.0]])

    def test_empty_input(self):
        self.assertEqual(min_max_normalize([]).shape, (0, 0))

    def test_non_numeric_value(self):
        for bad in ["abc", None, True, float("nan")]:
            with self.assertRaises(ValidationError):
                min_max_normalize([[1.0, 2.0], [bad, 4.0]])

    def test_inconsistent_dimensions(self):
        with self.assertRaises(ValidationError):
            min_max_normalize([[1.0, 2.0], [3.0]])


if __name__ == "__main__":
    unittest.main()
