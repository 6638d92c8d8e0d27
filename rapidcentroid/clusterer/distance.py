# Copyright (c) 2025 rapidcentroid
# Licensed under the Apache License, Version 2.0

"""
Euclidean distance between points and between point sets.
"""

import numpy as np

from .errors import ValidationError


def euclidean_distance(a, b) -> float:
    """
    Euclidean distance ``sqrt(sum((a[i] - b[i]) ** 2))``.

    Raises
    ------
    ValidationError
        If the two vectors have different lengths.
    """
    a = np.asarray(a, dtype=np.float64).ravel()
    b = np.asarray(b, dtype=np.float64).ravel()
    if a.shape != b.shape:
        raise ValidationError(
            f"Cannot compare vectors of dimension {a.shape[0]} and {b.shape[0]}."
        )
    return float(np.sqrt(np.sum((a - b) ** 2)))


# Upper bound on the number of elements in one (rows, m, d) difference block.
BLOCK_ELEMENTS = 2 ** 21


def pairwise_distances(points: np.ndarray, centers: np.ndarray) -> np.ndarray:
    """
    Distances from every row of ``points`` to every row of ``centers``.

    Rows of ``points`` are processed in blocks so the intermediate
    difference tensor never exceeds ``BLOCK_ELEMENTS`` elements.

    Parameters
    ----------
    points : np.ndarray
        Matrix of shape (n, d).

    centers : np.ndarray
        Matrix of shape (m, d).

    Returns
    -------
    np.ndarray
        Matrix of shape (n, m).
    """
    n, m = points.shape[0], centers.shape[0]
    distances = np.empty((n, m))
    step = max(1, BLOCK_ELEMENTS // max(1, m * points.shape[1]))
    for start in range(0, n, step):
        # (rows, 1, d) - (1, m, d) -> (rows, m, d)
        diff = points[start:start + step, np.newaxis, :] - centers[np.newaxis, :, :]
        distances[start:start + step] = np.sqrt(np.sum(diff ** 2, axis=2))
    return distances
