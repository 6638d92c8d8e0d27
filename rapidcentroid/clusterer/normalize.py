# Copyright (c) 2025 rapidcentroid
# Licensed under the Apache License, Version 2.0

"""
Min-max feature scaling applied before clustering.
"""

import numpy as np

from .validation import as_matrix

# Value assigned to every entry of a dimension whose min equals its max.
CONSTANT_DIMENSION_VALUE = 0.5


def min_max_normalize(data) -> np.ndarray:
    """
    Rescale each dimension independently to [0, 1].

    Every value ``x`` in dimension ``d`` becomes
    ``(x - min_d) / (max_d - min_d)``. A dimension with zero range maps
    every value to 0.5 so it does not pull early distance comparisons
    towards either end.

    Parameters
    ----------
    data : sequence of sequences or np.ndarray
        Raw feature rows. Numeric strings are accepted.

    Returns
    -------
    np.ndarray
        New matrix with the same shape as the input. Empty input yields
        an empty (0, 0) matrix.

    Raises
    ------
    ValidationError
        If a value is not numeric or rows have different lengths.

    Examples
    --------
    >>> min_max_normalize([[1, 5], [3, 5]])
    array([[0. , 0.5],
           [1. , 0.5]])
    """
    matrix = as_matrix(data, allow_empty=True)
    if matrix.size == 0:
        return matrix

    mins = matrix.min(axis=0)
    ranges = matrix.max(axis=0) - mins
    constant = ranges == 0

    normalized = np.empty_like(matrix)
    normalized[:, ~constant] = (matrix[:, ~constant] - mins[~constant]) / ranges[~constant]
    normalized[:, constant] = CONSTANT_DIMENSION_VALUE
    return normalized
