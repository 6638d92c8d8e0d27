# Copyright (c) 2025 rapidcentroid
# Licensed under the Apache License, Version 2.0

"""
Coercion of raw point collections into float matrices.
"""

import math
from numbers import Integral

import numpy as np

from .errors import ValidationError


def _to_float(value, row: int, col: int) -> float:
    if value is None or isinstance(value, (bool, np.bool_)):
        raise ValidationError(
            f"Value at row {row}, column {col} must be numeric, got {value!r}."
        )
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"Value at row {row}, column {col} must be numeric, got {value!r}."
        ) from e
    if not math.isfinite(number):
        raise ValidationError(
            f"Value at row {row}, column {col} must be finite, got {value!r}."
        )
    return number


def as_matrix(data, allow_empty: bool = False) -> np.ndarray:
    """
    Convert a sequence of points into an (n, d) float matrix.

    Parameters
    ----------
    data : sequence of sequences or np.ndarray
        Points, all with the same number of components.

    allow_empty : bool, default=False
        Return an empty (0, 0) matrix instead of raising for empty input.

    Returns
    -------
    np.ndarray
        A new float64 matrix; the input is never modified.

    Raises
    ------
    ValidationError
        If the input is empty, ragged, zero-dimensional or holds a
        non-numeric or non-finite value.
    """
    if isinstance(data, np.ndarray) and data.dtype.kind in "iuf":
        if data.ndim != 2:
            raise ValidationError(
                f"Dataset must be two-dimensional, got shape {data.shape}."
            )
        if data.shape[0] == 0:
            if allow_empty:
                return np.empty((0, 0))
            raise ValidationError("Dataset must not be empty.")
        if data.shape[1] == 0:
            raise ValidationError("Points must have at least one dimension.")
        matrix = data.astype(np.float64, copy=True)
        if not np.all(np.isfinite(matrix)):
            row, col = np.argwhere(~np.isfinite(matrix))[0]
            raise ValidationError(
                f"Value at row {row}, column {col} must be finite, got {matrix[row, col]!r}."
            )
        return matrix

    if data is None:
        raise ValidationError("Dataset must not be None.")
    rows = list(data)
    if not rows:
        if allow_empty:
            return np.empty((0, 0))
        raise ValidationError("Dataset must not be empty.")

    try:
        dim = len(rows[0])
    except TypeError as e:
        raise ValidationError("Each point must be a sequence of numbers.") from e
    if dim < 1:
        raise ValidationError("Points must have at least one dimension.")

    values = []
    for i, row in enumerate(rows):
        if isinstance(row, (str, bytes)):
            raise ValidationError(f"Point {i} must be a sequence of numbers, got {row!r}.")
        try:
            size = len(row)
        except TypeError as e:
            raise ValidationError(f"Point {i} must be a sequence of numbers.") from e
        if size != dim:
            raise ValidationError(
                f"All points must have the same dimensionality: point {i} has "
                f"{size} components, expected {dim}."
            )
        values.append([_to_float(v, i, j) for j, v in enumerate(row)])
    return np.array(values, dtype=np.float64)


def check_positive_int(value, name: str) -> int:
    """Return ``value`` as an int, or raise if it is not a positive integer."""
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, Integral):
        raise ValidationError(f"{name} must be an integer, got {value!r}.")
    if value <= 0:
        raise ValidationError(f"{name} must be greater than 0, got {value}.")
    return int(value)
