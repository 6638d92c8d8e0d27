# Copyright (c) 2025 rapidcentroid
# Licensed under the Apache License, Version 2.0

"""
Silhouette Score for a finished clustering.
"""

from typing import Sequence

import numpy as np

from .distance import BLOCK_ELEMENTS, pairwise_distances
from .errors import ValidationError
from .steps import UNASSIGNED


def silhouette_score(data, assignments: Sequence[int], k: int) -> float:
    """
    Mean silhouette coefficient over all points.

    For point i in cluster C(i), ``a(i)`` is the mean distance to the other
    members of C(i) and ``b(i)`` the smallest mean distance to the members
    of any other non-empty cluster. The per-point score is
    ``(b - a) / max(a, b)``. It is 0 for a point alone in its cluster, for
    a point with no other non-empty cluster, and when ``a`` and ``b`` are
    both 0.

    Distances are computed one block of rows at a time, so memory grows
    with n rather than with n squared.

    Parameters
    ----------
    data : array-like
        Dataset of shape (n, d).

    assignments : sequence of int
        Cluster id per point.

    k : int
        Number of clusters.

    Returns
    -------
    float
        Score in [-1, 1]. Exactly 0.0 when there are fewer than two points,
        fewer than two clusters, or unassigned points; callers should read
        that as "not computed".

    Raises
    ------
    ValidationError
        If ``data`` is not a matrix, ``assignments`` does not have one
        entry per point, or a cluster id lies outside [-1, k).
    """
    data = np.asarray(data, dtype=np.float64)
    assignments = np.asarray(assignments, dtype=np.int64)
    if data.ndim != 2:
        raise ValidationError(f"Dataset must be two-dimensional, got shape {data.shape}.")
    n = data.shape[0]
    if assignments.shape != (n,):
        raise ValidationError(
            f"Expected one cluster id per point ({n}), got shape {assignments.shape}."
        )
    if n and (assignments.min() < UNASSIGNED or assignments.max() >= max(k, 0)):
        raise ValidationError(f"Cluster ids must lie in [{UNASSIGNED}, {k}).")
    if n < 2 or k < 2 or np.any(assignments == UNASSIGNED):
        return 0.0

    membership = np.zeros((n, k))
    membership[np.arange(n), assignments] = 1.0
    sizes = membership.sum(axis=0)
    non_empty = sizes > 0

    scores = np.zeros(n)
    step = max(1, BLOCK_ELEMENTS // n)
    for start in range(0, n, step):
        stop = min(start + step, n)
        rows = np.arange(stop - start)
        own = assignments[start:stop]

        # Sum of distances from each point in the block to each cluster.
        totals = pairwise_distances(data[start:stop], data) @ membership
        own_sizes = sizes[own]

        a = np.zeros(stop - start)
        shared = own_sizes > 1
        a[shared] = totals[rows, own][shared] / (own_sizes[shared] - 1)

        means = np.full((stop - start, k), np.inf)
        means[:, non_empty] = totals[:, non_empty] / sizes[non_empty]
        means[rows, own] = np.inf
        b = means.min(axis=1)

        scale = np.maximum(a, b)
        scored = shared & np.isfinite(b) & (scale > 0)
        block = np.zeros(stop - start)
        block[scored] = (b[scored] - a[scored]) / scale[scored]
        scores[start:stop] = block
    return float(scores.mean())
