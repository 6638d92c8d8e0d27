# Copyright (c) 2025 rapidcentroid
# Licensed under the Apache License, Version 2.0

"""
Assignment and update steps of Lloyd's iteration.
"""

from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from .distance import pairwise_distances
from .errors import ValidationError

# Cluster id of a point before the first assignment step.
UNASSIGNED = -1


def assign_points(
    data: np.ndarray,
    centroids: np.ndarray,
    previous: Optional[np.ndarray] = None,
) -> Tuple[np.ndarray, bool]:
    """
    Map every point to its nearest centroid.

    Ties go to the lowest centroid index.

    Parameters
    ----------
    data : np.ndarray
        Dataset of shape (n, d).

    centroids : np.ndarray
        Centroids of shape (k, d).

    previous : np.ndarray, optional
        Assignment from the previous step, compared against to detect change.

    Returns
    -------
    tuple of (np.ndarray, bool)
        The new assignment and whether any point changed cluster.
    """
    assignments = np.argmin(pairwise_distances(data, centroids), axis=1)
    if previous is None:
        return assignments, True
    return assignments, bool(np.any(assignments != previous))


def clusters_from_assignments(assignments: Sequence[int], k: int) -> Dict[int, List[int]]:
    """Point indices per cluster id; unassigned points are left out."""
    clusters = {cluster_id: [] for cluster_id in range(k)}
    for index, cluster_id in enumerate(assignments):
        if cluster_id != UNASSIGNED:
            clusters[int(cluster_id)].append(index)
    return clusters


def cluster_sizes(assignments: Sequence[int], k: int) -> List[int]:
    """Number of points in each of the k clusters."""
    assignments = np.asarray(assignments, dtype=np.int64)
    assigned = assignments[assignments != UNASSIGNED]
    return [int(c) for c in np.bincount(assigned, minlength=k)]


class CentroidUpdate:
    """
    Base class for centroid update rules.

    Subclasses implement :meth:`combine`, which reduces the member points
    of one cluster to a single vector.
    """

    name = None

    def combine(self, members: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    def update(
        self,
        data: np.ndarray,
        clusters: Mapping[int, Sequence[int]],
        previous_centroids: np.ndarray,
    ) -> np.ndarray:
        """
        Recompute centroids from their members.

        A cluster without members keeps its previous centroid.

        Returns
        -------
        np.ndarray
            New centroid matrix; ``previous_centroids`` is left untouched.
        """
        centroids = previous_centroids.copy()
        for cluster_id, members in clusters.items():
            if len(members) > 0:
                centroids[cluster_id] = self.combine(data[list(members)])
        return centroids

    def __repr__(self):
        return f"{type(self).__name__}()"


class MeanUpdate(CentroidUpdate):
    """Per-dimension arithmetic mean."""

    name = "mean"

    def combine(self, members):
        return members.mean(axis=0)


class MedianUpdate(CentroidUpdate):
    """Per-dimension median; even-sized clusters average the two middle values."""

    name = "median"

    def combine(self, members):
        return np.median(members, axis=0)


UPDATE_RULES = {
    "mean": MeanUpdate,
    "median": MedianUpdate,
    "rce": MedianUpdate,
}


def get_update_rule(rule: Union[str, CentroidUpdate]) -> CentroidUpdate:
    """Resolve an update rule name, or pass through an update rule instance."""
    if isinstance(rule, CentroidUpdate):
        return rule
    try:
        return UPDATE_RULES[rule]()
    except (KeyError, TypeError):
        raise ValidationError(
            f"Unknown updateRule {rule!r}. Options: {', '.join(UPDATE_RULES)}"
        ) from None
