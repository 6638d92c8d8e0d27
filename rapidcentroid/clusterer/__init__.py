# Copyright (c) 2025 rapidcentroid
# Licensed under the Apache License, Version 2.0

"""
K-Means Clustering
==================

This module provides an in-memory k-means engine with interchangeable
seeding strategies (uniform random, farthest-point "RCE") and centroid
update rules (mean, median), plus min-max normalization and the
Silhouette Score.

Classes:
    KMeans: Clustering engine
    KMeansResult: Immutable outcome of a run
    EngineState: Engine lifecycle states

Example:
    >>> from rapidcentroid.clusterer import KMeans, min_max_normalize
    >>>
    >>> data = min_max_normalize([
    ...     [0.0, 0.0],
    ...     [0.0, 1.0],
    ...     [10.0, 10.0],
    ...     [10.0, 11.0],
    ... ])
    >>>
    >>> kmeans = KMeans(data, k=2, maxIter=10, initMode="rce", seed=42)
    >>> result = kmeans.run(computeSilhouette=True)
    >>> result.assignments
    >>> result.silhouetteScore
"""

from .datasets import read_table
from .distance import euclidean_distance, pairwise_distances
from .errors import ValidationError
from .initializers import (
    CentroidInitializer,
    FarthestPointInitializer,
    RandomInitializer,
    get_initializer,
)
from .kmeans import EngineState, KMeans, KMeansParams, KMeansResult
from .normalize import min_max_normalize
from .silhouette import silhouette_score
from .steps import (
    UNASSIGNED,
    CentroidUpdate,
    MeanUpdate,
    MedianUpdate,
    assign_points,
    cluster_sizes,
    clusters_from_assignments,
    get_update_rule,
)

__all__ = [
    "KMeans",
    "KMeansParams",
    "KMeansResult",
    "EngineState",
    "ValidationError",
    "CentroidInitializer",
    "RandomInitializer",
    "FarthestPointInitializer",
    "get_initializer",
    "CentroidUpdate",
    "MeanUpdate",
    "MedianUpdate",
    "get_update_rule",
    "UNASSIGNED",
    "assign_points",
    "cluster_sizes",
    "clusters_from_assignments",
    "euclidean_distance",
    "pairwise_distances",
    "min_max_normalize",
    "silhouette_score",
    "read_table",
]
