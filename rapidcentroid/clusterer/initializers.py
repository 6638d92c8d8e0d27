# Copyright (c) 2025 rapidcentroid
# Licensed under the Apache License, Version 2.0

"""
Centroid seeding strategies.

Each strategy picks k rows of the dataset as initial centroids. The random
source is always passed in explicitly so a seeded run is repeatable.
"""

from typing import List, Union

import numpy as np

from .distance import pairwise_distances
from .errors import ValidationError
from .validation import check_positive_int


class CentroidInitializer:
    """
    Base class for initialization strategies.

    Subclasses implement :meth:`select_indices`.
    """

    name = None

    def select_indices(self, data: np.ndarray, k: int, rng: np.random.Generator) -> List[int]:
        raise NotImplementedError

    def initialize(self, data: np.ndarray, k: int, rng: np.random.Generator) -> np.ndarray:
        """
        Choose k initial centroids.

        Parameters
        ----------
        data : np.ndarray
            Dataset of shape (n, d).

        k : int
            Number of centroids, 0 < k <= n.

        rng : np.random.Generator
            Random source.

        Returns
        -------
        np.ndarray
            Matrix of shape (k, d) holding copies of the chosen points.
        """
        _check_k(data, k)
        return data[self.select_indices(data, k, rng)].copy()

    def __repr__(self):
        return f"{type(self).__name__}()"


class RandomInitializer(CentroidInitializer):
    """Pick k distinct points uniformly at random."""

    name = "random"

    def select_indices(self, data, k, rng):
        _check_k(data, k)
        return [int(i) for i in rng.choice(data.shape[0], size=k, replace=False)]


class FarthestPointInitializer(CentroidInitializer):
    """
    Farthest-point seeding (Rapid Centroid Estimation).

    The first centroid is a uniformly random point. Every following
    centroid is the not-yet-chosen point whose distance to its nearest
    chosen centroid is largest, ties going to the lowest index. Only the
    first pick consumes randomness.
    """

    name = "farthestPoint"

    def select_indices(self, data, k, rng):
        _check_k(data, k)
        chosen = [int(rng.integers(data.shape[0]))]
        nearest = pairwise_distances(data, data[chosen])[:, 0]

        for _ in range(1, k):
            candidates = nearest.copy()
            candidates[chosen] = -np.inf
            next_index = int(np.argmax(candidates))
            chosen.append(next_index)
            nearest = np.minimum(
                nearest, pairwise_distances(data, data[[next_index]])[:, 0]
            )
        return chosen


INIT_MODES = {
    "random": RandomInitializer,
    "farthestPoint": FarthestPointInitializer,
    "rce": FarthestPointInitializer,
}


def get_initializer(mode: Union[str, CentroidInitializer]) -> CentroidInitializer:
    """Resolve an init mode name, or pass through an initializer instance."""
    if isinstance(mode, CentroidInitializer):
        return mode
    try:
        return INIT_MODES[mode]()
    except (KeyError, TypeError):
        raise ValidationError(
            f"Unknown initMode {mode!r}. Options: {', '.join(INIT_MODES)}"
        ) from None


def _check_k(data: np.ndarray, k) -> None:
    check_positive_int(k, "k")
    if data.shape[0] == 0:
        raise ValidationError("Dataset must not be empty.")
    if k > data.shape[0]:
        raise ValidationError(
            f"k ({k}) must not exceed the number of points ({data.shape[0]})."
        )
