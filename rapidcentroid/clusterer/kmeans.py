# Copyright (c) 2025 rapidcentroid
# Licensed under the Apache License, Version 2.0

"""
K-Means clustering engine.

This module drives Lloyd's iteration over an in-memory dataset with
pluggable seeding (random or farthest-point) and centroid update
(mean or median) strategies.
"""

import logging
import time
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Optional, Tuple, Union

import numpy as np

from .distance import pairwise_distances
from .errors import ValidationError
from .initializers import CentroidInitializer, get_initializer
from .silhouette import silhouette_score
from .steps import (
    UNASSIGNED,
    CentroidUpdate,
    assign_points,
    cluster_sizes,
    clusters_from_assignments,
    get_update_rule,
)
from .validation import as_matrix, check_positive_int

logger = logging.getLogger(__name__)


class EngineState(Enum):
    """Lifecycle of a :class:`KMeans` engine."""

    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    ITERATING = "iterating"
    CONVERGED = "converged"
    MAX_ITERATIONS_REACHED = "maxIterationsReached"


class KMeansParams:
    """
    Params for KMeans.

    Parameters
    ----------
    k : int, default=2
        Number of clusters to create (0 < k <= number of points).

    maxIter : int, default=20
        Maximum number of iterations (>= 1).

    initMode : str or CentroidInitializer, default="random"
        Initialization algorithm.
        Options: "random", "farthestPoint" (alias "rce"), or an instance.

    updateRule : str or CentroidUpdate, default="mean"
        How centroids are recomputed from their members.
        Options: "mean", "median" (alias "rce"), or an instance.

    stopOnConvergence : bool, default=True
        Stop as soon as an iteration changes no assignment. When False the
        engine always runs maxIter iterations, which is useful to record
        the full iteration history.

    seed : int, optional
        Random seed for the initializer.
    """

    _defaults = {
        "k": 2,
        "maxIter": 20,
        "initMode": "random",
        "updateRule": "mean",
        "stopOnConvergence": True,
        "seed": None,
    }

    def __init__(self, **kwargs):
        unknown = set(kwargs) - set(self._defaults)
        if unknown:
            raise ValidationError(f"Unknown params: {', '.join(sorted(unknown))}")
        params = dict(self._defaults)
        params.update(kwargs)

        self._k = check_positive_int(params["k"], "k")
        self._maxIter = check_positive_int(params["maxIter"], "maxIter")
        self._initializer = get_initializer(params["initMode"])
        self._updater = get_update_rule(params["updateRule"])
        if not isinstance(params["stopOnConvergence"], bool):
            raise ValidationError(
                f"stopOnConvergence must be a bool, got {params['stopOnConvergence']!r}."
            )
        self._stopOnConvergence = params["stopOnConvergence"]
        seed = params["seed"]
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, (int, np.integer))):
            raise ValidationError(f"seed must be an integer, got {seed!r}.")
        self._seed = seed

    def getK(self) -> int:
        """Gets the value of k."""
        return self._k

    def getMaxIter(self) -> int:
        """Gets the value of maxIter."""
        return self._maxIter

    def getInitMode(self) -> str:
        """Gets the name of the initialization strategy."""
        return self._initializer.name or type(self._initializer).__name__

    def getUpdateRule(self) -> str:
        """Gets the name of the centroid update rule."""
        return self._updater.name or type(self._updater).__name__

    def getStopOnConvergence(self) -> bool:
        """Gets the value of stopOnConvergence."""
        return self._stopOnConvergence

    def getSeed(self) -> Optional[int]:
        """Gets the value of seed."""
        return self._seed


class KMeans(KMeansParams):
    """
    K-Means clustering over an in-memory dataset.

    The dataset and k are fixed at construction, where all input is
    validated and the initial centroids are chosen. :meth:`run` then
    alternates assignment and update steps until assignments stop changing
    or maxIter is reached.

    An engine instance owns its centroids and assignments; do not call
    :meth:`run` on the same instance from several threads.

    Parameters
    ----------
    data : sequence of sequences or np.ndarray
        Points to cluster, all with the same dimension.

    k : int, default=2
        Number of clusters.

    maxIter : int, default=20
        Maximum number of iterations.

    initMode : str or CentroidInitializer, default="random"
        "random" or "farthestPoint" ("rce").

    updateRule : str or CentroidUpdate, default="mean"
        "mean" or "median" ("rce").

    stopOnConvergence : bool, default=True
        When False, run exactly maxIter iterations.

    seed : int, optional
        Random seed. Ignored when ``rng`` is given.

    rng : np.random.Generator, optional
        Random source for the initializer.

    Raises
    ------
    ValidationError
        If the dataset is empty, ragged or non-numeric, if k is not in
        [1, number of points], or if a param is invalid.

    Examples
    --------
    >>> from rapidcentroid.clusterer import KMeans
    >>>
    >>> kmeans = KMeans([[0, 0], [0, 1], [10, 10], [10, 11]], k=2, maxIter=10, seed=42)
    >>> result = kmeans.run(computeSilhouette=True)
    >>> result.clusterCenters()
    >>> result.silhouetteScore
    >>>
    >>> # Median updates with farthest-point seeding
    >>> rce = KMeans(data, k=3, initMode="rce", updateRule="median")
    >>> rce.run().clusterSizes()

    See Also
    --------
    KMeansResult : The outcome of a run
    """

    def __init__(
        self,
        data,
        *,
        k: int = 2,
        maxIter: int = 20,
        initMode: Union[str, CentroidInitializer] = "random",
        updateRule: Union[str, CentroidUpdate] = "mean",
        stopOnConvergence: bool = True,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self._state = EngineState.UNINITIALIZED
        super(KMeans, self).__init__(
            k=k,
            maxIter=maxIter,
            initMode=initMode,
            updateRule=updateRule,
            stopOnConvergence=stopOnConvergence,
            seed=seed,
        )
        self._data = as_matrix(data)
        self._data.setflags(write=False)
        if self._k > self._data.shape[0]:
            raise ValidationError(
                f"k ({self._k}) must not exceed the number of points ({self._data.shape[0]})."
            )
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self._initialize()

    def _initialize(self) -> None:
        centroids = np.asarray(
            self._initializer.initialize(self._data, self._k, self._rng), dtype=np.float64
        )
        expected = (self._k, self.numFeatures)
        if centroids.shape != expected:
            raise ValidationError(
                f"{self.getInitMode()} produced centroids of shape {centroids.shape}, "
                f"expected {expected}."
            )
        if not np.all(np.isfinite(centroids)):
            raise ValidationError(f"{self.getInitMode()} produced non-finite centroids.")
        self._centroids = centroids
        self._assignments = np.full(self._data.shape[0], UNASSIGNED, dtype=np.int64)
        self._clusters = clusters_from_assignments(self._assignments, self._k)
        self._history = []
        self._state = EngineState.INITIALIZED

    @property
    def state(self) -> EngineState:
        """Current lifecycle state."""
        return self._state

    @property
    def numPoints(self) -> int:
        return self._data.shape[0]

    @property
    def numFeatures(self) -> int:
        return self._data.shape[1]

    def clusterCenters(self) -> np.ndarray:
        """Copy of the current centroids, shape (k, d)."""
        return self._centroids.copy()

    @property
    def assignments(self) -> Tuple[int, ...]:
        """Current cluster id per point (-1 before the first iteration)."""
        return tuple(int(c) for c in self._assignments)

    @property
    def clustersByIndex(self) -> Dict[int, Tuple[int, ...]]:
        """Current point indices per cluster id."""
        return {cid: tuple(members) for cid, members in self._clusters.items()}

    def clusterSizes(self) -> List[int]:
        """Number of points per cluster id, index-aligned with cluster ids."""
        return cluster_sizes(self._assignments, self._k)

    def silhouetteScore(self) -> float:
        """
        Silhouette Score of the current assignment.

        Returns
        -------
        float
            Score in [-1, 1], or 0.0 when k < 2, there are fewer than two
            points, or the engine has not run yet.
        """
        return silhouette_score(self._data, self._assignments, self._k)

    def run(self, computeSilhouette: bool = False) -> "KMeansResult":
        """
        Run the assign/update loop.

        Calling run again on the same engine reseeds the centroids and
        starts over from unassigned points.

        Parameters
        ----------
        computeSilhouette : bool, default=False
            Also compute the Silhouette Score of the final assignment.

        Returns
        -------
        KMeansResult
            Immutable snapshot of the final state.
        """
        if self._state is not EngineState.INITIALIZED:
            self._initialize()

        logger.info(
            "Running k-means with k=%d on %d points of dimension %d "
            "(initMode=%s, updateRule=%s, maxIter=%d, stopOnConvergence=%s)",
            self._k,
            self.numPoints,
            self.numFeatures,
            self.getInitMode(),
            self.getUpdateRule(),
            self._maxIter,
            self._stopOnConvergence,
        )

        start = time.perf_counter()
        self._state = EngineState.ITERATING
        iterations = 0
        converged_at = None

        for iteration in range(self._maxIter):
            self._assignments, changed = assign_points(
                self._data, self._centroids, self._assignments
            )
            self._clusters = clusters_from_assignments(self._assignments, self._k)
            self._centroids = self._updater.update(self._data, self._clusters, self._centroids)
            self._history.append(self.clusterSizes())
            iterations = iteration + 1

            logger.debug(
                "Iteration %d: changed=%s, sizes=%s", iterations, changed, self._history[-1]
            )

            if not changed and iteration > 0:
                if converged_at is None:
                    converged_at = iterations
                if self._stopOnConvergence:
                    break

        if self._stopOnConvergence and converged_at is not None:
            self._state = EngineState.CONVERGED
        else:
            self._state = EngineState.MAX_ITERATIONS_REACHED

        elapsed_millis = int(round((time.perf_counter() - start) * 1000))
        score = self.silhouetteScore() if computeSilhouette else None

        logger.info(
            "k-means finished after %d iterations (%s), sizes=%s",
            iterations,
            self._state.value,
            self.clusterSizes(),
        )

        return KMeansResult(
            data=self._data,
            centroids=self._centroids,
            assignments=self._assignments,
            history=self._history,
            silhouetteScore=score,
            iterations=iterations,
            convergedAtIteration=converged_at,
            state=self._state,
            initMode=self.getInitMode(),
            updateRule=self.getUpdateRule(),
            elapsedMillis=elapsed_millis,
        )


class KMeansResult:
    """
    Outcome of one :meth:`KMeans.run`.

    The result owns copies of the final centroids, assignments and history,
    so later runs of the engine do not change it. All arrays are read-only.

    Attributes
    ----------
    clustersByIndex : Mapping[int, tuple of int]
        Point indices per cluster id.

    assignments : tuple of int
        Cluster id per point, index-aligned with the input.

    iterationHistory : tuple of tuple of int
        Cluster sizes recorded after every iteration.

    silhouetteScore : float or None
        Silhouette Score, or None when it was not requested.

    iterations : int
        Number of iterations performed.

    converged : bool
        Whether an iteration changed no assignment.

    convergedAtIteration : int or None
        First iteration that changed no assignment.

    state : EngineState
        CONVERGED or MAX_ITERATIONS_REACHED.

    finalDistortion : float
        Within-cluster sum of squared distances of the final state.

    elapsedMillis : int
        Time spent in the loop, in milliseconds.

    Examples
    --------
    >>> result = KMeans(data, k=3, seed=1).run()
    >>> print(result.convergenceReport())
    >>> result.predict([0.2, 0.3])
    >>> json.dumps(result.toDict())
    """

    def __init__(
        self,
        *,
        data: np.ndarray,
        centroids: np.ndarray,
        assignments: np.ndarray,
        history: List[List[int]],
        silhouetteScore: Optional[float],
        iterations: int,
        convergedAtIteration: Optional[int],
        state: EngineState,
        initMode: str,
        updateRule: str,
        elapsedMillis: int,
    ):
        self._data = data
        self._centroids = np.array(centroids, dtype=np.float64)
        self._centroids.setflags(write=False)
        self._assignments = tuple(int(c) for c in assignments)
        self._k = self._centroids.shape[0]
        self._clusters = MappingProxyType(
            {
                cid: tuple(members)
                for cid, members in clusters_from_assignments(self._assignments, self._k).items()
            }
        )
        self._history = tuple(tuple(sizes) for sizes in history)
        self._silhouetteScore = silhouetteScore
        self._iterations = iterations
        self._convergedAtIteration = convergedAtIteration
        self._state = state
        self._initMode = initMode
        self._updateRule = updateRule
        self._elapsedMillis = elapsedMillis
        self._finalDistortion = self.computeCost()

    @property
    def clustersByIndex(self):
        return self._clusters

    @property
    def assignments(self):
        return self._assignments

    @property
    def centroids(self) -> np.ndarray:
        return self._centroids

    @property
    def iterationHistory(self):
        return self._history

    @property
    def silhouetteScore(self) -> Optional[float]:
        return self._silhouetteScore

    @property
    def k(self) -> int:
        """Requested number of clusters."""
        return self._k

    @property
    def effectiveK(self) -> int:
        """Number of non-empty clusters."""
        return sum(1 for size in self.clusterSizes() if size > 0)

    @property
    def numClusters(self) -> int:
        return self._k

    @property
    def numFeatures(self) -> int:
        return self._centroids.shape[1]

    @property
    def dim(self) -> int:
        """Feature dimensionality."""
        return self._centroids.shape[1]

    @property
    def numPoints(self) -> int:
        return len(self._assignments)

    @property
    def iterations(self) -> int:
        return self._iterations

    @property
    def converged(self) -> bool:
        return self._convergedAtIteration is not None

    @property
    def convergedAtIteration(self) -> Optional[int]:
        return self._convergedAtIteration

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def initMode(self) -> str:
        return self._initMode

    @property
    def updateRule(self) -> str:
        return self._updateRule

    @property
    def elapsedMillis(self) -> int:
        return self._elapsedMillis

    @property
    def finalDistortion(self) -> float:
        return self._finalDistortion

    def clusterCenters(self) -> np.ndarray:
        """
        Get the cluster centers as a NumPy array.

        Returns
        -------
        np.ndarray
            Writable copy of shape (k, d).
        """
        return self._centroids.copy()

    def clusterSizes(self) -> List[int]:
        """Number of points per cluster id."""
        return cluster_sizes(self._assignments, self._k)

    def predict(self, point) -> int:
        """
        Predict the cluster for a single point.

        Parameters
        ----------
        point : sequence of float
            Vector with the same dimension as the training data.

        Returns
        -------
        int
            Id of the nearest centroid (lowest id on ties).
        """
        vector = as_matrix([point])
        if vector.shape[1] != self.dim:
            raise ValidationError(
                f"Point has {vector.shape[1]} components, expected {self.dim}."
            )
        return int(np.argmin(pairwise_distances(vector, self._centroids)[0]))

    def computeCost(self, data=None) -> float:
        """
        Compute the within-cluster sum of squares (WCSS).

        Parameters
        ----------
        data : array-like, optional
            Points to evaluate, each charged to its nearest centroid. When
            omitted, the training points are charged to their final
            assignment.

        Returns
        -------
        float
            The WCSS cost.
        """
        if data is None:
            assigned = self._centroids[list(self._assignments)]
            return float(np.sum((self._data - assigned) ** 2))
        points = as_matrix(data)
        if points.shape[1] != self.dim:
            raise ValidationError(
                f"Points have {points.shape[1]} components, expected {self.dim}."
            )
        nearest = pairwise_distances(points, self._centroids).min(axis=1)
        return float(np.sum(nearest ** 2))

    def clusteredData(self) -> List[dict]:
        """Every input point with its cluster id, in input order."""
        return [
            {"point": [float(x) for x in point], "cluster": cluster_id}
            for point, cluster_id in zip(self._data, self._assignments)
        ]

    def toDict(self) -> dict:
        """JSON-serializable view of the result."""
        return {
            "k": self._k,
            "numPoints": self.numPoints,
            "dim": self.dim,
            "initMode": self._initMode,
            "updateRule": self._updateRule,
            "state": self._state.value,
            "iterations": self._iterations,
            "converged": self.converged,
            "convergedAtIteration": self._convergedAtIteration,
            "clustersByIndex": {str(cid): list(members) for cid, members in self._clusters.items()},
            "assignments": list(self._assignments),
            "centroids": self._centroids.tolist(),
            "clusterSizes": self.clusterSizes(),
            "iterationHistory": [list(sizes) for sizes in self._history],
            "silhouetteScore": self._silhouetteScore,
            "finalDistortion": self._finalDistortion,
            "points": self.clusteredData(),
        }

    def convergenceReport(self) -> str:
        """Human-readable summary of the run."""
        lines = [
            f"k-means ({self._initMode} init, {self._updateRule} update): "
            f"k={self._k}, effectiveK={self.effectiveK}, points={self.numPoints}, dim={self.dim}",
            f"  state: {self._state.value} after {self._iterations} iteration(s)",
        ]
        if self.converged:
            lines.append(f"  assignments stable from iteration {self._convergedAtIteration}")
        lines.append(f"  final distortion: {self._finalDistortion:.6f}")
        if self._silhouetteScore is not None:
            lines.append(f"  silhouette score: {self._silhouetteScore:.4f}")
        for i, sizes in enumerate(self._history, start=1):
            lines.append(f"  iteration {i}: sizes={list(sizes)}")
        lines.append(f"  elapsed: {self._elapsedMillis}ms")
        return "\n".join(lines)

    def __repr__(self):
        return (
            f"KMeansResult(k={self._k}, iterations={self._iterations}, "
            f"state={self._state.value}, sizes={self.clusterSizes()})"
        )
