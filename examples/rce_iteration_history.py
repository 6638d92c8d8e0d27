#!/usr/bin/env python
# Copyright (c) 2025 rapidcentroid
# Licensed under the Apache License, Version 2.0

"""
Farthest-point (RCE) seeding with median updates, run for a fixed number of
iterations so every intermediate cluster size is recorded.
"""

import numpy as np

from rapidcentroid.clusterer import KMeans, min_max_normalize


def main():
    rng = np.random.default_rng(7)

    # Three groups of raw indicators on very different scales
    raw = np.vstack(
        [
            rng.normal([20.0, 1000.0, 3.0], [2.0, 80.0, 0.5], size=(12, 3)),
            rng.normal([45.0, 4000.0, 1.0], [3.0, 150.0, 0.3], size=(12, 3)),
            rng.normal([65.0, 2500.0, 6.0], [2.5, 120.0, 0.6], size=(12, 3)),
        ]
    )
    data = min_max_normalize(raw)

    kmeans = KMeans(
        data,
        k=3,
        maxIter=4,
        initMode="rce",
        updateRule="median",
        stopOnConvergence=False,
        seed=3,
    )
    result = kmeans.run(computeSilhouette=True)

    print("Cluster sizes per iteration:")
    for i, sizes in enumerate(result.iterationHistory, start=1):
        bars = "  ".join(f"C{cid}:{'#' * size:<14}" for cid, size in enumerate(sizes))
        print(f"  iteration {i}: {bars}")

    print()
    print(result.convergenceReport())


if __name__ == "__main__":
    main()
