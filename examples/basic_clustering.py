#!/usr/bin/env python
# Copyright (c) 2025 rapidcentroid
# Licensed under the Apache License, Version 2.0

"""
Basic clustering example using KMeans with random seeding and mean updates.
"""

import logging

from rapidcentroid.clusterer import KMeans


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    # Create sample data - two well-separated clusters
    data = [
        [0.0, 0.0],
        [1.0, 1.0],
        [0.5, 0.5],
        [9.0, 8.0],
        [8.0, 9.0],
        [8.5, 8.5],
    ]

    print("Input data:")
    for i, point in enumerate(data):
        print(f"  {i}: {point}")

    # Create and run the clustering engine
    kmeans = KMeans(data, k=2, maxIter=20, seed=42)

    print("\nRunning k-means...")
    result = kmeans.run(computeSilhouette=True)

    # Display cluster centers
    print(f"\nNumber of clusters: {result.numClusters}")
    print(f"Number of features: {result.numFeatures}")
    print("\nCluster centers:")
    for i, center in enumerate(result.clusterCenters()):
        print(f"  Cluster {i}: {center}")

    print("\nAssignments:")
    for record in result.clusteredData():
        print(f"  {record['point']} -> cluster {record['cluster']}")

    # Clustering quality
    print(f"\nWithin-cluster sum of squares: {result.finalDistortion:.4f}")
    print(f"Silhouette score: {result.silhouetteScore:.4f}")

    # Predict cluster for a new point
    new_point = [0.2, 0.3]
    cluster = result.predict(new_point)
    print(f"\nNew point {new_point} assigned to cluster: {cluster}")


if __name__ == "__main__":
    main()
