# Copyright (c) 2025 rapidcentroid
# Licensed under the Apache License, Version 2.0

"""
RapidCentroid Clusterer
=======================

K-Means clustering with random or farthest-point (RCE) seeding, mean or
median centroid updates, and Silhouette scoring.
"""

__version__ = "0.3.0"
__all__ = ["clusterer"]
