#!/usr/bin/env python
# Copyright (c) 2025 rapidcentroid
# Licensed under the Apache License, Version 2.0

"""
Setup configuration for rapidcentroid-clusterer package.
"""

from setuptools import setup, find_packages
import os

# Read version from package
with open(os.path.join("rapidcentroid", "__init__.py")) as f:
    for line in f:
        if line.startswith("__version__"):
            version = line.split("=")[1].strip().strip('"').strip("'")
            break

# Read long description from README
long_description = """
# RapidCentroid Clusterer

K-Means clustering with random or farthest-point (RCE) seeding, mean or
median centroid updates, min-max normalization and the Silhouette Score.

## Features

- **Seeding Strategies**: uniform random points, or farthest-point
  ("Rapid Centroid Estimation") seeding
- **Update Rules**: per-dimension mean, or per-dimension median
- **Two Loop Modes**: stop on convergence, or run a fixed number of
  iterations and keep the per-iteration cluster sizes
- **Quality Metrics**: WCSS and Silhouette Score
- **Reproducible**: seed or inject the random source
- **Table Input**: CSV and Excel indicator tables via pandas

## Installation

```bash
pip install rapidcentroid-clusterer
```

## Quick Start

```python
from rapidcentroid.clusterer import KMeans, min_max_normalize

data = min_max_normalize([
    [0.0, 0.0],
    [0.0, 1.0],
    [10.0, 10.0],
    [10.0, 11.0],
])

kmeans = KMeans(data, k=2, maxIter=10, initMode="rce", seed=42)
result = kmeans.run(computeSilhouette=True)

print(result.assignments)
print(result.clusterCenters())
print(f"Silhouette score: {result.silhouetteScore:.4f}")
```
"""

setup(
    name="rapidcentroid-clusterer",
    version=version,
    description="K-Means clustering with farthest-point seeding and median updates",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="RapidCentroid",
    license="Apache License 2.0",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
        "pandas>=1.3.0",
    ],
    extras_require={
        "excel": [
            "openpyxl>=3.0.0",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
            "black>=22.0.0",
            "flake8>=4.0.0",
            "mypy>=0.950",
        ],
        "test": [
            "pytest>=7.0.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering",
        "Topic :: Software Development :: Libraries",
    ],
    keywords="clustering kmeans k-medians silhouette machine-learning",
)
