#!/usr/bin/env python
# Copyright (c) 2025 rapidcentroid
# Licensed under the Apache License, Version 2.0

"""
Cluster the leading indicator columns of a CSV or Excel table and write the
result as JSON.

Usage:
    python table_clustering.py data.xlsx --columns 8 --k 3 --output result.json
"""

import argparse
import json
import logging

from rapidcentroid.clusterer import KMeans, ValidationError, min_max_normalize, read_table


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("path", help="CSV or Excel file with a header row")
    parser.add_argument("--columns", type=int, default=None, help="number of leading indicator columns")
    parser.add_argument("--k", type=int, default=3)
    parser.add_argument("--max-iter", type=int, default=100)
    parser.add_argument("--init-mode", default="rce", choices=["random", "farthestPoint", "rce"])
    parser.add_argument("--update-rule", default="mean", choices=["mean", "median"])
    parser.add_argument("--fixed-iterations", action="store_true")
    parser.add_argument("--no-normalize", action="store_true")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--output", default=None)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        names, raw = read_table(args.path, columns=args.columns)
        data = raw if args.no_normalize else min_max_normalize(raw)
        kmeans = KMeans(
            data,
            k=args.k,
            maxIter=args.max_iter,
            initMode=args.init_mode,
            updateRule=args.update_rule,
            stopOnConvergence=not args.fixed_iterations,
            seed=args.seed,
        )
    except ValidationError as e:
        parser.error(str(e))

    result = kmeans.run(computeSilhouette=True)
    payload = result.toDict()
    payload["columns"] = names

    print(result.convergenceReport())
    if args.output:
        with open(args.output, "w") as f:
            json.dump(payload, f, indent=2)
        print(f"\nWrote {args.output}")


if __name__ == "__main__":
    main()
