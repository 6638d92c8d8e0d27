# Copyright (c) 2025 rapidcentroid
# Licensed under the Apache License, Version 2.0

"""
Exceptions raised by the clusterer.
"""


class ValidationError(ValueError):
    """
    Caller-fixable input error.

    Raised eagerly, before any iteration starts, for an empty dataset,
    an invalid k, inconsistent point dimensionality, non-numeric values
    or unknown strategy names. Supply corrected input and construct again.
    """
