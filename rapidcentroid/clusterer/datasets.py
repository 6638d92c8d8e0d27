# Copyright (c) 2025 rapidcentroid
# Licensed under the Apache License, Version 2.0

"""
Loading indicator tables from CSV or Excel files.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from .errors import ValidationError

logger = logging.getLogger(__name__)

EXCEL_SUFFIXES = (".xlsx", ".xlsm", ".xls")


def read_table(
    path: Union[str, Path],
    columns: Optional[Union[int, Sequence[str]]] = None,
    header: Optional[int] = 0,
    sheet_name: Union[int, str] = 0,
) -> Tuple[List[str], np.ndarray]:
    """
    Read numeric indicator columns from a CSV or Excel file.

    Rows where any selected cell is missing or not numeric are dropped.

    Parameters
    ----------
    path : str or Path
        File to read. ``.xlsx``, ``.xlsm`` and ``.xls`` files go through
        ``pandas.read_excel`` (needs the ``excel`` extra); anything else is
        read as CSV.

    columns : int or sequence of str, optional
        Number of leading columns to use, or the column names to use.
        Defaults to all columns.

    header : int or None, default=0
        Header row, as in pandas.

    sheet_name : int or str, default=0
        Worksheet to read from Excel files.

    Returns
    -------
    tuple of (list of str, np.ndarray)
        The selected column names and an (n, d) float matrix.

    Raises
    ------
    ValidationError
        If a named column does not exist or no valid row remains.
    """
    path = Path(path)
    if path.suffix.lower() in EXCEL_SUFFIXES:
        frame = pd.read_excel(path, sheet_name=sheet_name, header=header)
    else:
        frame = pd.read_csv(path, header=header)

    if isinstance(columns, str):
        columns = [columns]

    if columns is None:
        selected = frame
    elif isinstance(columns, int):
        if columns <= 0 or columns > frame.shape[1]:
            raise ValidationError(
                f"columns must be between 1 and {frame.shape[1]}, got {columns}."
            )
        selected = frame.iloc[:, :columns]
    else:
        missing = [c for c in columns if c not in frame.columns]
        if missing:
            raise ValidationError(f"Columns not found in {path.name}: {missing}")
        selected = frame[list(columns)]

    numeric = selected.apply(pd.to_numeric, errors="coerce")
    valid = numeric.notna().all(axis=1)
    dropped = int((~valid).sum())
    if dropped:
        logger.warning("Dropped %d of %d rows with non-numeric values from %s", dropped, len(numeric), path.name)

    rows = numeric[valid]
    if rows.empty:
        raise ValidationError(f"No valid numeric rows found in {path.name}.")
    return [str(c) for c in rows.columns], rows.to_numpy(dtype=np.float64)
