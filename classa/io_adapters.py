"""
Data adapters for ClassA entropy.

Thin adapters that turn pandas DataFrames and files on disk into NumPy
arrays. The pipeline itself stays pure NumPy.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union, Dict
import numpy as np
import pandas as pd

from .exceptions import InvalidParameter


def from_pandas(
    df: pd.DataFrame,
    value_col: str,
    group_col: Optional[str] = None,
    time_col: Optional[str] = None,
    sort_by_time: bool = True
) -> Union[np.ndarray, Dict[str, np.ndarray]]:
    """
    Convert pandas DataFrame to NumPy arrays.

    Parameters
    ----------
    df : pd.DataFrame
        Input DataFrame
    value_col : str
        Column name for time series values (e.g. RR intervals)
    group_col : str, optional
        Column name for grouping (e.g., subject, recording)
        If provided, returns dict mapping group -> values array
    time_col : str, optional
        Column name for timestamps (used for sorting only)
    sort_by_time : bool, default True
        If True and time_col provided, sort by time

    Returns
    -------
    np.ndarray or dict[str, np.ndarray]
        If group_col is None: single array of values
        If group_col is provided: dict mapping group -> values array

    Examples
    --------
    >>> df = pd.DataFrame({'rr': [0.81, 0.79, 0.83], 'subject': ['a', 'a', 'a']})
    >>> values = from_pandas(df, value_col='rr')
    >>> series = from_pandas(df, value_col='rr', group_col='subject')
    """
    if value_col not in df.columns:
        raise InvalidParameter(f"Column not found: {value_col}")

    if group_col is None:
        # Single series
        if time_col and sort_by_time:
            df = df.sort_values(time_col)
        values = pd.to_numeric(df[value_col], errors='coerce').to_numpy(dtype=np.float64)
        # Drop nulls
        return values[~np.isnan(values)]

    # Multiple series grouped by group_col
    result = {}
    if time_col and sort_by_time:
        df = df.sort_values([group_col, time_col])

    for group_val, group_df in df.groupby(group_col, sort=False):
        values = pd.to_numeric(group_df[value_col], errors='coerce').to_numpy(dtype=np.float64)
        result[str(group_val)] = values[~np.isnan(values)]

    return result


def load_series(
    path: Union[str, Path],
    column: Optional[str] = None,
    group_col: Optional[str] = None,
) -> Union[np.ndarray, Dict[str, np.ndarray]]:
    """
    Load a time series from a CSV, Parquet or plain text file.

    CSV and Parquet files are read with pandas; ``column`` selects the value
    column (default: the first numeric column). Any other file is read as
    whitespace-separated numbers with NumPy and flattened.

    Parameters
    ----------
    path : str or Path
        Input file
    column : str, optional
        Value column of a tabular file
    group_col : str, optional
        Grouping column of a tabular file; returns one series per group

    Returns
    -------
    np.ndarray or dict[str, np.ndarray]
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Series file not found: {path}")

    suffix = path.suffix.lower()
    if suffix in ('.csv', '.parquet'):
        df = pd.read_csv(path) if suffix == '.csv' else pd.read_parquet(path)
        if column is None:
            numeric = [c for c in df.select_dtypes('number').columns if c != group_col]
            if not numeric:
                raise InvalidParameter(f"No numeric column in {path}")
            column = numeric[0]
        return from_pandas(df, value_col=column, group_col=group_col)

    if column is not None or group_col is not None:
        raise InvalidParameter("column and group_col apply to CSV or Parquet files only")
    return np.loadtxt(path, dtype=np.float64).ravel()
