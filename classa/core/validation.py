"""
Pre-condition checks shared by the pipeline stages.

Every check raises InvalidParameter before any array computation happens.
"""

from __future__ import annotations

import numbers
import warnings

import numpy as np
from numpy.typing import NDArray

from ..exceptions import InvalidParameter

MIN_SIGNAL_LENGTH = 11


def as_int(name: str, value, minimum: int = 1) -> int:
    """Return ``value`` as int, rejecting bools, fractions and values below ``minimum``."""
    if isinstance(value, (bool, np.bool_)):
        raise InvalidParameter(f"{name} must be an integer, got {value!r}")
    if isinstance(value, numbers.Integral):
        value = int(value)
    elif isinstance(value, numbers.Real) and float(value).is_integer():
        value = int(value)
    else:
        raise InvalidParameter(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidParameter(f"{name} must be >= {minimum}, got {value}")
    return value


def as_bool(name: str, value) -> bool:
    if not isinstance(value, (bool, np.bool_)):
        raise InvalidParameter(f"{name} must be a boolean, got {value!r}")
    return bool(value)


def as_log_base(value) -> float:
    """Validate a logarithm base: positive and not 1 (log(1) = 0)."""
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise InvalidParameter(f"log_base must be a real number, got {value!r}")
    value = float(value)
    if not np.isfinite(value) or value <= 0:
        raise InvalidParameter(f"log_base must be > 0, got {value}")
    if value == 1.0:
        raise InvalidParameter("log_base must not be 1")
    return value


def as_signal(x, name: str = "signal") -> NDArray[np.float64]:
    """
    Validate a univariate signal and return it as a float64 copy.

    Parameters
    ----------
    x : array-like
        Input sequence
    name : str
        Name used in error messages

    Returns
    -------
    array (n,)
        Float64 copy of the input

    Raises
    ------
    InvalidParameter
        If the input is not a finite numeric 1-D vector of more than 10 values
    """
    try:
        arr = np.asarray(x)
    except (TypeError, ValueError) as e:
        raise InvalidParameter(f"{name} must be a numeric vector: {e}") from e

    if arr.dtype.kind not in ('f', 'i', 'u'):
        raise InvalidParameter(
            f"{name} must be a numeric vector, got dtype {arr.dtype}"
        )

    arr = arr.squeeze() if arr.ndim > 1 else arr
    if arr.ndim != 1:
        raise InvalidParameter(f"{name} must be a 1D vector, got shape {np.shape(x)}")

    if len(arr) < MIN_SIGNAL_LENGTH:
        raise InvalidParameter(
            f"{name} must have more than {MIN_SIGNAL_LENGTH - 1} samples, got {len(arr)}"
        )

    arr = arr.astype(np.float64, copy=True)
    if not np.all(np.isfinite(arr)):
        raise InvalidParameter(f"{name} contains NaN or infinite values")

    if np.ptp(arr) == 0:
        warnings.warn(
            f"{name}: Constant series detected (std=0). "
            f"Results may be degenerate.",
            UserWarning
        )

    return arr
