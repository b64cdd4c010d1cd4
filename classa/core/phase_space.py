"""Phase-space reconstruction of a coarse-grained sequence into (Yn, Xn) pairs."""

from __future__ import annotations

from enum import IntEnum
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from ..exceptions import InsufficientLength, InvalidParameter


class PhaseMethod(IntEnum):
    """Reconstruction methods, numbered as in the ``phase`` option."""

    IMPROVED_SECOND_ORDER_DIFF = 1
    SECOND_ORDER_DIFF = 2
    TAKENS_LAG1 = 3

    @classmethod
    def from_value(cls, value) -> 'PhaseMethod':
        """Resolve a PhaseMethod from an int (1, 2, 3), a member or a member name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key in cls.__members__:
                return cls[key]
            if key.isdigit():
                value = int(key)
        if isinstance(value, (bool, np.bool_)):
            raise InvalidParameter(f"phase must be one of 1, 2, 3, got {value!r}")
        try:
            return cls(int(value)) if float(value).is_integer() else cls(value)
        except (TypeError, ValueError):
            raise InvalidParameter(
                f"phase must be one of {[m.value for m in cls]}, got {value!r}"
            ) from None


# Number of samples consumed at the edges by each method
_LOST_SAMPLES = {
    PhaseMethod.IMPROVED_SECOND_ORDER_DIFF: 3,
    PhaseMethod.SECOND_ORDER_DIFF: 2,
    PhaseMethod.TAKENS_LAG1: 1,
}


def reconstructed_length(n: int, method: PhaseMethod) -> int:
    """Number of (Yn, Xn) pairs produced from ``n`` samples."""
    return max(n - _LOST_SAMPLES[PhaseMethod.from_value(method)], 0)


def improved_second_order_diff(x: NDArray[np.float64]) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    yn = 2.0 * x[2:-1] - 1.5 * x[1:-2] - 0.5 * x[3:]
    xn = 2.0 * x[1:-2] - 1.5 * x[:-3] - 0.5 * x[2:-1]
    return yn, xn


def second_order_diff(x: NDArray[np.float64]) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    yn = x[2:] - x[1:-1]
    xn = x[1:-1] - x[:-2]
    return yn, xn


def takens_lag1(x: NDArray[np.float64]) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    # Lag-1 Poincare embedding
    return x[:-1].copy(), x[1:].copy()


_RECONSTRUCTORS = {
    PhaseMethod.IMPROVED_SECOND_ORDER_DIFF: improved_second_order_diff,
    PhaseMethod.SECOND_ORDER_DIFF: second_order_diff,
    PhaseMethod.TAKENS_LAG1: takens_lag1,
}


def reconstruct(
    x: NDArray[np.float64],
    method: PhaseMethod | int = PhaseMethod.IMPROVED_SECOND_ORDER_DIFF,
) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Reconstruct a 2-D phase space from a 1-D sequence.

    Parameters
    ----------
    x : array (n,)
        Coarse-grained sequence
    method : PhaseMethod or int, default 1
        1 = improved second-order difference, 2 = second-order difference,
        3 = Takens lag-1 embedding

    Returns
    -------
    yn, xn : arrays (n - 3,), (n - 2,) or (n - 1,)
        Coordinate sequences, depending on ``method``

    Raises
    ------
    InsufficientLength
        If the method leaves no coordinate pair

    Examples
    --------
    >>> yn, xn = reconstruct(np.array([1.0, 2.0, 4.0, 7.0]), method=2)
    >>> yn, xn
    (array([2., 3.]), array([1., 2.]))
    """
    method = PhaseMethod.from_value(method)
    x = np.asarray(x, dtype=np.float64)

    n_pairs = reconstructed_length(len(x), method)
    if n_pairs < 1:
        raise InsufficientLength(
            f"{method.name} needs at least {_LOST_SAMPLES[method] + 1} samples, "
            f"got {len(x)}"
        )

    return _RECONSTRUCTORS[method](x)
