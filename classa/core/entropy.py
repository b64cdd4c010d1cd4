"""Symbol-distribution entropy with arbitrary logarithm base."""

from __future__ import annotations

import logging
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from .validation import as_int, as_log_base

logger = logging.getLogger(__name__)


def symbol_counts(labels: NDArray[np.int64], k: int) -> NDArray[np.int64]:
    """Occurrences of each label 1..K (index 0 holds label 1)."""
    k = as_int("k", k, minimum=2)
    labels = np.asarray(labels, dtype=np.int64)
    valid = labels[(labels >= 1) & (labels <= k)]
    return np.bincount(valid, minlength=k + 1)[1:k + 1]


def symbol_probabilities(labels: NDArray[np.int64], k: int) -> NDArray[np.float64]:
    """
    Probabilities of the non-empty symbols, in ascending label order.

    Empty bins are dropped so they never contribute a log(0) term.
    """
    counts = symbol_counts(labels, k)
    counts = counts[counts > 0]
    total = counts.sum()
    if total == 0:
        logger.warning("No assigned symbols, probability distribution is empty")
        return np.zeros(0, dtype=np.float64)
    return counts / total


def shannon_entropy(p: NDArray[np.float64], base: float = np.e) -> float:
    """
    Shannon entropy -sum(p * log(p)) / log(base).

    Zero probabilities are ignored. Returns 0.0 for an empty distribution.
    """
    base = as_log_base(base)
    p = np.asarray(p, dtype=np.float64)
    p = p[p > 0]
    if len(p) == 0:
        return 0.0
    H = -np.sum(p * np.log(p)) / np.log(base)
    return max(0.0, float(H))


def normalized_entropy(H: float, k: int, base: float = np.e) -> float:
    """Divide an entropy by log(K)/log(base), the entropy of K equiprobable symbols."""
    k = as_int("k", k, minimum=2)
    base = as_log_base(base)
    return float(H / (np.log(k) / np.log(base)))


def symbol_entropy(
    labels: NDArray[np.int64],
    k: int,
    base: float = np.e,
    normalize: bool = True,
) -> Tuple[float, NDArray[np.float64]]:
    """
    Entropy of a symbol sequence.

    Parameters
    ----------
    labels : array (n,) of int
        Symbols 1..K; other values are ignored
    k : int
        Alphabet size
    base : float, default e
        Logarithm base
    normalize : bool, default True
        Divide by the maximum entropy log(K)/log(base)

    Returns
    -------
    entropy : float
    probabilities : array
        Probabilities of the non-empty symbols, ascending label order
    """
    p = symbol_probabilities(labels, k)
    H = shannon_entropy(p, base=base)
    if normalize:
        H = normalized_entropy(H, k, base=base)
    return H, p
