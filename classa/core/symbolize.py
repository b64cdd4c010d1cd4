"""
Symbolization of classification angles into K discrete symbols.

Angles are converted to radians and mapped through one of six strategies:

- equal: K equal-width bins over [0, 2*pi]
- kmeans: 1-D k-means clustering (scikit-learn)
- ncdf: normal cumulative distribution function, K bins over [0, 1]
- sigmoid: logistic transform, K bins over [0, 1]
- gaussian: Gaussian kernel of the z-scores, K bins over [min, max]
- arctanh: arctan(tanh(.)) transform rescaled to [-1, 1], K bins

Labels run from 1 to K. Label 0 marks a sample that fell outside every bin
(or was undefined after the transform); it carries no probability mass.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, Optional

import numpy as np
from numpy.typing import NDArray
from scipy.stats import norm

from ..exceptions import InsufficientLength, InvalidParameter
from .validation import as_int

logger = logging.getLogger(__name__)

UNASSIGNED = 0
DEFAULT_SEED = 3363
DEFAULT_KMEANS_MAX_ITER = 200


class Symbolization(str, Enum):
    """Available symbolization strategies."""

    EQUAL = "equal"
    KMEANS = "kmeans"
    NCDF = "ncdf"
    SIGMOID = "sigmoid"
    GAUSSIAN = "gaussian"
    ARCTANH = "arctanh"

    @classmethod
    def from_name(cls, name) -> 'Symbolization':
        """Resolve a strategy from its name, case-insensitively."""
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise InvalidParameter(f"symbolization must be a string, got {name!r}")
        key = name.strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise InvalidParameter(
                f"Unknown symbolization: {name}. Must be one of {[s.value for s in cls]}"
            ) from None


_ALIASES = {
    "clusterbased": "kmeans",
    "cluster": "kmeans",
    "normalcdf": "ncdf",
    "normcdf": "ncdf",
}


def bin_uniform(z: NDArray[np.float64], lo: float, hi: float, k: int) -> NDArray[np.int64]:
    """
    Assign values to K equal-width bins over [lo, hi].

    Bins are half-open [e_i, e_i+1) except the last, which also includes ``hi``.
    Values outside [lo, hi] and NaNs get the UNASSIGNED label.

    Examples
    --------
    >>> bin_uniform(np.array([0.0, 0.25, 0.5, 1.0, 1.5]), 0.0, 1.0, 2)
    array([1, 1, 2, 2, 0])
    """
    z = np.asarray(z, dtype=np.float64)
    edges = np.linspace(lo, hi, k + 1)
    labels = np.searchsorted(edges, z, side='right')
    labels = np.where(z == edges[-1], k, labels)
    labels = np.where((labels < 1) | (labels > k) | np.isnan(z), UNASSIGNED, labels)
    return labels.astype(np.int64)


def _std(x: NDArray[np.float64], ddof: int = 1) -> float:
    # Identical samples are exactly zero-variance; np.std may leave rounding noise
    if len(x) <= ddof or np.ptp(x) == 0:
        return 0.0
    return float(np.std(x, ddof=ddof))


def _equal(x: NDArray[np.float64], k: int, **_) -> NDArray[np.int64]:
    return bin_uniform(x, 0.0, 2.0 * np.pi, k)


def _kmeans(
    x: NDArray[np.float64],
    k: int,
    max_iter: int = DEFAULT_KMEANS_MAX_ITER,
    seed: Optional[int] = DEFAULT_SEED,
    **_,
) -> NDArray[np.int64]:
    from sklearn.cluster import KMeans

    if len(x) < k:
        raise InsufficientLength(
            f"kmeans symbolization needs at least k={k} samples, got {len(x)}"
        )

    km = KMeans(n_clusters=k, n_init=10, max_iter=max_iter, random_state=seed)
    raw = km.fit_predict(x.reshape(-1, 1))

    # Relabel clusters 1..K by ascending centroid so labels are reproducible
    order = np.argsort(km.cluster_centers_.ravel())
    rank = np.empty(k, dtype=np.int64)
    rank[order] = np.arange(1, k + 1)
    return rank[raw]


def _ncdf(x: NDArray[np.float64], k: int, **_) -> NDArray[np.int64]:
    sigma = _std(x, ddof=0)
    if sigma == 0:
        logger.warning("ncdf symbolization: zero variance, all samples map to the median")
        z = np.full_like(x, 0.5)
    else:
        z = norm.cdf(x, loc=np.mean(x), scale=sigma)
    return bin_uniform(z, 0.0, 1.0, k)


def _sigmoid(x: NDArray[np.float64], k: int, **_) -> NDArray[np.int64]:
    sigma = _std(x)
    if sigma == 0:
        logger.warning("sigmoid symbolization: zero variance, all samples map to 0.5")
        z = np.full_like(x, 0.5)
    else:
        with np.errstate(over='ignore'):
            z = 1.0 / (1.0 + np.exp((x - 2.0) / (1.5 * sigma)))
    return bin_uniform(z, 0.0, 1.0, k)


def _gaussian(x: NDArray[np.float64], k: int, **_) -> NDArray[np.int64]:
    sigma = _std(x)
    if sigma == 0:
        logger.warning("gaussian symbolization: zero variance, all samples share one symbol")
        z = np.ones_like(x)
    else:
        zs = (x - np.mean(x)) / sigma
        z = np.exp(-zs ** 2 / _std(zs))
    return bin_uniform(z, float(np.min(z)), float(np.max(z)), k)


def _arctanh(x: NDArray[np.float64], k: int, **_) -> NDArray[np.int64]:
    sigma = _std(x)
    with np.errstate(divide='ignore', invalid='ignore'):
        z = np.arctan(np.tanh(0.5 * sigma / x))

    scale = np.nanmax(np.abs(z)) if np.any(np.isfinite(z)) else 0.0
    if scale > 0:
        z = z / scale
    else:
        logger.warning("arctanh symbolization: degenerate transform, samples left unscaled")
    return bin_uniform(z, -1.0, 1.0, k)


_SYMBOLIZERS: Dict[Symbolization, Callable[..., NDArray[np.int64]]] = {
    Symbolization.EQUAL: _equal,
    Symbolization.KMEANS: _kmeans,
    Symbolization.NCDF: _ncdf,
    Symbolization.SIGMOID: _sigmoid,
    Symbolization.GAUSSIAN: _gaussian,
    Symbolization.ARCTANH: _arctanh,
}

assert set(_SYMBOLIZERS) == set(Symbolization), "every strategy needs a symbolizer"


def symbolize(
    theta: NDArray[np.float64],
    k: int = 4,
    strategy: Symbolization | str = Symbolization.EQUAL,
    kmeans_max_iter: int = DEFAULT_KMEANS_MAX_ITER,
    seed: Optional[int] = DEFAULT_SEED,
) -> NDArray[np.int64]:
    """
    Map classification angles (degrees) to symbols 1..K.

    Parameters
    ----------
    theta : array (n,)
        Angles in degrees, in [0, 360)
    k : int, default 4
        Number of symbols, at least 2
    strategy : Symbolization or str, default "equal"
        Symbolization strategy (case-insensitive name)
    kmeans_max_iter : int, default 200
        Iteration cap of the k-means strategy
    seed : int, optional
        Random state of the k-means strategy

    Returns
    -------
    array (n,) of int
        Symbol labels; 0 marks unassigned samples
    """
    k = as_int("k", k, minimum=2)
    strategy = Symbolization.from_name(strategy)
    x = np.radians(np.asarray(theta, dtype=np.float64))

    labels = _SYMBOLIZERS[strategy](x, k, max_iter=kmeans_max_iter, seed=seed)

    n_unassigned = int(np.count_nonzero(labels == UNASSIGNED))
    if n_unassigned:
        logger.debug(f"{strategy.value}: {n_unassigned} of {len(labels)} samples unassigned")
    return labels
