"""
ClassA entropy of a univariate time series.

The pipeline coarse-grains the series, reconstructs a 2-D phase space,
classifies each phase-space point by its polar angle and measures the
entropy of the symbolized angles:

    signal -> coarse signal -> (Yn, Xn) -> angles -> stats
                                                  -> symbols -> entropy
"""

from __future__ import annotations

import logging
from typing import NamedTuple, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .config import ClassAConfig
from .core.angles import (
    ClassAStats,
    classification_angles,
    classification_stats,
    to_angle_unit,
)
from .core.entropy import symbol_entropy
from .core.phase_space import reconstruct
from .core.symbolize import symbolize
from .core.validation import as_signal
from .multiscale.core import coarse_grain

logger = logging.getLogger(__name__)


class ClassAResult(NamedTuple):
    """
    Output of :func:`classify`.

    Attributes
    ----------
    stats : ClassAStats
        (RAS, P1, P24, P3) in the requested angle unit
    entropy : float
        Symbol entropy, normalized or raw
    probabilities : array
        Probabilities of the non-empty symbols, ascending label order
    angles : array
        Per-sample classification angles in degrees
    """

    stats: ClassAStats
    entropy: float
    probabilities: NDArray[np.float64]
    angles: NDArray[np.float64]


class ClassAEntropy:
    """
    ClassA entropy estimator.

    Parameters
    ----------
    config : ClassAConfig, optional
        Pipeline options. Keyword options override it.
    **options
        scale, k, phase, symbolization, log_base, normalize, angle_unit,
        plot, kmeans_max_iter, seed (see :class:`ClassAConfig`)

    Examples
    --------
    >>> import numpy as np
    >>> from classa import ClassAEntropy
    >>> x = np.random.randn(1000)
    >>> est = ClassAEntropy(k=6, symbolization='ncdf').fit(x)
    >>> est.stats_.p1, est.entropy_
    >>> est.symbols_[:10]
    """

    def __init__(self, config: Optional[ClassAConfig] = None, **options):
        if config is None:
            config = ClassAConfig.from_dict(options)
        elif options:
            config = config.replace(**options)
        self.config = config

    def fit(self, x) -> 'ClassAEntropy':
        """
        Run the pipeline on a time series.

        Parameters
        ----------
        x : array-like (n,)
            Input signal, more than 10 finite values

        Returns
        -------
        self : ClassAEntropy
        """
        cfg = self.config
        x = as_signal(x)

        self.coarse_ = coarse_grain(x, cfg.scale, method="mean")
        self.yn_, self.xn_ = reconstruct(self.coarse_, cfg.phase)
        logger.debug(
            f"scale={cfg.scale}: {len(x)} -> {len(self.coarse_)} samples, "
            f"{len(self.yn_)} phase-space points ({cfg.phase.name})"
        )

        self.angles_ = classification_angles(self.yn_, self.xn_)
        self.stats_ = to_angle_unit(classification_stats(self.angles_), cfg.angle_unit)

        self.symbols_ = symbolize(
            self.angles_,
            k=cfg.k,
            strategy=cfg.symbolization,
            kmeans_max_iter=cfg.kmeans_max_iter,
            seed=cfg.seed,
        )
        self.entropy_, self.probabilities_ = symbol_entropy(
            self.symbols_, cfg.k, base=cfg.log_base, normalize=cfg.normalize
        )

        logger.info(
            f"ClassA entropy ({cfg.symbolization.value}, k={cfg.k}): "
            f"{self.entropy_:.4f}, RAS={self.stats_.ras:.4f} {cfg.angle_unit}"
        )

        if cfg.plot:
            self.plot()
        return self

    @property
    def result_(self) -> ClassAResult:
        if not hasattr(self, 'angles_'):
            raise ValueError("Please fit the model first using .fit()")
        return ClassAResult(
            stats=self.stats_,
            entropy=self.entropy_,
            probabilities=self.probabilities_,
            angles=self.angles_,
        )

    def fit_transform(self, x) -> ClassAResult:
        """Fit the estimator and return its :class:`ClassAResult`."""
        return self.fit(x).result_

    def plot(self, ax=None, title: Optional[str] = None) -> Tuple:
        """
        Draw the phase-space scatter coloured by symbol.

        Returns
        -------
        fig : matplotlib.figure.Figure
        ax : matplotlib.axes.Axes
        """
        if not hasattr(self, 'symbols_'):
            raise ValueError("Please fit the model first using .fit()")
        from .viz import plot_phase_space

        return plot_phase_space(
            self.xn_,
            self.yn_,
            self.symbols_,
            method=self.config.phase,
            k=self.config.k,
            ax=ax,
            title=title,
        )


def classify(signal, config: Optional[ClassAConfig] = None, **options) -> ClassAResult:
    """
    Compute ClassA statistics and entropy of a time series.

    Parameters
    ----------
    signal : array-like (n,)
        Input signal, more than 10 finite values
    config : ClassAConfig, optional
        Pipeline options. Keyword options override it.
    **options
        scale : int, default 1
            Coarse-graining scale
        k : int, default 4
            Number of symbols
        phase : int, default 1
            1 = improved second-order difference, 2 = second-order
            difference, 3 = Takens lag-1 embedding
        symbolization : str, default "equal"
            equal, kmeans, ncdf, sigmoid, gaussian or arctanh
        log_base : float, default e
            Logarithm base of the entropy
        normalize : bool, default True
            Normalize the entropy by log(k)
        angle_unit : str, default "deg"
            "deg" or "rad" for the statistics
        plot : bool, default False
            Draw the phase-space scatter plot

    Returns
    -------
    ClassAResult
        Named tuple (stats, entropy, probabilities, angles)

    Raises
    ------
    InvalidParameter
        If any input fails validation (before any computation)
    InsufficientLength
        If too few samples remain after coarse-graining

    Examples
    --------
    >>> x = [1, 2, 3, 2, 1, 2, 3, 2, 1, 2, 3, 2]
    >>> stats, entropy, probs, angles = classify(x, k=4)
    >>> stats.p1
    0.3333333333333333
    """
    estimator = ClassAEntropy(config, **options)
    return estimator.fit_transform(signal)
