"""
Plotting functions for ClassA entropy.

All functions follow the contract:
- Accept derived arrays, never recompute the pipeline
- Return (fig, ax) tuple
- Use consistent Matplotlib styling
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import to_hex

from ..core.phase_space import PhaseMethod

# Consistent styling constants
FONT_FAMILY = 'DejaVu Sans'
FIG_WIDTH = 7
FIG_HEIGHT = 7
DPI = 100
GRID_ALPHA = 0.3
SPINE_COLOR = '#333333'
UNASSIGNED_COLOR = '#bbbbbb'

_AXIS_LABELS = {
    PhaseMethod.IMPROVED_SECOND_ORDER_DIFF: ('X(n)', 'Y(n)'),
    PhaseMethod.SECOND_ORDER_DIFF: ('x(n+1) - x(n)', 'x(n+2) - x(n+1)'),
    PhaseMethod.TAKENS_LAG1: ('x(n+1)', 'x(n)'),
}


def _setup_style(ax, grid: bool = False):
    """Apply consistent styling to an axis."""
    ax.spines['top'].set_visible(False)
    ax.spines['right'].set_visible(False)
    ax.spines['left'].set_color(SPINE_COLOR)
    ax.spines['bottom'].set_color(SPINE_COLOR)

    if grid:
        ax.grid(True, alpha=GRID_ALPHA, linestyle='-', linewidth=0.5)
        ax.set_axisbelow(True)

    ax.tick_params(colors=SPINE_COLOR)


def symbol_palette(k: int, cmap: str = 'viridis') -> List[str]:
    """
    K distinct hex colours, one per symbol.

    Examples
    --------
    >>> symbol_palette(3)
    ['#440154', '#21918c', '#fde725']
    """
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")
    colormap = plt.get_cmap(cmap)
    return [to_hex(colormap(v)) for v in np.linspace(0.0, 1.0, k)]


def plot_phase_space(
    xn: np.ndarray,
    yn: np.ndarray,
    symbols: np.ndarray,
    method: PhaseMethod | int = PhaseMethod.IMPROVED_SECOND_ORDER_DIFF,
    k: Optional[int] = None,
    ax: Optional[plt.Axes] = None,
    title: Optional[str] = None,
    figsize: Optional[Tuple[float, float]] = None,
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Phase-space scatter plot coloured by symbol.

    Quadrant axes are drawn through the origin so the four classification
    regions are visible.

    Parameters
    ----------
    xn, yn : arrays (n,)
        Phase-space coordinates
    symbols : array (n,) of int
        Symbol labels 1..k; 0 is drawn in grey
    method : PhaseMethod or int
        Reconstruction method, used for the axis labels
    k : int, optional
        Alphabet size (default: largest label)
    ax : matplotlib.axes.Axes, optional
        Axis to draw on; a new figure is created if None
    title : str, optional
        Plot title
    figsize : tuple, optional
        Figure size (default: (7, 7))

    Returns
    -------
    fig : matplotlib.figure.Figure
    ax : matplotlib.axes.Axes
    """
    method = PhaseMethod.from_value(method)
    xn = np.asarray(xn, dtype=np.float64)
    yn = np.asarray(yn, dtype=np.float64)
    symbols = np.asarray(symbols)
    if not (len(xn) == len(yn) == len(symbols)):
        raise ValueError("xn, yn and symbols must have the same length")

    if k is None:
        k = max(int(symbols.max(initial=0)), 1)

    if ax is None:
        if figsize is None:
            figsize = (FIG_WIDTH, FIG_HEIGHT)
        fig, ax = plt.subplots(figsize=figsize, dpi=DPI)
        fig.patch.set_facecolor('white')
    else:
        fig = ax.figure

    palette = symbol_palette(k)

    unassigned = symbols == 0
    if np.any(unassigned):
        ax.scatter(xn[unassigned], yn[unassigned], s=12, c=UNASSIGNED_COLOR,
                   alpha=0.6, label='unassigned', zorder=1)

    for label in range(1, k + 1):
        mask = symbols == label
        if not np.any(mask):
            continue
        ax.scatter(xn[mask], yn[mask], s=14, color=palette[label - 1],
                   alpha=0.8, label=f'symbol {label}', zorder=2)

    ax.axhline(0.0, color=SPINE_COLOR, linewidth=0.8, alpha=0.6, zorder=0)
    ax.axvline(0.0, color=SPINE_COLOR, linewidth=0.8, alpha=0.6, zorder=0)

    xlabel, ylabel = _AXIS_LABELS[method]
    ax.set_xlabel(xlabel, fontfamily=FONT_FAMILY, fontsize=11)
    ax.set_ylabel(ylabel, fontfamily=FONT_FAMILY, fontsize=11)
    if title is None:
        title = f"Phase space ({method.name.lower().replace('_', ' ')})"
    ax.set_title(title, fontfamily=FONT_FAMILY, fontsize=12)
    ax.legend(frameon=False, fontsize=9, loc='best')

    _setup_style(ax, grid=True)
    return fig, ax


def plot_scale_signature(
    signature: Dict[str, np.ndarray],
    scales: List[int],
    features: Optional[List[str]] = None,
    figsize: Optional[Tuple[float, float]] = None,
) -> Tuple[plt.Figure, List[plt.Axes]]:
    """
    Multiscale panel: one line plot per feature across scales.

    Parameters
    ----------
    signature : dict[str, array]
        Output of ``MultiscaleClassA.scale_signature()``
    scales : list of int
        Coarse-graining scales matching the signature arrays
    features : list of str, optional
        Features to draw (default: all keys of ``signature``)
    figsize : tuple, optional
        Figure size (default: (4 * n_features, 4))

    Returns
    -------
    fig : matplotlib.figure.Figure
    axes : list of matplotlib.axes.Axes
    """
    if features is None:
        features = list(signature.keys())
    if not features:
        raise ValueError("No features to plot")

    if figsize is None:
        figsize = (4 * len(features), 4)

    fig, axes = plt.subplots(1, len(features), figsize=figsize, dpi=DPI, squeeze=False)
    fig.patch.set_facecolor('white')
    axes = list(axes[0])

    for ax, feature in zip(axes, features):
        ax.plot(scales, signature[feature], 'o-', color='#21918c', linewidth=1.5)
        ax.set_xlabel('Scale', fontfamily=FONT_FAMILY, fontsize=11)
        ax.set_title(feature, fontfamily=FONT_FAMILY, fontsize=12)
        _setup_style(ax, grid=True)

    plt.tight_layout()
    return fig, axes
