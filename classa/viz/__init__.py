"""
Visualization module for ClassA entropy.

All functions return (fig, ax) for further customization.
"""

from .plots import (
    plot_phase_space,
    plot_scale_signature,
    symbol_palette,
)

__all__ = [
    'plot_phase_space',
    'plot_scale_signature',
    'symbol_palette',
]
