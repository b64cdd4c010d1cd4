"""
Multiscale ClassA entropy analysis for time series.

Provides functionality to analyze time series at multiple temporal scales
by coarse-graining and computing ClassA statistics at each scale.
"""

from .core import MultiscaleClassA, coarse_grain

__all__ = ["MultiscaleClassA", "coarse_grain"]
