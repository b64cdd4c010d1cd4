"""
Core numeric stages of the ClassA entropy pipeline.

Phase-space reconstruction, angle classification, symbolization and entropy
estimation. Each stage is a pure function of its inputs.
"""

from .angles import (
    ClassAStats,
    classification_angles,
    classification_stats,
    to_angle_unit,
)
from .entropy import (
    normalized_entropy,
    shannon_entropy,
    symbol_counts,
    symbol_entropy,
    symbol_probabilities,
)
from .phase_space import PhaseMethod, reconstruct, reconstructed_length
from .symbolize import Symbolization, bin_uniform, symbolize

__all__ = [
    'ClassAStats',
    'classification_angles',
    'classification_stats',
    'to_angle_unit',
    'normalized_entropy',
    'shannon_entropy',
    'symbol_counts',
    'symbol_entropy',
    'symbol_probabilities',
    'PhaseMethod',
    'reconstruct',
    'reconstructed_length',
    'Symbolization',
    'bin_uniform',
    'symbolize',
]
