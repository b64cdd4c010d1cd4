"""
classa: ClassA entropy of physiological time series.

Measures the directional balance and the complexity of consecutive sample
transitions of a univariate series (e.g. heart-rate variability):

- Coarse-graining at an integer scale
- Phase-space reconstruction (second-order differences, Takens lag-1)
- Classification angles and their quadrant statistics (RAS, P1, P24, P3)
- Six symbolization strategies
- Shannon entropy of the symbol distribution, optionally normalized
"""

from .api import ClassAEntropy, ClassAResult, classify
from .config import ClassAConfig
from .core import ClassAStats, PhaseMethod, Symbolization
from .exceptions import ClassAError, InsufficientLength, InvalidParameter
from .multiscale import MultiscaleClassA, coarse_grain

__version__ = "0.1.0"

__all__ = [
    'ClassAEntropy',
    'ClassAResult',
    'classify',
    'ClassAConfig',
    'ClassAStats',
    'PhaseMethod',
    'Symbolization',
    'ClassAError',
    'InsufficientLength',
    'InvalidParameter',
    'MultiscaleClassA',
    'coarse_grain',
]

# Columnar adapters
from .io_adapters import from_pandas, load_series
__all__.extend(['from_pandas', 'load_series'])

# Visualization module (optional - requires matplotlib)
try:
    from .viz import plot_phase_space, plot_scale_signature, symbol_palette
    __all__.extend(['plot_phase_space', 'plot_scale_signature', 'symbol_palette'])
except ImportError:
    pass
