"""
Configuration schema for the ClassA entropy pipeline.

Provides a validated dataclass that can be built from keyword arguments,
dictionaries or YAML files.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any
from pathlib import Path
import numpy as np
import yaml

from .core.angles import check_angle_unit
from .core.phase_space import PhaseMethod
from .core.symbolize import DEFAULT_KMEANS_MAX_ITER, DEFAULT_SEED, Symbolization
from .core.validation import as_bool, as_int, as_log_base
from .exceptions import InvalidParameter

# camelCase option names accepted in dictionaries and YAML
_KEY_ALIASES = {
    'K': 'k',
    'logBase': 'log_base',
    'angleUnit': 'angle_unit',
    'kmeansMaxIter': 'kmeans_max_iter',
}


@dataclass
class ClassAConfig:
    """ClassA entropy options."""
    scale: int = 1
    k: int = 4
    phase: PhaseMethod = PhaseMethod.IMPROVED_SECOND_ORDER_DIFF
    symbolization: Symbolization = Symbolization.EQUAL
    log_base: float = float(np.e)
    normalize: bool = True
    angle_unit: str = "deg"
    plot: bool = False
    kmeans_max_iter: int = DEFAULT_KMEANS_MAX_ITER
    seed: Optional[int] = DEFAULT_SEED

    def __post_init__(self):
        """Validate and normalise every option."""
        self.scale = as_int("scale", self.scale, minimum=1)
        self.k = as_int("k", self.k, minimum=2)
        self.phase = PhaseMethod.from_value(self.phase)
        self.symbolization = Symbolization.from_name(self.symbolization)
        self.log_base = as_log_base(self.log_base)
        self.normalize = as_bool("normalize", self.normalize)
        self.angle_unit = check_angle_unit(self.angle_unit)
        self.plot = as_bool("plot", self.plot)
        self.kmeans_max_iter = as_int("kmeans_max_iter", self.kmeans_max_iter, minimum=1)
        if self.seed is not None:
            self.seed = as_int("seed", self.seed, minimum=0)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ClassAConfig:
        """Create ClassAConfig from dictionary (e.g., from YAML)."""
        options = {_KEY_ALIASES.get(key, key): value for key, value in data.items()}
        unknown = set(options) - set(cls.__dataclass_fields__)
        if unknown:
            raise InvalidParameter(f"Unknown option(s): {sorted(unknown)}")
        return cls(**options)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> ClassAConfig:
        """Load configuration from YAML file."""
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path, 'r') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise InvalidParameter(f"Config file must hold a mapping: {yaml_path}")

        # Options may sit at the top level or under a 'classa' section
        return cls.from_dict(data.get('classa', data))

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a plain dictionary."""
        data = asdict(self)
        data['phase'] = int(self.phase)
        data['symbolization'] = self.symbolization.value
        return data

    def replace(self, **changes) -> ClassAConfig:
        """Return a copy with some options changed (re-validated)."""
        data = self.to_dict()
        data.update(changes)
        return ClassAConfig.from_dict(data)
