"""Shared options of the ClassA CLI commands."""

from pathlib import Path
from typing import Any, Callable, Dict, Optional

import click

from ..config import ClassAConfig
from ..core.symbolize import Symbolization


def input_options(func: Callable) -> Callable:
    """Input file selection options."""
    func = click.option(
        "--group-col",
        default=None,
        help="Grouping column of a CSV/Parquet file (one result per group)"
    )(func)
    func = click.option(
        "--column",
        default=None,
        help="Value column of a CSV/Parquet file (default: first numeric column)"
    )(func)
    func = click.argument("input_file", type=click.Path(exists=True, path_type=Path))(func)
    return func


def pipeline_options(func: Callable) -> Callable:
    """ClassA pipeline options. Unset options fall back to --config, then defaults."""
    options = [
        click.option("--config", "config_path", type=click.Path(exists=True, path_type=Path),
                     default=None, help="YAML file with pipeline options"),
        click.option("-k", "--n-symbols", "k", type=int, default=None,
                     help="Number of symbols (default: 4)"),
        click.option("--phase", type=click.IntRange(1, 3), default=None,
                     help="1 = improved 2nd-order diff, 2 = 2nd-order diff, 3 = Takens lag-1"),
        click.option("--symbolization", default=None,
                     type=click.Choice([s.value for s in Symbolization], case_sensitive=False),
                     help="Symbolization strategy (default: equal)"),
        click.option("--log-base", type=float, default=None,
                     help="Logarithm base of the entropy (default: e)"),
        click.option("--normalize/--no-normalize", default=None,
                     help="Normalize the entropy by log(k) (default: normalize)"),
        click.option("--angle-unit", type=click.Choice(["deg", "rad"]), default=None,
                     help="Unit of the classification statistics (default: deg)"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_config(config_path: Optional[Path], **overrides: Any) -> ClassAConfig:
    """Merge a YAML config with the options given on the command line."""
    data: Dict[str, Any] = {}
    if config_path is not None:
        data = ClassAConfig.from_yaml(config_path).to_dict()
    data.update({key: value for key, value in overrides.items() if value is not None})
    return ClassAConfig.from_dict(data)
