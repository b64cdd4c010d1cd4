"""ClassA entropy computation commands."""

import json
import sys
import click
from pathlib import Path
from typing import Any, Dict, Optional

from ..options import build_config, input_options, pipeline_options


def _result_record(estimator) -> Dict[str, Any]:
    stats = estimator.stats_
    return {
        "ras": stats.ras,
        "p1": stats.p1,
        "p24": stats.p24,
        "p3": stats.p3,
        "entropy": estimator.entropy_,
        "probabilities": [float(p) for p in estimator.probabilities_],
        "n_angles": int(len(estimator.angles_)),
    }


def _echo_record(name: Optional[str], record: Dict[str, Any], unit: str) -> None:
    if name is not None:
        click.echo(f"[{name}]")
    click.echo(f"RAS ({unit}): {record['ras']:.6f}")
    click.echo(f"P1: {record['p1']:.6f}")
    click.echo(f"P24: {record['p24']:.6f}")
    click.echo(f"P3: {record['p3']:.6f}")
    click.echo(f"Entropy: {record['entropy']:.6f}")
    probs = ", ".join(f"{p:.4f}" for p in record["probabilities"])
    click.echo(f"Probabilities: [{probs}]")


def register_compute_commands(cli: click.Group) -> None:
    """Register the single-scale ClassA command."""
    @cli.command("compute", help="Compute ClassA statistics and entropy of a series")
    @input_options
    @click.option("--scale", type=int, default=None,
                  help="Coarse-graining scale (default: 1)")
    @pipeline_options
    @click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
    @click.option("--plot", "plot_path", type=click.Path(path_type=Path), default=None,
                  help="Save the phase-space plot to this image file")
    def compute(input_file: Path, column: Optional[str], group_col: Optional[str],
                config_path: Optional[Path], as_json: bool, plot_path: Optional[Path],
                **options):
        """Compute ClassA entropy of the series in INPUT_FILE.

        Examples:

        \b
            classa compute rr.txt
            classa compute hrv.csv --column rr -k 6 --symbolization ncdf
            classa compute hrv.csv --group-col subject --json
        """
        from ...api import ClassAEntropy
        from ...exceptions import ClassAError
        from ...io_adapters import load_series

        try:
            config = build_config(config_path, **options)
            loaded = load_series(input_file, column=column, group_col=group_col)
            series = loaded if isinstance(loaded, dict) else {None: loaded}

            records = {}
            for name, x in series.items():
                estimator = ClassAEntropy(config).fit(x)
                records[name] = _result_record(estimator)
                if plot_path is not None:
                    _save_plot(estimator, plot_path, name)
        except (ClassAError, FileNotFoundError) as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

        if as_json:
            payload = records[None] if None in records else records
            click.echo(json.dumps(payload, indent=2))
        else:
            for name, record in records.items():
                _echo_record(name, record, config.angle_unit)


def _save_plot(estimator, plot_path: Path, name: Optional[str]) -> None:
    import matplotlib.pyplot as plt

    if name is not None:
        plot_path = plot_path.with_name(f"{plot_path.stem}_{name}{plot_path.suffix}")
    fig, _ = estimator.plot(title=name)
    fig.savefig(plot_path, bbox_inches='tight')
    plt.close(fig)
    click.echo(f"Saved plot: {plot_path}", err=True)
