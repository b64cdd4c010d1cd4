"""Multiscale ClassA entropy commands."""

import json
import math
import sys
import click
from pathlib import Path
from typing import List, Optional

from ..options import build_config, input_options, pipeline_options


def _parse_scales(ctx, param, value: str) -> List[int]:
    try:
        scales = [int(s) for s in value.split(",") if s.strip()]
    except ValueError:
        raise click.BadParameter("scales must be comma-separated integers, e.g. 1,2,4")
    if not scales or min(scales) < 1:
        raise click.BadParameter("scales must be positive integers")
    return scales


def register_multiscale_commands(cli: click.Group) -> None:
    """Register multiscale ClassA commands."""
    @cli.command("multiscale", help="ClassA statistics and entropy across scales")
    @input_options
    @click.option("--scales", default="1,2,4,8,16", callback=_parse_scales,
                  help="Comma-separated coarse-graining scales (default: 1,2,4,8,16)")
    @pipeline_options
    @click.option("--json", "as_json", is_flag=True, help="Print the scale signature as JSON")
    @click.option("--plot", "plot_path", type=click.Path(path_type=Path), default=None,
                  help="Save the scale-signature panel to this image file")
    def multiscale(input_file: Path, column: Optional[str], group_col: Optional[str],
                   scales: List[int], config_path: Optional[Path], as_json: bool,
                   plot_path: Optional[Path], **options):
        """Evaluate ClassA entropy of INPUT_FILE at several scales.

        Examples:

        \b
            classa multiscale rr.txt --scales 1,2,3,4,5
        """
        from ...exceptions import ClassAError
        from ...io_adapters import load_series
        from ...multiscale import MultiscaleClassA

        if group_col is not None:
            click.echo("Error: --group-col is not supported by multiscale", err=True)
            sys.exit(1)

        try:
            options = build_config(config_path, **options).to_dict()
            options.pop('scale')
            x = load_series(input_file, column=column)
            ms = MultiscaleClassA(scales=scales, **options).fit(x)
            signature = ms.scale_signature()
        except (ClassAError, FileNotFoundError) as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

        if as_json:
            payload = {"scales": ms.scales}
            payload.update({k: [None if math.isnan(v) else float(v) for v in values]
                            for k, values in signature.items()})
            click.echo(json.dumps(payload, indent=2))
        else:
            features = list(signature)
            click.echo("scale\t" + "\t".join(features))
            for i, scale in enumerate(ms.scales):
                row = "\t".join(f"{signature[f][i]:.6f}" for f in features)
                click.echo(f"{scale}\t{row}")

        if plot_path is not None:
            import matplotlib.pyplot as plt
            from ...viz import plot_scale_signature

            fig, _ = plot_scale_signature(signature, ms.scales)
            fig.savefig(plot_path, bbox_inches='tight')
            plt.close(fig)
            click.echo(f"Saved plot: {plot_path}", err=True)
