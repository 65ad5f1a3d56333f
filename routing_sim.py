"""
CLI: compute and print DVR and LSR routing tables for a topology file.

    routing-sim topology.txt [--config routing_sim.yml] [--algorithm both]
"""

from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence
import logging
import sys

import click

from config import SimulationConfig, load_config
from formatting import DVR_SECTION, LSR_SECTION, format_dvr, format_lsr
from graph import InvalidInputError
from matrix_io import load_graph
from simulation import run_simulation


ALGORITHM_CHOICES = {"dvr": ("dvr",), "lsr": ("lsr",), "both": ("dvr", "lsr")}


@click.command()
@click.argument("input_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="location of the simulation config YAML",
)
@click.option(
    "--algorithm",
    type=click.Choice(sorted(ALGORITHM_CHOICES)),
    default=None,
    help="which routing algorithm(s) to run (overrides the config)",
)
@click.option("--trace/--no-trace", default=None, help="print DV tables after every changing pass")
@click.option("--verbose", is_flag=True, help="log engine progress to stderr")
def cli(
    input_file: Path,
    config_path: Optional[Path],
    algorithm: Optional[str],
    trace: Optional[bool],
    verbose: bool,
) -> int:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="[%(name)s] %(message)s",
    )

    try:
        config = load_config(config_path) if config_path else SimulationConfig()
        if algorithm:
            config = replace(config, algorithms=ALGORITHM_CHOICES[algorithm])
        if trace is not None:
            config = replace(config, record_trace=trace)
        graph = load_graph(input_file, config)
    except OSError as exc:
        click.echo(f"Error: could not open {exc.filename or input_file}: {exc.strerror or exc}", err=True)
        return 1
    except InvalidInputError as exc:
        click.echo(f"Error: {exc}", err=True)
        return 1

    report = run_simulation(graph, config)

    if report.dvr is not None:
        click.echo(f"\n{DVR_SECTION}")
        click.echo(format_dvr(report.dvr, show_trace=config.record_trace), nl=False)
    if report.lsr is not None:
        click.echo(f"\n{LSR_SECTION}")
        click.echo(format_lsr(report.lsr), nl=False)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point; usage errors exit with status 1."""
    try:
        rv = cli.main(args=list(argv) if argv is not None else None, prog_name="routing-sim", standalone_mode=False)
    except click.UsageError as exc:
        exc.show()
        return 1
    except click.ClickException as exc:
        exc.show()
        return 1
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return rv if isinstance(rv, int) else 0


if __name__ == "__main__":
    sys.exit(main())
