"""
Command-line interface for rendering mocknet reports.
"""
import sys
from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path
from typing import Callable, Iterator, Optional, TextIO

import click
from rich.console import Console

from mocknet_report.config import ReportConfig
from mocknet_report.logging_setup import setup_logging
from mocknet_report.printer import Printer
from mocknet_report.snapshot import load_network, load_topology


console = Console(stderr=True)


@click.group()
def main():
    """Mocknet Report - text diagnostics for simulated P2P networks."""
    pass


def _build_config(config: Optional[str], output: Optional[str], log_level: Optional[str]) -> ReportConfig:
    """Load configuration from file and apply CLI overrides."""
    if config and Path(config).exists():
        report_config = ReportConfig.from_file(config)
    else:
        report_config = ReportConfig()

    if output:
        report_config = replace(report_config, output=output)
    if log_level:
        report_config = replace(report_config, log_level=log_level)

    report_config.validate()
    return report_config


@contextmanager
def _open_sink(report_config: ReportConfig) -> Iterator[TextIO]:
    """Yield the report destination; files are closed here, stdout never is."""
    if report_config.output is None:
        yield sys.stdout
        return

    with open(report_config.output, report_config.file_mode) as f:
        yield f


def _run_report(source: str, loader: Callable, render: Callable, config, output, log_level):
    try:
        report_config = _build_config(config, output, log_level)
    except (OSError, ValueError, TypeError) as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        sys.exit(1)

    try:
        snapshot = loader(source)
    except (OSError, ValueError, TypeError) as e:
        console.print(f"[red]Error loading {source}: {e}[/red]")
        sys.exit(1)

    setup_logging(report_config.log_level, report_config.log_format)

    with _open_sink(report_config) as sink:
        render(Printer(sink), snapshot)

    if report_config.output:
        console.print(f"[green]Report written to {report_config.output}[/green]")


_common_options = [
    click.option("--output", "-o", type=click.Path(), help="Write the report to this file"),
    click.option("--config", "-c", type=click.Path(), help="Path to configuration file"),
    click.option("--log-level", "-l", default=None, help="Log level"),
]


def _with_common_options(func):
    for option in reversed(_common_options):
        func = option(func)
    return func


@main.command()
@click.argument("topology", type=click.Path(exists=True, dir_okay=False))
@_with_common_options
def links(topology, output, config, log_level):
    """Render the link map of a topology JSON file."""
    _run_report(
        topology, load_topology,
        Printer.mocknet_links,
        config, output, log_level,
    )


@main.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False))
@_with_common_options
def conns(snapshot, output, config, log_level):
    """Render the connection set of an endpoint snapshot JSON file."""
    _run_report(
        snapshot, load_network,
        Printer.network_conns,
        config, output, log_level,
    )


@main.command()
@click.argument("output", type=click.Path())
@click.option("--report-output", "-o", type=click.Path(), default=None, help="Default report file")
@click.option("--log-level", "-l", default="WARNING", help="Log level")
def generate_config(output, report_output, log_level):
    """Generate a configuration file."""

    config = ReportConfig(output=report_output, log_level=log_level)
    try:
        config.validate()
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    config.to_file(output)
    console.print(f"[green]Configuration saved to {output}[/green]")


@main.command()
def version():
    """Display version information."""
    from . import __version__
    console.print(f"[cyan]Mocknet Report v{__version__}[/cyan]")


if __name__ == "__main__":
    main()
