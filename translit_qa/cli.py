"""CLI entry point for the translation test harness."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from translit_qa.errors import HarnessError
from translit_qa.models.config import HarnessConfig
from translit_qa.orchestrator import Orchestrator

console = Console()

DEFAULT_CONFIG = "qa-config.json"


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def _load_config(path: str) -> HarnessConfig:
    try:
        return HarnessConfig.load_or_default(path)
    except (OSError, ValueError) as e:
        console.print(f"[red]Invalid config file {escape(str(path))}: {escape(str(e))}[/red]")
        sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Singlish-to-Sinhala transliteration test harness"""
    setup_logging(verbose)


@cli.command()
@click.option("--config", "-c", default=DEFAULT_CONFIG, help="Config file path")
def run(config: str) -> None:
    """Run every fixture case against the site and write the reports."""
    cfg = _load_config(config)
    orchestrator = Orchestrator(cfg)
    try:
        results = orchestrator.run_full_pipeline()
    except HarnessError as e:
        console.print(f"[red]Run aborted: {escape(str(e))}[/red]")
        sys.exit(1)

    console.print("\n[bold green]Test Execution Complete[/bold green]")
    table = Table(title="Results Summary")
    table.add_column("Metric", style="bold")
    table.add_column("Value")
    table.add_row("Duration", f"{results['duration']}s")
    table.add_row("Total Tests", str(results["results"]["total"]))
    table.add_row("Passed", f"[green]{results['results']['passed']}[/green]")
    table.add_row("Failed", f"[red]{results['results']['failed']}[/red]")
    table.add_row("Errors", f"[yellow]{results['results']['errors']}[/yellow]")
    table.add_row("Pass Rate", f"{results['results']['pass_rate']:.2f}%")
    console.print(table)

    for fmt, path in results["reports"].items():
        console.print(f"  {fmt.upper()} report: [blue]{path}[/blue]")


@cli.command()
@click.option("--config", "-c", default=DEFAULT_CONFIG, help="Config file path")
def collect(config: str) -> None:
    """Record the site's current outputs into the fixture workbook."""
    cfg = _load_config(config)
    try:
        summary = Orchestrator(cfg).run_collect()
    except HarnessError as e:
        console.print(f"[red]Collect aborted: {escape(str(e))}[/red]")
        sys.exit(1)
    console.print(
        f"[green]Fixture updated:[/green] {summary.passed} passed, "
        f"{summary.failed} failed, {summary.errors} errors out of {summary.total}"
    )


@cli.command("list")
@click.option("--config", "-c", default=DEFAULT_CONFIG, help="Config file path")
def list_cases(config: str) -> None:
    """List the cases in the fixture workbook."""
    cfg = _load_config(config)
    try:
        cases = Orchestrator(cfg).load_cases()
    except HarnessError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)

    table = Table(title=f"Test cases ({len(cases)})")
    table.add_column("TC ID", style="bold")
    table.add_column("Polarity")
    table.add_column("Length")
    table.add_column("Name")
    table.add_column("Input")
    for case in cases:
        table.add_row(case.case_id, case.polarity.value, case.length_class or "-",
                      case.name, case.input_text)
    console.print(table)


@cli.command()
@click.option("--config", "-c", default=DEFAULT_CONFIG, help="Config file path")
@click.option("--with-config", is_flag=True, help="Also write a default config file")
def init(config: str, with_config: bool) -> None:
    """Create the fixture workbook from the built-in case catalogue."""
    cfg = _load_config(config)
    fixture = Path(cfg.fixture_path)
    if fixture.exists():
        if not click.confirm(f"{fixture} already exists. Regenerate its test case sheets?"):
            return

    path = Orchestrator(cfg).init_fixtures()
    console.print(f"[green]Created {path}[/green]")

    if with_config:
        config_path = Path(config)
        if config_path.exists() and not click.confirm(f"{config_path} already exists. Overwrite?"):
            return
        cfg.save(config_path)
        console.print(f"[green]Created {config_path}[/green]")

    console.print("\nYou can now review the cases and run:")
    console.print("  [blue]translit-qa run[/blue]")


if __name__ == "__main__":
    cli()
