"""
StatCoach CLI - Command Line Interface for Volleyball Game Analysis

Provides commands for:
- Analyzing a game's box score from a JSON file
- Showing the research benchmarks and odds ratios
- Writing a default configuration file
- Displaying version and environment information
"""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from statcoach import __version__
from statcoach.analysis.analyzer import analyze_game
from statcoach.analysis.models import AnalysisResult, RawStats
from statcoach.analysis.narrative import format_decimal
from statcoach.analysis.performance import classify_stats
from statcoach.core.config import (
    generate_default_config,
    get_config,
    load_config,
    set_config,
    setup_logging,
)
from statcoach.core.constants import METRICS, PerformanceLevel
from statcoach.export import export_analysis, export_to_json

app = typer.Typer(
    name="statcoach",
    help="Research-based volleyball game analysis and practice recommendations",
    add_completion=False,
)
console = Console()

logger = logging.getLogger(__name__)

LEVEL_STYLES = {
    PerformanceLevel.EXCELLENT: "green",
    PerformanceLevel.GOOD: "yellow",
    PerformanceLevel.NEEDS_IMPROVEMENT: "red",
}


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]StatCoach[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Enable verbose output"
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (.yaml, .toml or .json)",
        dir_okay=False,
    ),
) -> None:
    """StatCoach - Volleyball Game Analysis"""
    config = load_config(config_file)
    if verbose:
        config.logging.level = "DEBUG"
    set_config(config)
    setup_logging(config.logging)


def _load_stats(stats_path: Path) -> RawStats:
    """Read and validate a box score. Accepts the bare record or {"stats": {...}}."""
    try:
        data = json.loads(stats_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        console.print(f"[red]Error reading stats file:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if isinstance(data, dict) and isinstance(data.get("stats"), dict):
        data = data["stats"]
    if not isinstance(data, dict):
        console.print("[red]Error:[/red] stats file must contain a JSON object")
        raise typer.Exit(1)

    try:
        return RawStats.from_dict(data)
    except ValidationError as e:
        console.print(f"[red]Invalid stats:[/red]\n{escape(str(e))}")
        raise typer.Exit(1)


def _display_metrics_table(result: AnalysisResult) -> None:
    """Display per-set rates."""
    m = result.metrics
    table = Table(title="Game Metrics", show_header=False)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Kill Efficiency", f"{m.kill_efficiency:.1f}%")
    table.add_row("Aces / Set", f"{m.aces_per_set:.2f}")
    table.add_row("Blocks / Set", f"{m.blocks_per_set:.2f}")
    table.add_row("Digs / Set", f"{m.digs_per_set:.2f}")
    table.add_row("Reception Errors / Set", f"{m.reception_error_rate:.2f}")
    table.add_row("Attack Errors / Set", f"{m.attack_error_rate:.2f}")
    console.print(table)


def _display_benchmark_table(stats: RawStats, result: AnalysisResult) -> None:
    """Display raw values against the research bands with their impact."""
    levels = classify_stats(stats)

    table = Table(title="Benchmark Comparison")
    table.add_column("Metric", style="cyan")
    table.add_column("Raw", justify="right")
    table.add_column("Normalized", justify="right")
    table.add_column("Win Avg", justify="right")
    table.add_column("Impact", justify="right")
    table.add_column("Level")

    for definition in METRICS:
        key = definition.key.value
        if key not in result.impacts:
            continue
        impact = result.impacts[key]
        level = levels[key]
        style = LEVEL_STYLES[level]
        table.add_row(
            definition.display_name,
            str(getattr(stats, definition.raw_field)),
            format_decimal(impact.value),
            format_decimal(impact.benchmark, 2),
            f"{impact.impact:+.1f}",
            f"[{style}]{level.value}[/{style}]",
        )
    console.print(table)


@app.command()
def analyze(
    stats_path: Path = typer.Argument(
        ...,
        help="Path to a JSON file with the game's box score",
        exists=True,
        dir_okay=False,
        resolve_path=True,
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: text (narrative and tables) or json (full result)"
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file for results (format detected from extension: .json, .txt, .md)"
    ),
) -> None:
    """
    Analyze a game's statistics against NCAA research benchmarks.

    The stats file uses the wire field names: totalKills, killAttempts,
    attackErrors, serviceAces, serviceErrors, receptionErrors, digs,
    soloBlocks, blockAssists, totalSets.
    """
    config = get_config()
    output_format = (output_format or config.export.default_format).lower()
    if output_format not in ("text", "json"):
        console.print(f"[red]Error:[/red] unknown format '{output_format}' (use text or json)")
        raise typer.Exit(1)

    stats = _load_stats(stats_path)
    result = analyze_game(stats)
    logger.info(f"Analyzed {stats_path.name}")

    if output_format == "json":
        typer.echo(export_to_json(result, indent=config.export.json_indent, include_metadata=False))
    else:
        typer.echo(result.insights_text)
        console.print()
        _display_metrics_table(result)
        _display_benchmark_table(stats, result)

    if output:
        try:
            export_analysis(result, output, indent=config.export.json_indent)
        except ValueError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise typer.Exit(1)
        console.print(f"\n[green]Results exported to:[/green] {output}")


@app.command()
def benchmarks() -> None:
    """
    Display the research benchmarks and odds ratios used for scoring.
    """
    table = Table(title="NCAA Division I Research Benchmarks")
    table.add_column("Metric", style="cyan")
    table.add_column("Category")
    table.add_column("Win Avg", justify="right", style="green")
    table.add_column("Loss Avg", justify="right", style="red")
    table.add_column("Odds Ratio", justify="right")
    table.add_column("Better")

    for definition in METRICS:
        table.add_row(
            definition.display_name,
            definition.category.value,
            f"{definition.win_benchmark:g}",
            f"{definition.loss_benchmark:g}",
            f"{definition.odds_ratio:.3f}",
            "lower" if definition.lower_is_better else "higher",
        )

    console.print(table)


@app.command("init-config")
def init_config(
    path: Path = typer.Argument(
        Path("statcoach.yaml"),
        help="Where to write the config file (.yaml, .yml or .json)",
        dir_okay=False,
    ),
    force: bool = typer.Option(
        False,
        "--force",
        help="Overwrite an existing file"
    ),
) -> None:
    """
    Write a configuration file with the default settings.
    """
    if path.exists() and not force:
        console.print(f"[red]Error:[/red] {path} already exists (use --force to overwrite)")
        raise typer.Exit(1)

    try:
        generate_default_config(path)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(f"[green]Config written to:[/green] {path}")


@app.command()
def info() -> None:
    """
    Display information about StatCoach and the environment.
    """
    import platform as plat

    import pydantic

    console.print(f"\n[bold blue]StatCoach[/bold blue] v{__version__}\n")

    table = Table(show_header=False)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Python", plat.python_version())
    table.add_row("Platform", plat.system())
    table.add_row("pydantic", pydantic.VERSION)
    table.add_row("Export Format", get_config().export.default_format)
    table.add_row("Log Level", get_config().logging.level)

    console.print(table)


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
