"""
Typer CLI for contrast-drill.

Commands:
    contrast tiers FILE WORD     - Show the similarity tiers around one pair
    contrast preview FILE        - Preview the trials a policy would produce
    contrast config              - Show the active configuration
    contrast version             - Show version information

Usage:
    contrast --help
    contrast tiers vocab.csv huis
    contrast preview vocab.csv --policy progressive --schedule 2,1,0
    contrast preview vocab.yaml --rounds 1 --seed demo
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer
from loguru import logger
from pydantic import ValidationError
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from config import Settings, get_settings
from src.contrasting import (
    ContrastingEngine,
    ContrastingError,
    ContrastLevel,
    ProgressivePolicy,
    StaticPolicy,
    TierThresholds,
    compute_tiers,
    load_pairs,
)

VERSION = "0.1.0"

app = typer.Typer(
    help="contrast-drill CLI: similarity-tiered distractors for vocabulary pairs",
    no_args_is_help=True,
)

console = Console()

LEVEL_STYLES = {
    ContrastLevel.VERY_SIMILAR: "red",
    ContrastLevel.SOMEWHAT_SIMILAR: "yellow",
    ContrastLevel.DISSIMILAR: "green",
}


def _configure_logging(settings: Settings) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.log_level,
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
    )
    if settings.log_file:
        logger.add(settings.log_file, level=settings.log_level, rotation="1 MB")


def _thresholds(settings: Settings) -> TierThresholds:
    return TierThresholds.build(
        similar=settings.contrast_similar_threshold,
        dissimilar=settings.contrast_dissimilar_threshold,
    )


def _load_or_exit(path: Path) -> list:
    try:
        return load_pairs(path)
    except ContrastingError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)


def _parse_schedule(raw: str) -> list[int]:
    try:
        return [int(part.strip()) for part in raw.split(",") if part.strip()]
    except ValueError:
        raise typer.BadParameter(f"Schedule must be comma-separated integers, got {raw!r}")


def _format_pair(pair) -> str:
    return f"{pair.foreign} [dim]({pair.source})[/dim]"


@app.callback()
def main_callback() -> None:
    """Contrasting exercise tooling."""
    try:
        settings = get_settings()
    except ValidationError as e:
        rprint(f"[red]Error:[/red] Invalid configuration: {escape(str(e))}")
        raise typer.Exit(code=1)
    _configure_logging(settings)


@app.command("tiers")
def show_tiers(
    vocabulary: Path = typer.Argument(..., help="CSV or YAML vocabulary file"),
    word: str = typer.Argument(..., help="Source or foreign form of the pair to inspect"),
) -> None:
    """
    Show which pairs fall in each similarity tier around WORD.

    Examples:
        contrast tiers vocab.csv huis
    """
    settings = get_settings()
    pairs = _load_or_exit(vocabulary)

    matches = [p for p in pairs if word in (p.source, p.foreign)]
    if not matches:
        rprint(f"[red]Error:[/red] '{word}' not found in {vocabulary}")
        raise typer.Exit(code=1)

    try:
        thresholds = _thresholds(settings)
    except ContrastingError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    pair = matches[0]
    tiers = compute_tiers(pair, pairs, thresholds=thresholds)

    table = Table(title=f"Similarity tiers for {pair.foreign}", show_header=True)
    table.add_column("Level", justify="right")
    table.add_column("Tier", style="cyan")
    table.add_column("Pairs")

    for level in ContrastLevel:
        members = tiers[level]
        table.add_row(
            f"[{LEVEL_STYLES[level]}]{int(level)}[/{LEVEL_STYLES[level]}]",
            level.name.replace("_", " ").lower(),
            ", ".join(p.foreign for p in members) if members else "-",
        )

    console.print(table)


@app.command("preview")
def preview(
    vocabulary: Path = typer.Argument(..., help="CSV or YAML vocabulary file"),
    policy: str = typer.Option("static", "--policy", "-p", help="static or progressive"),
    rounds: int | None = typer.Option(None, "--rounds", "-r", help="Number of rounds (default: from config)"),
    schedule: str | None = typer.Option(
        None, "--schedule", help="Comma-separated level per round (progressive only)"
    ),
    seed: str | None = typer.Option(None, "--seed", help="Seed for reproducible shuffles"),
) -> None:
    """
    Preview every trial a policy produces over the vocabulary.

    Nothing is graded; the table shows answer and distractors per trial.

    Examples:
        contrast preview vocab.csv
        contrast preview vocab.csv --policy progressive --schedule 2,1,0
    """
    settings = get_settings()
    pairs = _load_or_exit(vocabulary)

    total_rounds = rounds if rounds is not None else settings.contrast_total_rounds
    seed_value = seed if seed is not None else settings.contrast_seed

    try:
        options = {"thresholds": _thresholds(settings), "seed": seed_value}
        if policy == "static":
            engine: ContrastingEngine = StaticPolicy(pairs, total_rounds, **options)
        elif policy == "progressive":
            levels = _parse_schedule(schedule) if schedule else settings.level_schedule()
            engine = ProgressivePolicy(pairs, total_rounds, levels, **options)
        else:
            raise typer.BadParameter(f"Unknown policy {policy!r} (use static or progressive)")

        trials = list(engine.iter_trials())
    except ContrastingError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    table = Table(title=f"{policy.capitalize()} contrasting preview", show_header=True)
    table.add_column("Round", justify="right", style="dim")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Level", justify="right")
    table.add_column("Answer", style="bold")
    table.add_column("Distractors")

    for trial in trials:
        if trial.index == 0 and trial.round > 0:
            table.add_section()
        style = LEVEL_STYLES[ContrastLevel(trial.level)]
        table.add_row(
            str(trial.round),
            str(trial.index + 1),
            f"[{style}]{trial.level}[/{style}]",
            _format_pair(trial.answer),
            ", ".join(_format_pair(p) for p in trial.distractors),
        )

    console.print(table)

    summary = engine.exposure_summary().to_dict()
    rprint(
        f"\n[bold green]{len(trials)} trials[/bold green] over {total_rounds} round(s); "
        f"exposures per pair: min {summary['min_seen']}, max {summary['max_seen']}, "
        f"mean {summary['mean_seen']}"
    )


@app.command("config")
def show_config() -> None:
    """Show the active configuration."""
    settings = get_settings()

    table = Table(title="Configuration", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Total rounds", str(settings.contrast_total_rounds))
    table.add_row("Level schedule", settings.contrast_level_schedule)
    table.add_row("Similar threshold", str(settings.contrast_similar_threshold))
    table.add_row("Dissimilar threshold", str(settings.contrast_dissimilar_threshold))
    table.add_row("Seed", settings.contrast_seed or "random")
    table.add_row("Log Level", settings.log_level)

    console.print(table)


@app.command("version")
def show_version() -> None:
    """Show version information."""
    rprint(f"[bold]contrast-drill[/bold] v{VERSION}")
    rprint("  Similarity-tiered distractor selection for vocabulary pairs")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
