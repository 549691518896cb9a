"""Command line entry point for memento-mori.

Usage:
    memento-mori show [--at YYYY-MM-DD] [--json]
    memento-mori set-profile --birth-date YYYY-MM-DD --life-expectancy 80
    memento-mori render large --width 320 --height 300
    memento-mori next-refresh
"""

import json
from datetime import datetime
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.table import Table

from .core.config import get_settings
from .core.database import create_database_engine
from .core.errors import (
    InvalidInputError,
    MementoMoriError,
    validate_birth_date,
    validate_decimal_places,
    validate_life_expectancy,
)
from .core.typed_config_loader import get_recompute_policy, get_surface_catalog
from .models.display_unit import DisplayUnit
from .models.life_profile import LifeProfile
from .services import life_progress_text as text
from .services.life_grid_image import save_surface_png
from .services.life_profile_store import LifeProfileStore, SqlBlobStore
from .services.life_progress_domain import summarize, unit_progress
from .services.life_surfaces import render_pass
from .services.recompute_schedule import next_recompute_for_policy
from .utils.logging import get_logger, setup_logging

console = Console()
app = typer.Typer(help="Your life in weeks, months and years")
log = get_logger(__name__)

DATE_FORMATS = ["%Y-%m-%d"]


def _build_store() -> LifeProfileStore:
    settings = get_settings()
    engine = create_database_engine(settings.database_url)
    return LifeProfileStore(SqlBlobStore(engine), key=settings.profile_key)


def _fail(error: MementoMoriError) -> NoReturn:
    log.warning("command_rejected", error=str(error))
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(2)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Override the configured log level"
    ),
) -> None:
    settings = get_settings()
    setup_logging(log_level or settings.log_level, log_to_file=settings.log_to_file)


@app.command()
def show(
    at: Optional[datetime] = typer.Option(
        None, "--at", formats=DATE_FORMATS, help="Reference date (default: now)"
    ),
    output_json: bool = typer.Option(
        False, "--json", "-j", help="Output the summary as JSON"
    ),
) -> None:
    """Show how much of your life has been lived."""
    reference = at or datetime.now()
    profile = _build_store().get()
    summary = summarize(profile, reference)
    units = {unit: unit_progress(profile, unit, reference) for unit in DisplayUnit}

    if output_json:
        data = {
            "profile": profile.to_record(),
            "totalDays": summary.total_days,
            "daysLived": summary.days_lived,
            "daysRemaining": summary.days_remaining,
            "percentageLived": summary.percentage_lived,
            "formattedPercentageLived": summary.formatted_percentage_lived,
            "units": {
                unit.value: {
                    "total": progress.total_units,
                    "elapsed": progress.units_elapsed,
                    "remaining": progress.units_remaining,
                }
                for unit, progress in units.items()
            },
        }
        typer.echo(json.dumps(data, indent=2))
        return

    table = Table(title="Memento mori.", show_header=True)
    table.add_column("Unit", style="cyan")
    table.add_column("Lived", justify="right")
    table.add_column("Left", justify="right")
    table.add_column("Total", justify="right")

    table.add_row(
        "Days",
        str(summary.days_lived),
        str(summary.days_remaining),
        str(summary.total_days),
    )
    for unit, progress in units.items():
        table.add_row(
            unit.label,
            str(progress.units_elapsed),
            str(progress.units_remaining),
            str(progress.total_units),
        )

    console.print(table)
    console.print(
        f"\n  Age {int(summary.current_age)}  "
        f"[bold]{summary.formatted_percentage_lived}%[/bold] lived  "
        f"{text.inline_accessory(summary)}"
    )


@app.command("set-profile")
def set_profile(
    birth_date: datetime = typer.Option(
        ..., "--birth-date", formats=DATE_FORMATS, help="Date of birth"
    ),
    life_expectancy: int = typer.Option(
        80, "--life-expectancy", help="Assumed lifespan in years"
    ),
    decimal_places: Optional[int] = typer.Option(
        None,
        "--decimal-places",
        help="Digits after the point in the percentage (0-15)",
    ),
) -> None:
    """Save birth date and life expectancy to the shared settings store."""
    try:
        validate_birth_date(birth_date, datetime.now())
        validate_life_expectancy(life_expectancy)
        validate_decimal_places(decimal_places)
    except InvalidInputError as e:
        _fail(e)

    profile = LifeProfile(
        birth_date=birth_date,
        life_expectancy_years=life_expectancy,
        decimal_places=decimal_places,
    )
    _build_store().set(profile)
    typer.echo(
        f"Saved: born {birth_date.date().isoformat()}, "
        f"expecting {life_expectancy} years"
    )


@app.command()
def render(
    surface: str = typer.Argument(..., help="Surface name, e.g. medium or large"),
    width: int = typer.Option(320, "--width", help="Grid width in pixels"),
    height: int = typer.Option(300, "--height", help="Grid height in pixels"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="PNG path"),
    at: Optional[datetime] = typer.Option(
        None, "--at", formats=DATE_FORMATS, help="Reference date (default: now)"
    ),
) -> None:
    """Render a surface's grid to a PNG file."""
    profile = _build_store().get()
    try:
        view = render_pass(
            profile,
            surface,
            width,
            height,
            reference=at or datetime.now(),
            catalog=get_surface_catalog(),
        )
    except MementoMoriError as e:
        _fail(e)

    path = save_surface_png(view, width, height, output_path=output)
    log.info("surface_rendered", surface=surface, path=str(path))
    typer.echo(str(path))


@app.command("next-refresh")
def next_refresh(
    at: Optional[datetime] = typer.Option(
        None, "--at", formats=DATE_FORMATS, help="Reference date (default: now)"
    ),
) -> None:
    """Print when glanceable surfaces should next be recomputed."""
    reference = at or datetime.now()
    typer.echo(next_recompute_for_policy(reference, get_recompute_policy()).isoformat())


if __name__ == "__main__":
    app()
