"""Command-line interface for duesort."""

from __future__ import annotations

import json
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from .config import discover_config, set_config_override
from .exceptions import ParseError
from .graph import GraphGenerator
from .logger import setup_logger
from .parser import load_schedule_request
from .schemas import ScheduleRequestSchema, ScheduleResponseSchema
from .scheduler import SchedulerConfig, SchedulingService

app = typer.Typer(
    name="duesort",
    help="Order dependent tasks so the earliest deadlines come first",
    add_completion=False,
)


class OutputFormat(str, Enum):
    """Output formats for the schedule command."""

    TEXT = "text"
    JSON = "json"


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=show ordering, 2=show checks, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: duesort_config.yaml)",
        ),
    ] = None,
) -> None:
    """Global options for duesort commands."""
    setup_logger(verbose)
    set_config_override(config)


@app.command()
def schedule(
    file: Annotated[Path, typer.Argument(help="Path to the schedule request (YAML or JSON)")],
    *,
    output_format: Annotated[
        OutputFormat, typer.Option("--format", "-f", help="Output format")
    ] = OutputFormat.TEXT,
    check_feasibility: Annotated[
        bool | None,
        typer.Option(
            "--check-feasibility/--no-check-feasibility",
            help="Warn about tasks projected to finish after their due date. Overrides config",
        ),
    ] = None,
    hours_per_day: Annotated[
        float | None,
        typer.Option("--hours-per-day", help="Working hours per day for the projection", min=0.1),
    ] = None,
    start: Annotated[
        str | None,
        typer.Option("--start", help="Projection start date (YYYY-MM-DD). Defaults to now"),
    ] = None,
) -> None:
    """Recommend an execution order for the tasks in FILE."""
    start_time = _parse_date_option(start, "start")
    request = _load_request(file)

    scheduler_config = _load_scheduler_config(file)
    updates: dict[str, object] = {}
    if check_feasibility is not None:
        updates["check_feasibility"] = check_feasibility
    if hours_per_day is not None:
        updates["working_hours_per_day"] = hours_per_day
    if updates:
        scheduler_config = scheduler_config.model_copy(update=updates)

    service = SchedulingService(scheduler_config)
    response = service.schedule_request(request, current_time=start_time)

    if output_format == OutputFormat.JSON:
        typer.echo(json.dumps(response.model_dump(by_alias=True), indent=2))
    else:
        _display_response(response)

    if response.warnings and output_format == OutputFormat.TEXT:
        typer.echo("\nWarnings:", err=True)
        for warning in response.warnings:
            typer.echo(f"  - {warning}", err=True)

    if not response.is_valid:
        raise typer.Exit(1)


@app.command()
def validate(
    file: Annotated[Path, typer.Argument(help="Path to the schedule request (YAML or JSON)")],
) -> None:
    """Check FILE for missing, duplicate, self and circular dependencies."""
    request = _load_request(file)
    result = SchedulingService().schedule(request.to_tasks())
    if not result.is_valid:
        typer.echo(f"Invalid: {result.message}", err=True)
        raise typer.Exit(1)
    typer.echo(f"OK: {len(result.recommended_order)} tasks can be scheduled")


@app.command()
def graph(
    file: Annotated[Path, typer.Argument(help="Path to the schedule request (YAML or JSON)")],
    *,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")] = None,
) -> None:
    """Generate the dependency graph in DOT format."""
    request = _load_request(file)
    tasks = request.to_tasks()
    result = SchedulingService().schedule(tasks)

    dot_output = GraphGenerator(tasks, result.recommended_order).generate()

    if output:
        output.write_text(dot_output + "\n", encoding="utf-8")
        typer.echo(f"Graph written to {output}")
    else:
        typer.echo(dot_output)


def _load_request(file: Path) -> ScheduleRequestSchema:
    try:
        return load_schedule_request(file)
    except ParseError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None


def _load_scheduler_config(file: Path) -> SchedulerConfig:
    try:
        return discover_config(file).scheduler
    except ParseError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None


def _parse_date_option(date_str: str | None, option_name: str) -> datetime | None:
    """Parse a YYYY-MM-DD option into a datetime at midnight.

    Args:
        date_str: Date string in YYYY-MM-DD format or None
        option_name: Name of the option for error messages
    """
    if date_str is None:
        return None

    try:
        return datetime.fromisoformat(date_str)
    except ValueError:
        typer.echo(
            f"Error: Invalid --{option_name} '{date_str}'. Use YYYY-MM-DD format.",
            err=True,
        )
        raise typer.Exit(1) from None


def _display_response(response: ScheduleResponseSchema) -> None:
    if not response.is_valid:
        typer.echo(f"Error: {response.message}", err=True)
        return

    typer.echo("Recommended order:")
    for i, title in enumerate(response.recommended_order, start=1):
        typer.echo(f"  {i}. {title}")


def main() -> int:
    """Main entry point."""
    # Typer handles sys.exit() internally
    app()
    return 0


if __name__ == "__main__":
    main()
