"""
Plain-terminal rendering of session records and summaries.
"""

from datetime import timedelta

import typer

from ego.session.models import SessionRecord, SessionSummary


def format_duration(duration: timedelta) -> str:
    """Format a duration as HH:MM:SS (hours may exceed 24)."""
    total = max(int(duration.total_seconds()), 0)
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02}:{minutes:02}:{seconds:02}"


def _delta_color(delta: int) -> str:
    return typer.colors.GREEN if delta >= 0 else typer.colors.RED


def print_started(record: SessionRecord, file_count: int) -> None:
    typer.echo(f"✅ Session started in directory: {record.project_path}")
    typer.echo(f"   Initial line count: {record.initial_line_count}")
    typer.echo(f"   Initial character count: {record.initial_char_count}")
    typer.echo(f"   Files tracked: {file_count}")


def print_status(record: SessionRecord, elapsed: timedelta) -> None:
    typer.echo(f"⏱️  Active session in {record.project_path}")
    typer.echo(f"   Started: {record.start_time.astimezone():%Y-%m-%d %H:%M:%S}")
    typer.echo(f"   Elapsed: {format_duration(elapsed)}")
    typer.echo(f"   Initial line count: {record.initial_line_count}")


def print_summary(summary: SessionSummary) -> None:
    """Print the end-of-session report."""
    typer.secho("📊 Coding Session Stats", bold=True)
    typer.echo(f"   Project: {summary.project_path}")
    typer.echo(f"   Duration: {format_duration(summary.duration)}")
    typer.echo(f"   Initial line count: {summary.initial_line_count}")
    typer.echo(f"   Final line count: {summary.final_line_count}")
    typer.secho(
        f"   Lines delta: {summary.lines_delta:+d}",
        fg=_delta_color(summary.lines_delta),
    )
    typer.secho(
        f"   Characters delta: {summary.chars_delta:+d}",
        fg=_delta_color(summary.chars_delta),
    )
    typer.echo(
        f"   Files: {len(summary.files_created)} created, "
        f"{len(summary.files_modified)} modified, "
        f"{len(summary.files_deleted)} deleted"
    )
    typer.echo(f"   Lines per hour: {summary.lines_per_hour:.1f}")
    if summary.warnings:
        typer.secho(
            f"   ⚠️  {summary.warnings} file(s) skipped while scanning (run with -v for details)",
            fg=typer.colors.YELLOW,
        )
