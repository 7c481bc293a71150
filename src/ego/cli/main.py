"""
Top-level CLI commands: start, end, status, discard.
"""

from datetime import timedelta

import typer

from ego.config import DEFAULT_WORKERS, ensure_data_dir, get_session_file
from ego.errors import EgoError
from ego.line_counter import ScanPolicy
from ego.session import SessionManager, SessionStore


def configure_logging(verbose: bool = False):
    """Configure logging for the CLI."""
    from ego.logger import setup_logging

    log_level = "DEBUG" if verbose else "WARNING"
    setup_logging(level=log_level)


def build_manager(policy: ScanPolicy = None) -> SessionManager:
    """Wire a SessionManager to the per-user session record."""
    ensure_data_dir()
    return SessionManager(SessionStore(get_session_file()), policy=policy)


def fail(error: EgoError):
    """Report a user-facing error and exit non-zero."""
    typer.secho(f"❌ {error}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def register_commands(app: typer.Typer):
    """Register top-level commands onto the app."""
    from ego.cli.report import print_started, print_status, print_summary

    @app.command()
    def start(
        project_directory: str = typer.Argument(
            ..., metavar="PROJECT_DIRECTORY", help="Directory to track"
        ),
        skip_hidden: bool = typer.Option(
            False, "--skip-hidden", help="Ignore hidden files and directories"
        ),
        workers: int = typer.Option(
            DEFAULT_WORKERS, "--workers", min=1, help="Threads used to read files"
        ),
    ):
        """Start a coding session in PROJECT_DIRECTORY."""
        policy = ScanPolicy(include_hidden=not skip_hidden, workers=workers)
        try:
            record = build_manager(policy).begin_session(project_directory)
        except EgoError as e:
            fail(e)
        print_started(record, len(record.file_fingerprints))

    @app.command()
    def end(
        workers: int = typer.Option(
            DEFAULT_WORKERS, "--workers", min=1, help="Threads used to read files"
        ),
    ):
        """End the active session and print its stats."""
        try:
            summary = build_manager(ScanPolicy(workers=workers)).end_session()
        except EgoError as e:
            fail(e)
        print_summary(summary)

    @app.command()
    def status():
        """Show the active session, if any."""
        manager = build_manager()
        try:
            record = manager.status()
        except EgoError as e:
            fail(e)
        if record is None:
            typer.echo("No active session.")
            return
        elapsed = max(manager.clock() - record.start_time, timedelta(0))
        print_status(record, elapsed)

    @app.command()
    def discard():
        """Drop the active session without reporting it."""
        try:
            record = build_manager().discard_session()
        except EgoError as e:
            fail(e)
        if record is None:
            typer.echo("🗑️  Removed unreadable session record.")
        else:
            typer.echo(f"🗑️  Discarded session for {record.project_path}")
