"""
ego CLI - time and line-delta tracking for coding sessions.

This package splits CLI concerns into focused modules:
- main:   start, end, status, discard
- report: terminal rendering of a finished session
"""

import typer

from ego.cli.main import configure_logging, register_commands

app = typer.Typer(help="ego - track time and line delta for a coding session")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging (DEBUG level)"
    ),
):
    """
    ego - track time and line delta for a coding session.
    """
    configure_logging(verbose)


# Register top-level commands (start, end, status, discard)
register_commands(app)

if __name__ == "__main__":
    app()
