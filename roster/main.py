from __future__ import annotations

import sys
from typing import List, Optional

import typer

from roster.cloning import CloneMode
from roster.config import get_settings
from roster.demo import run_demo
from roster.reporter import print_result
from roster.utils.logging import configure_logging

app = typer.Typer(help="Employee roster prototype CLI.")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} "
        f"json_logs={settings.log_json} | clone_mode={settings.clone_mode.value}"
    )


@app.command()
def demo(
    mode: Optional[CloneMode] = typer.Option(
        None,
        "--mode",
        "-m",
        case_sensitive=False,
        help="Duplication mode (default from settings).",
    ),
    add: Optional[List[str]] = typer.Option(
        None,
        "--add",
        "-a",
        help="Name to append through the duplicate (repeatable).",
    ),
    remove: Optional[List[str]] = typer.Option(
        None,
        "--remove",
        "-r",
        help="Name to remove through the duplicate (repeatable).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
) -> None:
    """
    Load the roster, clone it, mutate the clone, and show both holders.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    result = run_demo(mode=mode or settings.clone_mode, add=add or (), remove=remove or ())
    if as_json:
        typer.echo(result.model_dump_json(indent=2))
    else:
        print_result(result)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
