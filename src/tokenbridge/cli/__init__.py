"""
TokenBridge CLI.

- tokens.py: detect, import, validate, stats
- export.py: export, preview
- values.py: contrast, lookup
- common.py: shared console, config and session helpers
"""

from __future__ import annotations

import platform
import sys
from pathlib import Path

import typer

from tokenbridge._version import get_version
from tokenbridge.config import CONFIG_FILE

from .common import CLIState, configure_logging, console
from .export import export_command, preview_command
from .tokens import detect_command, import_command, stats_command, validate_command
from .values import contrast_command, lookup_command


def version_callback(value: bool) -> None:
    if value:
        console.print(f"tokenbridge {get_version()}")
        console.print(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


app = typer.Typer(
    help="""TokenBridge - design token import, validation and export

  • Session: import, validate, stats
    → import stores tokens in .tokenbridge/session.json

  • Output: export, preview
    → formats: style-dictionary, w3c-dtcg, css, tailwind, typescript

  • Values: detect, contrast, lookup
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    config: Path = typer.Option(
        Path(CONFIG_FILE), "--config", "-c", help="Path to tokenbridge.toml"
    ),
) -> None:
    """TokenBridge CLI main callback for global options."""
    configure_logging(verbose)
    ctx.obj = CLIState(config_path=config, verbose=verbose)


app.command(name="detect")(detect_command)
app.command(name="import")(import_command)
app.command(name="validate")(validate_command)
app.command(name="stats")(stats_command)
app.command(name="export")(export_command)
app.command(name="preview")(preview_command)
app.command(name="contrast")(contrast_command)
app.command(name="lookup")(lookup_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = ["app", "main", "version_callback"]


if __name__ == "__main__":
    main(sys.argv[1:])
