"""
Shared CLI helpers: consoles, logging setup, config and session access.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console

from tokenbridge.config import CONFIG_FILE, ProjectConfig, load_config
from tokenbridge.core.errors import TokenBridgeError
from tokenbridge.core.importers import import_tokens
from tokenbridge.core.ir import ImportOptions, TokenCollection
from tokenbridge.core.mapping import use_token_map
from tokenbridge.store import TokenStore

console = Console()
err_console = Console(stderr=True)


@dataclass
class CLIState:
    config_path: Path = Path(CONFIG_FILE)
    verbose: bool = False


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def fail(message: object) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(code=1)


def get_state(ctx: typer.Context) -> CLIState:
    if isinstance(ctx.obj, CLIState):
        return ctx.obj
    return CLIState()


def get_config(ctx: typer.Context) -> ProjectConfig:
    try:
        config = load_config(get_state(ctx).config_path)
        if config.mapping_path is not None:
            use_token_map(config.mapping_path)
        return config
    except TokenBridgeError as e:
        fail(e)


def load_store(config: ProjectConfig) -> TokenStore:
    try:
        return TokenStore.load(config.store_path)
    except TokenBridgeError as e:
        fail(e)


def read_source(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        fail(f"Cannot read {path}: {e}")


def resolve_collection(config: ProjectConfig, file: Path | None) -> TokenCollection:
    """Tokens from ``file`` when given, else the saved session's collection."""
    if file is not None:
        try:
            return import_tokens(read_source(file), ImportOptions(file_name=file.name))
        except TokenBridgeError as e:
            fail(e)

    collection = load_store(config).collection
    if collection is None:
        fail("No tokens imported. Run 'tokenbridge import <file>' first.")
    return collection
