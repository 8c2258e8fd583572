"""Shared helpers for the menu-kit commands.

Centralises the per-run maintenance context and the error-to-exit-code
translation so every command reports failures the same way.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn, Optional, TypeVar

import typer
from pydantic import ValidationError

from menu_kit_common import CatalogError, configure_logging, get_settings
from menu_kit_contracts import Catalog
from menu_kit_storage import load_catalog_or_empty

T = TypeVar("T")


@dataclass
class MaintenanceContext:
    """State for one ``menu-utils`` run.

    ``catalog`` is the single mutable catalog for the run; commands mutate
    it in place and save it back to ``data_path``.
    """

    data_path: Path
    catalog: Catalog


def setup_logging() -> None:
    """Configure logging from settings at the start of a command.

    A bad ``MENU_KIT_*`` value ends the command with one error line.
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        error = e.errors()[0]
        name = ".".join(str(part) for part in error["loc"])
        fail(f"Error: invalid setting {name}: {error['msg']}")
    configure_logging(settings)


def fail(message: str, code: int = 1) -> NoReturn:
    """Print ``message`` to stderr and exit with ``code``."""
    typer.echo(message, err=True)
    raise typer.Exit(code)


def or_exit(value: Optional[T]) -> T:
    """Unwrap a prompt answer; a cancelled prompt ends the process with 0."""
    if value is None:
        raise typer.Exit(0)
    return value


def load_maintenance_context(data_path: Path) -> MaintenanceContext:
    """Load the catalog for a ``menu-utils`` run; a bad file ends the run."""
    try:
        catalog = load_catalog_or_empty(data_path)
    except (CatalogError, OSError) as e:
        fail(f"Error: {e}")
    return MaintenanceContext(data_path=data_path, catalog=catalog)


def get_maintenance_context(ctx: typer.Context) -> MaintenanceContext:
    """Return the run's context, loading the catalog on first use.

    The root callback only records the path, so ``--help`` on a
    subcommand never touches the catalog file.
    """
    state = ctx.obj
    if isinstance(state, MaintenanceContext):
        return state
    if not isinstance(state, Path):
        fail("Internal error: catalog path was not set.")
    ctx.obj = load_maintenance_context(state)
    return ctx.obj
