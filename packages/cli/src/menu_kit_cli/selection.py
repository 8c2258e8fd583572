"""Selection tool (``menu-cli``).

Pick up to N menu items, confirm, and print the unique processed
ingredients they require. The catalog is never modified.

Usage:
    menu-cli
    menu-cli --max 3 --data ./menu.json
"""

import math
from typing import Optional

import typer

from menu_kit_common import (
    CatalogError,
    EmptyCatalogError,
    MenuValidationError,
    SelectionLimitError,
    get_logger,
)
from menu_kit_contracts import Catalog
from menu_kit_storage import DEFAULT_DATA_PATH, load_selection_catalog, processed_for_items

from menu_kit_cli._shared import fail, or_exit, setup_logging
from menu_kit_cli.prompts import choose_many, confirm

logger = get_logger(__name__)

DEFAULT_MAX_ITEMS = 8

app = typer.Typer(
    name="menu-cli",
    help="Select up to N menu items with search, then print unique processed ingredients.",
    add_completion=False,
)


def parse_max(raw: Optional[str], fallback: int = DEFAULT_MAX_ITEMS) -> int:
    """Interpret ``--max``.

    Non-numeric, non-finite and non-positive values give ``fallback``.
    Fractions are floored, which admits the same selection sizes.
    """
    if raw is None:
        return fallback
    try:
        value = float(raw)
    except ValueError:
        return fallback
    if not math.isfinite(value) or value <= 0:
        return fallback
    return int(math.floor(value))


def require_items(catalog: Catalog) -> None:
    if not catalog.items:
        raise EmptyCatalogError("No menu items available.")


def check_selection_limit(selected: list[int], max_count: int) -> None:
    if len(selected) > max_count:
        raise SelectionLimitError(f"Please select at most {max_count} items.")


def confirmation_message(names: list[str]) -> str:
    if not names:
        return "No items selected. Proceed?"
    return f"Confirm {len(names)} item(s): {', '.join(names)}?"


def print_report(ingredients: list[str]) -> None:
    typer.echo()
    typer.echo("Unique processed ingredients:")
    if not ingredients:
        typer.echo("(none)")
    else:
        for ingredient in ingredients:
            typer.echo(f"- {ingredient}")
    typer.echo()


@app.command()
def select(
    max_items: Optional[str] = typer.Option(
        None,
        "--max",
        "-m",
        help="Maximum number of items to select (default: 8)",
    ),
    data: Optional[str] = typer.Option(
        None,
        "--data",
        "-d",
        help="Path to JSON file with menu items (MenuItem[] or { items: MenuItem[] })",
    ),
):
    """Select menu items and list the processed ingredients they need.

    Without --data, ./menu.json is used when present and valid, otherwise a
    built-in sample menu.

    Examples:

        menu-cli --max 3

        menu-cli --data ./menu.json
    """
    setup_logging()
    max_count = parse_max(max_items)

    try:
        catalog = load_selection_catalog(data, default_path=DEFAULT_DATA_PATH)
    except (CatalogError, OSError) as e:
        fail(f'Failed to load data from "{data}": {e}')

    try:
        require_items(catalog)
        names = [item.name for item in catalog.items]
        selected = or_exit(
            choose_many(names, f"Select up to {max_count} menu items", max_count=max_count)
        )
        check_selection_limit(selected, max_count)
    except MenuValidationError as e:
        fail(str(e))

    proceed = or_exit(confirm(confirmation_message([names[i] for i in selected]), default=True))
    if not proceed:
        typer.echo("Selection cancelled.")
        raise typer.Exit(0)

    chosen = [catalog.items[i] for i in selected]
    logger.debug("selection_confirmed", items=[item.name for item in chosen])
    print_report(processed_for_items(chosen))


def main():
    """Entry point for ``menu-cli``."""
    app()


if __name__ == "__main__":
    main()
