"""Scriptable processed-ingredient commands for menu-utils.

Commands:
    list-processed   List distinct processed ingredients (alias: search)
    add-processed    Add a processed ingredient to a menu item
"""

from typing import List, Optional

import typer

from menu_kit_common import MenuValidationError, UniquenessConflictError
from menu_kit_storage import (
    add_processed,
    distinct_processed,
    filter_by_query,
    save_catalog,
)

from menu_kit_cli._shared import fail, get_maintenance_context


def list_processed(
    ctx: typer.Context,
    query: Optional[str] = typer.Option(
        None,
        "--query",
        "-q",
        help="Filter processed ingredients by case-insensitive substring",
    ),
):
    """List distinct processed ingredients (optionally filter by query).

    Examples:

        menu-utils list-processed

        menu-utils search --query sliced
    """
    state = get_maintenance_context(ctx)
    matches = filter_by_query(distinct_processed(state.catalog), query)

    if not matches:
        typer.echo("(none)")
        return

    for ingredient in matches:
        typer.echo(ingredient)


def add_processed_command(
    ctx: typer.Context,
    ingredient_parts: List[str] = typer.Argument(..., help="Processed ingredient text"),
    item: str = typer.Option(
        ...,
        "--item",
        "-i",
        help="Menu item name to modify (will be created with --create-item)",
    ),
    create_item: bool = typer.Option(
        False,
        "--create-item",
        help="Create menu item if it does not exist",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        help="Allow adding if ingredient exists elsewhere",
    ),
):
    """Add a processed ingredient to a menu item, ensuring global uniqueness unless --force.

    Examples:

        menu-utils add-processed --item "caesar salad" truffle oil

        menu-utils add-processed --item "new dish" --create-item "special sauce"
    """
    state = get_maintenance_context(ctx)
    ingredient = " ".join(ingredient_parts).strip()

    try:
        outcome = add_processed(
            state.catalog,
            item,
            ingredient,
            create_item=create_item,
            force=force,
        )
    except (MenuValidationError, UniquenessConflictError) as e:
        fail(str(e))

    if not outcome.added:
        typer.echo(
            f'Ingredient already present in "{outcome.item.name}": "{outcome.ingredient}". '
            "No changes made."
        )
        return

    try:
        save_catalog(state.data_path, state.catalog)
    except OSError as e:
        fail(f"Error: {e}")

    typer.echo(f'Added processed ingredient to "{outcome.item.name}": "{outcome.ingredient}"')
