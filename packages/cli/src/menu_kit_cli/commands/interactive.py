"""Interactive menu for menu-utils (run when no subcommand is given).

Any cancelled prompt ends the process with exit code 0; changes made to
the in-memory catalog before that point are discarded.
"""

import typer

from menu_kit_contracts import MenuItem
from menu_kit_storage import (
    add_processed,
    distinct_processed,
    exists_globally,
    item_names,
    items_containing,
    save_catalog,
)

from menu_kit_cli._shared import MaintenanceContext, fail, or_exit
from menu_kit_cli.prompts import ask_text, choose_many, choose_one, confirm

CREATE_ITEM_LABEL = "⟨Create new menu item⟩"

ACTIONS = [
    ("search", "Search/select processed ingredients"),
    ("add", "Add a processed ingredient to a menu item"),
    ("exit", "Exit"),
]


def run_interactive(state: MaintenanceContext) -> None:
    index = or_exit(
        choose_one([label for _, label in ACTIONS], "What would you like to do?", default=0)
    )
    action = ACTIONS[index][0]
    if action == "search":
        interactive_search(state)
    elif action == "add":
        interactive_add(state)


def interactive_search(state: MaintenanceContext) -> None:
    """Pick processed ingredients and optionally show where they are used."""
    distinct = distinct_processed(state.catalog)
    if not distinct:
        typer.echo("No processed ingredients found.")
        return

    indexes = or_exit(choose_many(distinct, "Search/select processed ingredients"))
    picked = [distinct[i] for i in indexes]
    if not picked:
        typer.echo("(none selected)")
        return

    typer.echo()
    typer.echo("Selected processed ingredients:")
    for ingredient in picked:
        typer.echo(f"- {ingredient}")

    show_where = or_exit(confirm("Show which menu items contain these?", default=False))
    if show_where:
        typer.echo()
        for ingredient in picked:
            names = items_containing(state.catalog, ingredient)
            if not names:
                continue
            typer.echo(f"{ingredient}:")
            for name in names:
                typer.echo(f"  - {name}")
    typer.echo()


def choose_target_item(state: MaintenanceContext) -> MenuItem:
    """Pick an existing item or create one; an existing name is reused."""
    names = item_names(state.catalog)
    index = or_exit(
        choose_one([CREATE_ITEM_LABEL, *names], "Select a menu item (or choose to create)")
    )

    if index == 0:
        new_name = or_exit(ask_text("Enter new menu item name"))
        existing = state.catalog.find_item(new_name)
        if existing is not None:
            return existing
        return state.catalog.add_item(new_name)

    item = state.catalog.find_item(names[index - 1])
    if item is None:
        fail(f'Menu item not found: "{names[index - 1]}".')
    return item


def interactive_add(state: MaintenanceContext) -> None:
    """Add one processed ingredient to a chosen item, then save."""
    item = choose_target_item(state)
    text = or_exit(ask_text(f'Add processed ingredient to "{item.name}"'))

    if exists_globally(state.catalog, text):
        proceed = or_exit(
            confirm(
                "This processed ingredient already exists elsewhere. Add to this item anyway?",
                default=False,
            )
        )
        if not proceed:
            typer.echo("No changes made.")
            return

    outcome = add_processed(state.catalog, item.name, text, force=True)
    if not outcome.added:
        typer.echo("Already present in this item. No changes made.")
        return

    try:
        save_catalog(state.data_path, state.catalog)
    except OSError as e:
        fail(f"Error: {e}")
    typer.echo(f'Added "{outcome.ingredient}" to "{outcome.item.name}".')
