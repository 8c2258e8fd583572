"""Catalog maintenance tool (``menu-utils``).

Without a subcommand an interactive menu offers search / add / exit.
The subcommands are the scriptable equivalents.

Usage:
    menu-utils
    menu-utils list-processed --query sliced
    menu-utils --data ./menu.json add-processed --item "caesar salad" truffle oil
"""

from pathlib import Path
from typing import Optional

import typer

from menu_kit_common import get_logger
from menu_kit_storage import DEFAULT_DATA_PATH

from menu_kit_cli._shared import get_maintenance_context, setup_logging
from menu_kit_cli.commands.interactive import run_interactive
from menu_kit_cli.commands.processed import add_processed_command, list_processed

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# Root Typer app
# ---------------------------------------------------------------------------

app = typer.Typer(
    name="menu-utils",
    help="Manage menu.json: add unique processed items or search distinct processed items.",
    add_completion=False,
)

app.command(name="list-processed")(list_processed)
app.command(name="search", help="Alias for list-processed.")(list_processed)
app.command(name="add-processed")(add_processed_command)


@app.callback(invoke_without_command=True)
def load(
    ctx: typer.Context,
    data: Optional[str] = typer.Option(
        None,
        "--data",
        "-d",
        help="Path to menu JSON (default: ./menu.json)",
    ),
):
    """Record the catalog path; the catalog is loaded by whichever command runs."""
    setup_logging()
    data_path = Path(data or DEFAULT_DATA_PATH)
    ctx.obj = data_path
    logger.debug("maintenance_started", path=str(data_path), command=ctx.invoked_subcommand)

    if ctx.invoked_subcommand is None:
        run_interactive(get_maintenance_context(ctx))


def main():
    """Entry point for ``menu-utils``."""
    app()


if __name__ == "__main__":
    main()
