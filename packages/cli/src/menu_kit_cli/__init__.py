"""Menu Kit CLI - ``menu-cli`` (selection) and ``menu-utils`` (maintenance)."""
