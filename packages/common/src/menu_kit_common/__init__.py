"""Menu Kit Common - errors, settings and logging shared by every package.

Dependencies: pydantic-settings, structlog.
"""

from menu_kit_common.config import Settings, get_settings
from menu_kit_common.errors import (
    CatalogError,
    CatalogNotFoundError,
    EmptyCatalogError,
    IngredientValidationError,
    InvalidCatalogFormatError,
    ItemNotFoundError,
    MenuKitError,
    MenuValidationError,
    SelectionLimitError,
    UniquenessConflictError,
)
from menu_kit_common.logging_config import configure_logging, get_logger

__all__ = [
    # Errors
    "MenuKitError",
    "CatalogError",
    "CatalogNotFoundError",
    "InvalidCatalogFormatError",
    "MenuValidationError",
    "EmptyCatalogError",
    "IngredientValidationError",
    "ItemNotFoundError",
    "SelectionLimitError",
    "UniquenessConflictError",
    # Settings
    "Settings",
    "get_settings",
    # Logging
    "configure_logging",
    "get_logger",
]
