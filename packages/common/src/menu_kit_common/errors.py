"""Custom error types for menu-kit.

All errors follow the "fail fast" principle with explicit messages.
CLI commands translate them into a single stderr line and an exit code.
"""


class MenuKitError(Exception):
    """Base exception for all menu-kit errors."""

    pass


class CatalogError(MenuKitError):
    """Error reading or writing the catalog file."""

    pass


class CatalogNotFoundError(CatalogError):
    """Catalog path does not exist."""

    pass


class InvalidCatalogFormatError(CatalogError):
    """Catalog file is not valid JSON or not a recognized catalog shape.

    Accepted shapes are a bare array of menu items or an object with an
    ``items`` array.
    """

    pass


class MenuValidationError(MenuKitError):
    """Input rejected before any change is made."""

    pass


class EmptyCatalogError(MenuValidationError):
    """Catalog has no menu items to select from."""

    pass


class IngredientValidationError(MenuValidationError):
    """Ingredient text is empty after trimming."""

    pass


class ItemNotFoundError(MenuValidationError):
    """Menu item lookup failed and creation was not requested."""

    pass


class SelectionLimitError(MenuValidationError):
    """More menu items selected than the configured maximum."""

    pass


class UniquenessConflictError(MenuKitError):
    """Processed ingredient already exists elsewhere in the catalog.

    Fatal for scripted commands unless ``--force`` is given; the interactive
    flow asks for confirmation instead.
    """

    def __init__(self, ingredient: str):
        self.ingredient = ingredient
        super().__init__(
            f'Ingredient already exists somewhere in the menu: "{ingredient}". '
            "Use --force to bypass."
        )
