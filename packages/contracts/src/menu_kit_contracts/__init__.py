"""Menu Kit Contracts - Pure Pydantic schemas.

This package contains ONLY Pydantic schemas with no I/O.
Dependencies: pydantic only.
"""

from menu_kit_contracts.models import Catalog, MenuItem

__version__ = "0.1.0"

__all__ = [
    "Catalog",
    "MenuItem",
]
