"""Ingredient set operations over a catalog.

Pure functions except ``add_processed``, which mutates the catalog it is
given and leaves persistence to the caller.
"""

import unicodedata
from dataclasses import dataclass
from typing import Iterable, Optional

from menu_kit_common import (
    IngredientValidationError,
    ItemNotFoundError,
    UniquenessConflictError,
    get_logger,
)
from menu_kit_contracts import Catalog, MenuItem

logger = get_logger(__name__)


def collation_key(value: str) -> tuple[str, str, str, str]:
    """Sort key approximating locale-aware comparison.

    Primary: accents stripped and case folded. Secondary: accents kept.
    Tertiary: lower case before upper case. The raw string breaks any
    remaining tie so the order is total.
    """
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), value.casefold(), value.swapcase(), value


def unique_sorted(values: Iterable[str]) -> list[str]:
    """Drop exact duplicates and sort with ``collation_key``.

    Examples:
        >>> unique_sorted(["b", "a", "a", "c"])
        ['a', 'b', 'c']
    """
    return sorted(set(values), key=collation_key)


def distinct_processed(catalog: Catalog) -> list[str]:
    """All non-empty processed ingredients in the catalog, deduplicated and sorted."""
    return unique_sorted(p for item in catalog.items for p in item.processed if p)


def item_names(catalog: Catalog) -> list[str]:
    return unique_sorted(item.name for item in catalog.items)


def processed_for_items(items: Iterable[MenuItem]) -> list[str]:
    """Unique processed ingredients required by a selection of items."""
    return unique_sorted(p for item in items for p in item.processed)


def items_containing(catalog: Catalog, ingredient: str) -> list[str]:
    """Names of items listing ``ingredient`` (case-insensitive), in catalog order."""
    return [item.name for item in catalog.items if item.has_processed(ingredient)]


def filter_by_query(values: list[str], query: Optional[str]) -> list[str]:
    """Case-insensitive substring filter; an empty query keeps everything."""
    if not query:
        return list(values)
    needle = query.lower()
    return [v for v in values if needle in v.lower()]


def exists_globally(catalog: Catalog, ingredient: str) -> bool:
    target = ingredient.lower()
    return any(p.lower() == target for p in distinct_processed(catalog))


def exists_in_item(item: MenuItem, ingredient: str) -> bool:
    return item.has_processed(ingredient)


@dataclass
class AddOutcome:
    """Result of ``add_processed``.

    Attributes:
        item: The item the ingredient was (or would have been) added to
        ingredient: Trimmed ingredient text
        added: False when the item already listed the ingredient
        created_item: True when the item was created for this call
    """

    item: MenuItem
    ingredient: str
    added: bool
    created_item: bool = False


def add_processed(
    catalog: Catalog,
    item_name: str,
    ingredient: str,
    create_item: bool = False,
    force: bool = False,
) -> AddOutcome:
    """Append a processed ingredient to an item, enforcing uniqueness.

    Checks run in order: empty text, global uniqueness (skipped with
    ``force``), item lookup (creating it with ``create_item``), then the
    per-item duplicate check, which is a no-op rather than an error.

    Args:
        catalog: Catalog to mutate in place
        item_name: Target item, matched case-insensitively
        ingredient: Raw ingredient text; trimmed before use
        create_item: Create the item when it does not exist
        force: Allow an ingredient already listed under another item

    Returns:
        AddOutcome describing what happened

    Raises:
        IngredientValidationError: Ingredient is empty after trimming
        UniquenessConflictError: Ingredient exists elsewhere and not forced
        ItemNotFoundError: Item missing and ``create_item`` not set
    """
    text = ingredient.strip()
    if not text:
        raise IngredientValidationError("Ingredient cannot be empty.")

    if not force and exists_globally(catalog, text):
        raise UniquenessConflictError(text)

    created = False
    item = catalog.find_item(item_name)
    if item is None:
        if not create_item:
            raise ItemNotFoundError(
                f'Menu item not found: "{item_name}". Use --create-item to create it.'
            )
        item = catalog.add_item(item_name)
        created = True
        logger.info("menu_item_created", item=item.name)

    if exists_in_item(item, text):
        return AddOutcome(item=item, ingredient=text, added=False, created_item=created)

    item.processed.append(text)
    logger.info("ingredient_added", item=item.name, ingredient=text, forced=force)
    return AddOutcome(item=item, ingredient=text, added=True, created_item=created)
