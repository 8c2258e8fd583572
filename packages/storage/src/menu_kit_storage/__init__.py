"""Menu Kit Storage - catalog file access and ingredient set operations.

This package provides:
- Catalog Store (load / load-or-empty / selection loading policy / save)
- Ingredient Set Operations (dedup + collation sort, filters, reverse lookup)
- The built-in sample catalog

Exclusive file ownership - no other package reads or writes the catalog.
"""

from menu_kit_storage.catalog_store import (
    DEFAULT_DATA_PATH,
    dump_catalog,
    load_catalog,
    load_catalog_or_empty,
    load_selection_catalog,
    parse_catalog_document,
    save_catalog,
)
from menu_kit_storage.ingredients import (
    AddOutcome,
    add_processed,
    collation_key,
    distinct_processed,
    exists_globally,
    exists_in_item,
    filter_by_query,
    item_names,
    items_containing,
    processed_for_items,
    unique_sorted,
)
from menu_kit_storage.sample import SAMPLE_MENU, sample_catalog

__all__ = [
    # Catalog Store
    "DEFAULT_DATA_PATH",
    "dump_catalog",
    "load_catalog",
    "load_catalog_or_empty",
    "load_selection_catalog",
    "parse_catalog_document",
    "save_catalog",
    # Ingredient operations
    "AddOutcome",
    "add_processed",
    "collation_key",
    "distinct_processed",
    "exists_globally",
    "exists_in_item",
    "filter_by_query",
    "item_names",
    "items_containing",
    "processed_for_items",
    "unique_sorted",
    # Sample data
    "SAMPLE_MENU",
    "sample_catalog",
]
