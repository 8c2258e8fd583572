"""Catalog Store - load, validate and persist the JSON menu catalog.

Provides:
- Tagged-union parsing of the two accepted file shapes
- Strict and lenient loaders (missing file is an error / an empty catalog)
- Selection-flow loading policy with the sample-catalog soft fallback
- Whole-file rewrite via temp file + rename

Each process owns the file for its run; there is no locking.
"""

import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError

from menu_kit_common import (
    CatalogError,
    CatalogNotFoundError,
    InvalidCatalogFormatError,
    get_logger,
)
from menu_kit_contracts import Catalog

from menu_kit_storage.sample import sample_catalog

logger = get_logger(__name__)

DEFAULT_DATA_PATH = "./menu.json"

FORMAT_HINT = "Expected { items: MenuItem[] } or MenuItem[]"

PathLike = Union[str, Path]


def parse_catalog_document(document: Any) -> Catalog:
    """Normalize a decoded JSON document into a canonical Catalog.

    Accepts a bare list of items (legacy) or an object with an ``items``
    list. Anything else, including items that fail validation, raises
    InvalidCatalogFormatError.
    """
    if isinstance(document, list):
        items = document
    elif isinstance(document, dict) and isinstance(document.get("items"), list):
        items = document["items"]
    else:
        raise InvalidCatalogFormatError(f"Invalid data file format. {FORMAT_HINT}")

    try:
        return Catalog(items=items)
    except ValidationError as e:
        raise InvalidCatalogFormatError(
            f"Invalid data file format. {FORMAT_HINT} ({e.error_count()} invalid field(s))"
        ) from e


def load_catalog(path: PathLike) -> Catalog:
    """Load a catalog file.

    Args:
        path: Catalog file location

    Returns:
        Catalog in canonical shape

    Raises:
        CatalogNotFoundError: If the file does not exist
        InvalidCatalogFormatError: If the file is not valid JSON or not a catalog
    """
    catalog_path = Path(path)
    if not catalog_path.exists():
        raise CatalogNotFoundError(f"Data file not found: {catalog_path}")

    try:
        document = json.loads(catalog_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidCatalogFormatError(f"Invalid JSON in {catalog_path}: {e}") from e

    catalog = parse_catalog_document(document)
    logger.debug("catalog_loaded", path=str(catalog_path), items=len(catalog.items))
    return catalog


def load_catalog_or_empty(path: PathLike) -> Catalog:
    """Load a catalog, treating a missing file as an empty catalog.

    Malformed content still raises InvalidCatalogFormatError.
    """
    try:
        return load_catalog(path)
    except CatalogNotFoundError:
        logger.debug("catalog_missing_using_empty", path=str(path))
        return Catalog(items=[])


def load_selection_catalog(
    path: Optional[PathLike] = None,
    default_path: PathLike = DEFAULT_DATA_PATH,
) -> Catalog:
    """Load the catalog for the selection flow.

    An explicit ``path`` must load cleanly; errors propagate. Without one,
    ``default_path`` is tried and any load error falls back to the sample
    catalog.
    """
    if path:
        return load_catalog(path)

    try:
        return load_catalog(default_path)
    except (CatalogError, OSError) as e:
        logger.debug("sample_catalog_fallback", path=str(default_path), reason=str(e))
        return sample_catalog()


def dump_catalog(catalog: Catalog) -> str:
    """Serialize in the canonical object shape with a trailing newline."""
    return json.dumps(catalog.model_dump(), indent=2, ensure_ascii=False) + "\n"


def save_catalog(path: PathLike, catalog: Catalog) -> None:
    """Rewrite the catalog file in full.

    The data is written to a temporary file next to the target and renamed
    over it, so readers see either the old or the new file.
    """
    catalog_path = Path(path)
    directory = catalog_path.parent
    payload = dump_catalog(catalog)

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{catalog_path.name}.", suffix=".tmp", dir=str(directory)
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(payload)
        if catalog_path.exists():
            shutil.copymode(catalog_path, tmp_name)
        os.replace(tmp_name, catalog_path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise

    logger.info("catalog_saved", path=str(catalog_path), items=len(catalog.items))
