"""Tests for the Catalog Store.

Covers:
- Both accepted read shapes and the rejected ones
- load_catalog_or_empty for missing files
- Selection loading policy (explicit path vs default path fallback)
- save_catalog format, round-trip and temp-file cleanup
"""

import json

import pytest

from menu_kit_common import CatalogNotFoundError, InvalidCatalogFormatError
from menu_kit_contracts import Catalog, MenuItem
from menu_kit_storage import (
    SAMPLE_MENU,
    load_catalog,
    load_catalog_or_empty,
    load_selection_catalog,
    parse_catalog_document,
    sample_catalog,
    save_catalog,
)

pytestmark = pytest.mark.unit


def _write(path, document):
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class TestParseCatalogDocument:
    """Tests for the shape normalization step."""

    def test_legacy_array(self):
        catalog = parse_catalog_document([{"name": "soup", "processed": ["stock"]}])

        assert catalog.items == [MenuItem(name="soup", processed=["stock"])]

    def test_object_shape(self):
        catalog = parse_catalog_document({"items": [{"name": "soup"}]})

        assert catalog.items[0].name == "soup"
        assert catalog.items[0].processed == []

    @pytest.mark.parametrize(
        "document",
        [
            {"menu": []},
            {"items": "soup"},
            "soup",
            42,
            None,
        ],
    )
    def test_unrecognized_shapes(self, document):
        with pytest.raises(InvalidCatalogFormatError, match="Invalid data file format"):
            parse_catalog_document(document)

    def test_invalid_item_fields(self):
        """Test items that fail validation are reported as a format error."""
        with pytest.raises(InvalidCatalogFormatError):
            parse_catalog_document([{"processed": ["no name"]}])


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


class TestLoadCatalog:
    """Tests for load_catalog and load_catalog_or_empty."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogNotFoundError, match="Data file not found"):
            load_catalog(tmp_path / "menu.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "menu.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(InvalidCatalogFormatError):
            load_catalog(path)

    def test_or_empty_missing_file(self, tmp_path):
        catalog = load_catalog_or_empty(tmp_path / "menu.json")

        assert catalog == Catalog(items=[])

    def test_or_empty_still_rejects_bad_shape(self, tmp_path):
        path = _write(tmp_path / "menu.json", {"menu": []})

        with pytest.raises(InvalidCatalogFormatError):
            load_catalog_or_empty(path)


class TestLoadSelectionCatalog:
    """Tests for the selection-flow loading policy."""

    def test_explicit_path_loads(self, tmp_path):
        path = _write(tmp_path / "custom.json", {"items": [{"name": "soup", "processed": []}]})

        catalog = load_selection_catalog(path)

        assert [i.name for i in catalog.items] == ["soup"]

    def test_explicit_missing_path_fails(self, tmp_path):
        with pytest.raises(CatalogNotFoundError):
            load_selection_catalog(tmp_path / "missing.json")

    def test_explicit_invalid_path_fails(self, tmp_path):
        path = _write(tmp_path / "bad.json", {"menu": []})

        with pytest.raises(InvalidCatalogFormatError):
            load_selection_catalog(path)

    def test_default_path_used_when_present(self, tmp_path):
        default = _write(tmp_path / "menu.json", [{"name": "soup", "processed": ["stock"]}])

        catalog = load_selection_catalog(None, default_path=default)

        assert [i.name for i in catalog.items] == ["soup"]

    def test_default_path_missing_falls_back(self, tmp_path):
        catalog = load_selection_catalog(None, default_path=tmp_path / "menu.json")

        assert len(catalog.items) == 10
        assert catalog == sample_catalog()

    def test_default_path_invalid_falls_back(self, tmp_path):
        default = tmp_path / "menu.json"
        default.write_text("[oops", encoding="utf-8")

        catalog = load_selection_catalog(None, default_path=default)

        assert [i.name for i in catalog.items] == [name for name, _ in SAMPLE_MENU]

    def test_default_path_empty_catalog_is_not_replaced(self, tmp_path):
        """Test a valid but empty default file is used as-is."""
        default = _write(tmp_path / "menu.json", {"items": []})

        catalog = load_selection_catalog(None, default_path=default)

        assert catalog.items == []

    def test_sample_copies_are_independent(self):
        first = sample_catalog()
        first.items[0].processed.append("extra")

        assert "extra" not in sample_catalog().items[0].processed


# ---------------------------------------------------------------------------
# Saving
# ---------------------------------------------------------------------------


class TestSaveCatalog:
    """Tests for save_catalog."""

    def test_format(self, tmp_path):
        """Test two-space indentation, object shape and one trailing newline."""
        path = tmp_path / "menu.json"
        catalog = Catalog(items=[MenuItem(name="tacos", processed=["sliced jalapeño"])])

        save_catalog(path, catalog)

        text = path.read_text(encoding="utf-8")
        assert text == (
            "{\n"
            '  "items": [\n'
            "    {\n"
            '      "name": "tacos",\n'
            '      "processed": [\n'
            '        "sliced jalapeño"\n'
            "      ]\n"
            "    }\n"
            "  ]\n"
            "}\n"
        )

    def test_round_trip(self, tmp_path):
        path = tmp_path / "menu.json"
        catalog = sample_catalog()

        save_catalog(path, catalog)

        assert load_catalog(path) == catalog

    def test_legacy_file_rewritten_in_object_shape(self, tmp_path):
        path = _write(tmp_path / "menu.json", [{"name": "soup", "processed": ["stock"]}])

        save_catalog(path, load_catalog(path))

        document = json.loads(path.read_text(encoding="utf-8"))
        assert isinstance(document, dict)
        assert document == {"items": [{"name": "soup", "processed": ["stock"]}]}

    def test_extra_item_keys_survive(self, tmp_path):
        path = _write(tmp_path / "menu.json", [{"name": "soup", "processed": [], "price": 4}])

        save_catalog(path, load_catalog(path))

        assert json.loads(path.read_text(encoding="utf-8"))["items"][0]["price"] == 4

    def test_overwrites_and_leaves_no_temp_files(self, tmp_path):
        path = _write(tmp_path / "menu.json", {"items": []})

        save_catalog(path, sample_catalog())

        assert [p.name for p in tmp_path.iterdir()] == ["menu.json"]
        assert len(load_catalog(path).items) == 10
