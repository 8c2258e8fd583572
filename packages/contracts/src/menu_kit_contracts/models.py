"""Pydantic models for the menu catalog.

The catalog file may hold extra keys on an item; they are kept so a
rewrite does not drop data the tools do not understand.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MenuItem(BaseModel):
    """A dish and the processed ingredients it requires."""

    model_config = ConfigDict(extra="allow")

    name: str = Field(description="Item name, matched case-insensitively")
    processed: list[str] = Field(
        default_factory=list,
        description="Processed ingredient labels in insertion order",
    )

    @field_validator("processed", mode="before")
    @classmethod
    def _null_processed_is_empty(cls, value):
        return [] if value is None else value

    def has_processed(self, ingredient: str) -> bool:
        """Case-insensitive membership test against this item's labels."""
        target = ingredient.lower()
        return any(p.lower() == target for p in self.processed)


class Catalog(BaseModel):
    """Canonical in-memory catalog: always the ``{"items": [...]}`` shape."""

    items: list[MenuItem] = Field(default_factory=list)

    def find_item(self, name: str) -> Optional[MenuItem]:
        """Return the first item whose name matches case-insensitively.

        Names are compared as stored; surrounding whitespace is significant.
        """
        target = name.lower()
        for item in self.items:
            if item.name.lower() == target:
                return item
        return None

    def add_item(self, name: str) -> MenuItem:
        """Append a new item with no processed ingredients and return it."""
        item = MenuItem(name=name, processed=[])
        self.items.append(item)
        return item
