"""Records stored in the shop's collections."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from bson import ObjectId

_MISSING = object()


def _field(document: Mapping[str, Any], key: str, kind: type, default: Any) -> Any:
    value = document.get(key, _MISSING)
    if value is _MISSING or value is None:
        return default
    if kind is int and isinstance(value, bool):
        raise ValueError(f"field {key!r} must be an integer, not a boolean")
    if not isinstance(value, kind):
        raise ValueError(
            f"field {key!r} must be {kind.__name__}, not {type(value).__name__}"
        )
    return value


@dataclass
class Category:
    """A product category."""

    name: str = ""
    id: ObjectId | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_document(self) -> dict[str, Any]:
        """Return the category as a MongoDB document; ``_id`` is left out when unset."""
        document: dict[str, Any] = {}
        if self.id is not None:
            document["_id"] = self.id
        document["name"] = self.name
        document["created_at"] = self.created_at
        document["updated_at"] = self.updated_at
        return document

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> Category:
        """Build a category from a document, raising ValueError on mistyped fields."""
        return cls(
            id=_field(document, "_id", ObjectId, None),
            name=_field(document, "name", str, ""),
            created_at=_field(document, "created_at", datetime, None),
            updated_at=_field(document, "updated_at", datetime, None),
        )


@dataclass
class Product:
    """A product offered in the shop."""

    name: str = ""
    category_id: ObjectId | None = None
    category_name: str = ""
    stock: int = 0
    description: str = ""
    image_url: str = ""
    price: int = 0
    id: ObjectId | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_document(self) -> dict[str, Any]:
        """Return the product as a MongoDB document.

        ``_id`` and ``category_name`` are left out when empty.
        """
        document: dict[str, Any] = {}
        if self.id is not None:
            document["_id"] = self.id
        document["name"] = self.name
        document["category_id"] = self.category_id
        if self.category_name:
            document["category_name"] = self.category_name
        document["stock"] = self.stock
        document["description"] = self.description
        document["gambar_url"] = self.image_url
        document["harga"] = self.price
        document["created_at"] = self.created_at
        document["updated_at"] = self.updated_at
        return document

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> Product:
        """Build a product from a document, raising ValueError on mistyped fields."""
        return cls(
            id=_field(document, "_id", ObjectId, None),
            name=_field(document, "name", str, ""),
            category_id=_field(document, "category_id", ObjectId, None),
            category_name=_field(document, "category_name", str, ""),
            stock=_field(document, "stock", int, 0),
            description=_field(document, "description", str, ""),
            image_url=_field(document, "gambar_url", str, ""),
            price=_field(document, "harga", int, 0),
            created_at=_field(document, "created_at", datetime, None),
            updated_at=_field(document, "updated_at", datetime, None),
        )