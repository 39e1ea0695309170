"""Storage of categories in the ``categories`` collection."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

from bson import ObjectId

from sateayam.entities import Category

COLLECTION = "categories"


class NotFoundError(LookupError):
    """Raised when a requested document does not exist."""


def parse_object_id(value: str) -> ObjectId:
    """Parse a 24-digit hexadecimal identifier, raising ValueError if it is not one."""
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise ValueError(f"invalid object id: {value!r}")
    return ObjectId(value)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class CategoryStore:
    """Reads and writes categories."""

    def __init__(self, database: Any) -> None:
        self._collection = database[COLLECTION]

    def all(self) -> list[Category]:
        """Return every category, skipping documents that cannot be read."""
        categories = []
        for document in self._collection.find({}):
            try:
                categories.append(Category.from_document(document))
            except (ValueError, TypeError):
                continue
        return categories

    def create(self, category: Category) -> ObjectId:
        """Insert a category, stamping both timestamps, and return its id."""
        now = _now()
        stamped = replace(category, created_at=now, updated_at=now)
        result = self._collection.insert_one(stamped.to_document())
        return result.inserted_id

    def detail(self, category_id: ObjectId) -> Category | None:
        """Return the category, or None when it is missing or unreadable."""
        document = self._collection.find_one({"_id": category_id})
        if document is None:
            return None
        try:
            return Category.from_document(document)
        except (ValueError, TypeError):
            return None

    def get(self, category_id: ObjectId) -> Category:
        """Return the category, raising NotFoundError when it is missing."""
        document = self._collection.find_one({"_id": category_id})
        if document is None:
            raise NotFoundError(f"category {category_id} not found")
        return Category.from_document(document)

    def update(self, category_id: ObjectId, category: Category) -> None:
        """Set the category's name and refresh its update time."""
        self._collection.update_one(
            {"_id": category_id},
            {"$set": {"name": category.name, "updated_at": _now()}},
        )

    def delete(self, category_id: ObjectId) -> None:
        """Remove the category."""
        self._collection.delete_one({"_id": category_id})