"""Storage of products in the ``products`` collection."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from bson import ObjectId

from sateayam.categorymodel import CategoryStore, NotFoundError, parse_object_id
from sateayam.entities import Product

COLLECTION = "products"


class ProductStore:
    """Reads and writes products, filling in category names from the categories."""

    def __init__(self, database: Any, categories: CategoryStore) -> None:
        self._collection = database[COLLECTION]
        self._categories = categories

    def all(self) -> list[Product]:
        """Return every product with its current category name.

        Unreadable documents are skipped; a product whose category is gone keeps
        the name stored with it.
        """
        products = []
        for document in self._collection.find({}):
            try:
                product = Product.from_document(document)
            except (ValueError, TypeError):
                continue
            if product.category_id is not None:
                try:
                    category = self._categories.get(product.category_id)
                except NotFoundError:
                    pass
                else:
                    product = replace(product, category_name=category.name)
            products.append(product)
        return products

    def create(self, product: Product) -> ObjectId:
        """Insert a product and return its id."""
        result = self._collection.insert_one(product.to_document())
        return result.inserted_id

    def get(self, product_id: str) -> Product:
        """Return the product with its category name.

        Raises ValueError for a malformed id and NotFoundError when it is missing.
        The category name comes from the category alone and is empty without one.
        """
        object_id = parse_object_id(product_id)
        document = self._collection.find_one({"_id": object_id})
        if document is None:
            raise NotFoundError(f"product {product_id} not found")
        product = Product.from_document(document)
        category = (
            self._categories.detail(product.category_id)
            if product.category_id is not None
            else None
        )
        return replace(product, category_name=category.name if category else "")

    def update(self, product_id: str, update: Product) -> None:
        """Write the edited fields of a product; the image is kept when none is given."""
        object_id = parse_object_id(product_id)
        fields: dict[str, Any] = {
            "name": update.name,
            "category_id": update.category_id,
            "category_name": update.category_name,
            "stock": update.stock,
            "description": update.description,
            "price": update.price,
            "updated_at": update.updated_at,
        }
        if update.image_url:
            fields["gambar_url"] = update.image_url
        self._collection.update_one({"_id": object_id}, {"$set": fields})

    def delete(self, product_id: str) -> None:
        """Remove the product, raising ValueError for a malformed id."""
        object_id = parse_object_id(product_id)
        self._collection.delete_one({"_id": object_id})