"""In-memory catalog store.

One instance lives for the lifetime of the app and is handed to the
handlers through the app's extensions registry. Products are only ever
appended; there is no update or delete and nothing survives a restart.
"""

from __future__ import annotations

import itertools
import logging
from typing import List, Tuple

from shopfront.app.models import Product

logger = logging.getLogger(__name__)


class CatalogStore:
    def __init__(self) -> None:
        self._products: List[Product] = []
        self._ids = itertools.count(1)

    def add_product(self, title: str, image_url: str, price: float, description: str) -> Product:
        """Append a product with a fresh identifier and return it.

        Values are stored as given: an empty title or a negative price is
        not rejected here.
        """
        product = Product(
            id=next(self._ids),
            title=title,
            image_url=image_url,
            price=price,
            description=description,
        )
        self._products.append(product)
        logger.info("Added product %s (%r)", product.id, product.title)
        return product

    def list_products(self) -> Tuple[Product, ...]:
        """All products in insertion order, as a snapshot."""
        return tuple(self._products)

    def __len__(self) -> int:
        return len(self._products)
