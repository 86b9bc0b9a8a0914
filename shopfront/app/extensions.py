from __future__ import annotations

from flask import Flask, current_app

from shopfront.app.store import CatalogStore

CATALOG_KEY = "catalog_store"


def init_catalog(app: Flask, store: CatalogStore | None = None) -> CatalogStore:
    """Attach a catalog store to `app` (a new, empty one unless given)."""
    store = store if store is not None else CatalogStore()
    app.extensions[CATALOG_KEY] = store
    return store


def get_catalog() -> CatalogStore:
    return current_app.extensions[CATALOG_KEY]
