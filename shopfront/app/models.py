from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    """A catalog entry. `id` is assigned by the store, never by callers."""

    id: int
    title: str
    image_url: str
    price: float
    description: str
