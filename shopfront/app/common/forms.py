"""Turn raw form submissions into typed values.

Text fields are taken as submitted (missing ones become empty strings).
The price is the only field that has to convert cleanly; anything that
is not a number is rejected with a 400.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping

from shopfront.app.common.errors import abort_form


@dataclass(frozen=True)
class ProductForm:
    title: str
    image_url: str
    price: float
    description: str


def _text(form: Mapping[str, str], name: str) -> str:
    return (form.get(name) or "").strip()


def parse_price(raw: str | None) -> float:
    value = (raw or "").strip()
    if not value:
        abort_form("Price is required", field="price")
    try:
        price = float(value)
    except ValueError:
        abort_form(f"Price must be a number, got {value!r}", field="price")
    if not math.isfinite(price):
        abort_form(f"Price must be a number, got {value!r}", field="price")
    return price


def parse_product_form(form: Mapping[str, str]) -> ProductForm:
    return ProductForm(
        title=_text(form, "title"),
        image_url=_text(form, "imageUrl"),
        price=parse_price(form.get("price")),
        description=_text(form, "description"),
    )
