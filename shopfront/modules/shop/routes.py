from __future__ import annotations

from flask import Blueprint, render_template

from shopfront.app.extensions import get_catalog

bp = Blueprint("shop", __name__)


@bp.get("/")
def show_shop():
    """GET / - Render the full catalog for browsing."""
    products = get_catalog().list_products()
    # Computed here for the template; the store knows nothing about views.
    return render_template(
        "shop.html",
        products=products,
        page_title="Shop",
        path="/",
        has_products=len(products) > 0,
    )
