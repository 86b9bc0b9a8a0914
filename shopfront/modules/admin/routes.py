from __future__ import annotations

from flask import Blueprint, current_app, redirect, render_template, request, url_for

from shopfront.app.common.forms import parse_product_form
from shopfront.app.extensions import get_catalog

bp = Blueprint("admin", __name__)


@bp.get("/add-product", strict_slashes=False)
def show_add_product_form():
    """GET /admin/add-product - Render the empty add-product form."""
    return render_template(
        "add-product.html",
        page_title="Add Product",
        path="/admin/add-product",
    )


@bp.post("/add-product", strict_slashes=False)
def post_add_product():
    """POST /admin/add-product - Store the submitted product, then go to the shop.

    Form fields: title, imageUrl, price, description
    """
    data = parse_product_form(request.form)
    product = get_catalog().add_product(
        title=data.title,
        image_url=data.image_url,
        price=data.price,
        description=data.description,
    )
    current_app.logger.info("Product %s created via admin form", product.id)
    return redirect(url_for("shop.show_shop"))


@bp.get("/products", strict_slashes=False)
def list_admin_products():
    """GET /admin/products - Admin view of the catalog."""
    products = get_catalog().list_products()
    return render_template(
        "admin/products.html",
        products=products,
        page_title="Admin Products",
        path="/admin/products",
        has_products=len(products) > 0,
        product_count=len(products),
    )
