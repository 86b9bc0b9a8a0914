from flask import Flask

from shopfront.modules.shop.routes import bp as shop_bp
from shopfront.modules.admin.routes import bp as admin_bp


def register_blueprints(app: Flask) -> None:
    app.register_blueprint(admin_bp, url_prefix="/admin")
    app.register_blueprint(shop_bp)
