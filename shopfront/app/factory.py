from __future__ import annotations

import logging
from flask import Flask, render_template
from werkzeug.exceptions import BadRequest, HTTPException, MethodNotAllowed, NotFound

from shopfront.app.config import Config
from shopfront.app.extensions import init_catalog
from shopfront.app.store import CatalogStore
from shopfront.app.common.errors import FormError
from shopfront.app.common.request_context import (
    REQUEST_ID_HEADER,
    current_request_id,
    init_request_id,
)
from shopfront.app.register import register_blueprints


def create_app(config_object: type[Config] = Config, store: CatalogStore | None = None) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_object)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    # One store per app; handlers reach it through get_catalog()
    init_catalog(app, store)

    # Request id
    @app.before_request
    def _before_request():
        init_request_id()

    @app.after_request
    def _after_request(response):
        rid = current_request_id()
        if rid:
            response.headers[REQUEST_ID_HEADER] = rid
        return response

    # Health endpoint (for Docker)
    @app.get("/health")
    def health():
        return {"status": "ok"}, 200

    register_blueprints(app)

    # Error handlers
    @app.errorhandler(FormError)
    def handle_form_error(err: FormError):
        app.logger.warning("Rejected form submission: %s", err.message)
        return render_template("400.html", **err.to_context(current_request_id())), err.status_code

    @app.errorhandler(BadRequest)
    def handle_bad_request(err: BadRequest):
        ctx = FormError(message=err.description).to_context(current_request_id())
        return render_template("400.html", **ctx), 400

    # An unsupported method on a known path is treated as a missing page
    @app.errorhandler(NotFound)
    @app.errorhandler(MethodNotAllowed)
    def handle_not_found(err: HTTPException):
        return render_template("404.html", page_title="Page Not Found"), 404

    # Remaining HTTP errors keep the Werkzeug response
    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        return err

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        app.logger.exception("Unhandled exception")
        return (
            render_template("500.html", page_title="Server Error", request_id=current_request_id()),
            500,
        )

    return app
