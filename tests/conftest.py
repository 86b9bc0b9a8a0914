import os
import sys
import pytest
from flask import template_rendered

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from shopfront.app.config import TestingConfig
from shopfront.app.factory import create_app
from shopfront.app.store import CatalogStore


@pytest.fixture()
def store():
    return CatalogStore()


@pytest.fixture()
def app(store):
    return create_app(TestingConfig, store=store)


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


# records (template name, context) for every render during a test
@pytest.fixture()
def rendered(app):
    recorded = []

    def record(sender, template, context, **extra):
        recorded.append((template.name, context))

    template_rendered.connect(record, app)
    try:
        yield recorded
    finally:
        template_rendered.disconnect(record, app)
