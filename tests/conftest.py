from __future__ import annotations

import pytest

from config import TestConfig
from sinabro import create_app, db
from sinabro.repo.postgre.implementations.place_repository import PlaceRepository


@pytest.fixture
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def app_ctx(app):
    with app.app_context():
        yield app


@pytest.fixture
def place_repository(app_ctx) -> PlaceRepository:
    return PlaceRepository()


@pytest.fixture
def place_payload() -> dict:
    return {
        "place_name": "Test",
        "address": "Addr",
        "latitude": 36.62,
        "longitude": 127.45,
    }
