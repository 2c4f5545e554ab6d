import os
import tempfile

# Point the app at a throwaway in-memory database before anything imports it
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="tile-tracker-logs-"))

import pytest
from fastapi.testclient import TestClient

from database import Base, SessionLocal, engine
from main import app
from schemas.products import ProductCreate


@pytest.fixture(autouse=True)
def tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def product_payload():
    """2 ft x 2 ft tiles, 5 per box (20 sq.ft a box) at 50 per sq.ft, 100 boxes in stock."""
    return {
        "brand": "Kajaria",
        "product_name": "Glossy White",
        "hsn_code": "6907",
        "tile_width_value": "2",
        "tile_width_unit": "ft",
        "tile_height_value": "2",
        "tile_height_unit": "ft",
        "tiles_per_box": 5,
        "price_per_sqft": "50",
        "boxes_on_hand": 100,
    }


@pytest.fixture
def make_product(db, product_payload):
    from crud.products import create_product

    def _make(**overrides):
        data = dict(product_payload)
        data.update(overrides)
        return create_product(db, ProductCreate(**data))

    return _make
