"""Shared fixtures: an app backed by in-memory SQLite, and sample receipts."""
import pytest
from fastapi.testclient import TestClient

from receipt_points.main import create_app
from receipt_points.schemas.receipt import Receipt


@pytest.fixture
def client():
    app = create_app("sqlite://")
    with TestClient(app) as c:
        yield c


@pytest.fixture
def target_payload():
    return {
        "retailer": "Target",
        "purchaseDate": "2022-01-01",
        "purchaseTime": "13:01",
        "items": [
            {"shortDescription": "Pepsi - 12oz", "price": "1.25"},
            {"shortDescription": "Dasani", "price": "1.40"},
        ],
        "total": "35.35",
    }


@pytest.fixture
def corner_market_payload():
    return {
        "retailer": "M&M Corner Market",
        "purchaseDate": "2022-03-20",
        "purchaseTime": "14:33",
        "items": [
            {"shortDescription": "Gatorade", "price": "2.25"},
            {"shortDescription": "Gatorade", "price": "2.25"},
            {"shortDescription": "Gatorade", "price": "2.25"},
            {"shortDescription": "Gatorade", "price": "2.25"},
        ],
        "total": "9.00",
    }


@pytest.fixture
def make_receipt(target_payload):
    """Build a Receipt from the Target example with selected fields replaced."""
    def _make(**overrides):
        data = dict(target_payload)
        data.update(overrides)
        return Receipt(**data)
    return _make
