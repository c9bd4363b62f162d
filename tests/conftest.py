"""Pytest configuration and fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest
from fastapi.testclient import TestClient

from app.main import app as fastapi_app
from app.models.receipt import Item, Receipt
from app.store.memory import InMemoryReceiptStore, get_receipt_store

if TYPE_CHECKING:
    from collections.abc import Generator

SAMPLE_PAYLOAD_PATH = Path(__file__).parent.parent / "samples" / "payload.json"


@pytest.fixture
def target_payload() -> dict[str, Any]:
    """The reference receipt payload (28 points)."""
    return json.loads(SAMPLE_PAYLOAD_PATH.read_text(encoding="utf-8"))


@pytest.fixture
def corner_market_payload() -> dict[str, Any]:
    """Round-total afternoon receipt (109 points)."""
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
def target_receipt() -> Receipt:
    return Receipt(
        retailer="Target",
        purchase_date="2022-01-01",
        purchase_time="13:01",
        items=(
            Item(short_description="Mountain Dew 12PK", price="6.49"),
            Item(short_description="Emils Cheese Pizza", price="12.25"),
            Item(short_description="Knorr Creamy Chicken", price="1.26"),
            Item(short_description="Doritos Nacho Cheese", price="3.35"),
            Item(short_description="   Klarbrunn 12-PK 12 FL OZ  ", price="12.00"),
        ),
        total="35.35",
    )


@pytest.fixture
def corner_market_receipt() -> Receipt:
    return Receipt(
        retailer="M&M Corner Market",
        purchase_date="2022-03-20",
        purchase_time="14:33",
        items=tuple(Item(short_description="Gatorade", price="2.25") for _ in range(4)),
        total="9.00",
    )


@pytest.fixture
def store() -> InMemoryReceiptStore:
    """A fresh, empty store per test."""
    return InMemoryReceiptStore()


@pytest.fixture
def client(store: InMemoryReceiptStore) -> Generator[TestClient, None, None]:
    """Test client wired to the per-test store."""
    fastapi_app.dependency_overrides[get_receipt_store] = lambda: store
    with TestClient(fastapi_app) as test_client:
        yield test_client
    fastapi_app.dependency_overrides.clear()
