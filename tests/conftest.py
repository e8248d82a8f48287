"""Shared pytest fixtures for cart pricing tests."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from app.constants.promotion import PROMOTION
from app.main import app
from app.models.cart import Cart, LineItem
from app.models.promotion import PromotionConfig
from app.services.cashier import Cashier

REFERENCE = "2d832fe0-6c96-4515-9be7-4c00983539c1"


def _make_item(name: str, price: str, sku: str) -> LineItem:
    return LineItem(name=name, price=Decimal(price), sku=sku)


def _make_cart(*items: LineItem, reference: str = REFERENCE) -> Cart:
    return Cart(reference=reference, line_items=list(items))


@pytest.fixture
def promotion() -> PromotionConfig:
    return PROMOTION


@pytest.fixture
def cashier(promotion) -> Cashier:
    return Cashier(promotion)


@pytest.fixture
def default_cart() -> Cart:
    return _make_cart(
        _make_item("Peanut Butter", "39.00", "PEANUT-BUTTER"),
        _make_item("Fruity", "34.99", "FRUITY"),
        _make_item("Chocolate", "32.00", "CHOCOLATE"),
    )


@pytest.fixture
def multiple_eligible_cart() -> Cart:
    return _make_cart(
        _make_item("Peanut Butter", "39.00", "PEANUT-BUTTER"),
        _make_item("Cocoa", "35.00", "COCOA"),
        _make_item("Chocolate", "32.00", "CHOCOLATE"),
        _make_item("Banana Cake", "36.00", "BANANA-CAKE"),
    )


@pytest.fixture
def not_eligible_cart() -> Cart:
    return _make_cart(
        _make_item("Banana Cake", "36.00", "BANANA-CAKE"),
        _make_item("Chocolate", "32.00", "CHOCOLATE"),
    )


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_item():
    return _make_item


@pytest.fixture
def make_cart():
    return _make_cart
