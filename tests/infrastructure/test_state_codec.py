"""Tests for snapshot <-> dict conversion."""

from datetime import datetime, timezone

import pytest

from invtrack.domain.exceptions import StateFormatError
from invtrack.domain.model.state import DEFAULT_SUPPLIERS
from invtrack.domain.model.status import StockStatus
from invtrack.domain.model.transaction import TransactionType
from invtrack.domain.model.value_objects import Money
from invtrack.infrastructure.persistence.state_codec import decode_state, encode_state
from invtrack.infrastructure.seed import seed_state
from tests.fakes import T0

LEGACY_BLOB = {
    "products": [
        {
            "id": 1,
            "name": "Gaming Mouse",
            "sku": "GM-002",
            "category": "Electronics",
            "quantity": 8,
            "minStock": 15,
            "maxStock": 50,
            "price": 59.99,
            "supplier": "GameTech",
            "location": "Warehouse A",
            "lastUpdated": "2024-03-01T12:00:00.000Z",
            "status": "In Stock",
        }
    ],
    "transactions": [
        {
            "id": 1700000000000,
            "productId": 1,
            "type": "stock_out",
            "quantity": 7,
            "date": "2024-03-01T12:00:00.000Z",
            "notes": "Customer order fulfillment",
        }
    ],
    "categories": ["Electronics"],
}


def test_encode_uses_camel_case_layout():
    raw = encode_state(seed_state(T0))
    product = raw["products"][1]
    assert product["minStock"] == 15
    assert product["price"] == "59.99"
    assert product["status"] == "Low Stock"
    assert raw["transactions"][0]["productId"] == "P-1"
    assert raw["transactions"][0]["type"] == "stock_in"


def test_round_trip_preserves_state():
    state = seed_state(T0)
    assert decode_state(encode_state(state)) == state


def test_decodes_legacy_browser_blob():
    state = decode_state(LEGACY_BLOB)
    (product,) = state.products
    assert product.id == "P-1"
    assert product.price == Money.of("59.99")
    assert product.last_updated == datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
    assert state.transactions[0].product_id == "P-1"
    assert state.transactions[0].id == "T-1700000000000"
    assert state.transactions[0].type is TransactionType.STOCK_OUT
    assert state.suppliers == DEFAULT_SUPPLIERS


def test_stored_status_is_ignored_and_rederived():
    assert decode_state(LEGACY_BLOB).products[0].status is StockStatus.LOW_STOCK


def test_missing_transactions_default_to_empty():
    blob = {"products": []}
    assert decode_state(blob).transactions == ()


@pytest.mark.parametrize(
    "blob",
    [
        [],
        {"transactions": []},
        {"products": "nope"},
        {"products": [{"id": 1}]},
        {"products": [dict(LEGACY_BLOB["products"][0], quantity=-3)]},
        {"products": [dict(LEGACY_BLOB["products"][0], quantity="3")]},
        {"products": [dict(LEGACY_BLOB["products"][0], price="free")]},
        {"products": [dict(LEGACY_BLOB["products"][0], lastUpdated=5)]},
        {"products": [], "transactions": [dict(LEGACY_BLOB["transactions"][0], type="gift")]},
        {"products": [], "categories": [1, 2]},
    ],
)
def test_malformed_blobs_raise_state_format_error(blob):
    with pytest.raises(StateFormatError):
        decode_state(blob)


def test_legacy_numeric_ids_do_not_collide_across_kinds():
    blob = dict(LEGACY_BLOB, transactions=[dict(LEGACY_BLOB["transactions"][0], id=1)])
    state = decode_state(blob)
    assert state.products[0].id == "P-1"
    assert state.transactions[0].id == "T-1"


def test_string_ids_are_kept_verbatim():
    blob = {"products": [dict(LEGACY_BLOB["products"][0], id="P-abc")]}
    assert decode_state(blob).products[0].id == "P-abc"


@pytest.mark.parametrize("price", ["Infinity", "NaN", float("inf")])
def test_non_finite_price_rejected(price):
    blob = {"products": [dict(LEGACY_BLOB["products"][0], price=price)]}
    with pytest.raises(StateFormatError):
        decode_state(blob)


def test_non_scalar_id_rejected():
    with pytest.raises(StateFormatError, match="Invalid id"):
        decode_state({"products": [dict(LEGACY_BLOB["products"][0], id=[1])]})
