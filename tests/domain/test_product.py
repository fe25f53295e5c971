"""Unit tests for the Product aggregate."""

from dataclasses import replace
from datetime import timedelta

import pytest

from invtrack.domain.model.status import StockStatus
from invtrack.domain.model.value_objects import Money
from tests.fakes import T0, make_fields, make_product


class TestProductStatus:

    def test_status_derived_on_create(self):
        assert make_product(quantity=45, min_stock=10).status is StockStatus.IN_STOCK
        assert make_product(quantity=8, min_stock=15).status is StockStatus.LOW_STOCK
        assert make_product(quantity=0, min_stock=5).status is StockStatus.OUT_OF_STOCK

    def test_status_is_not_an_init_argument(self):
        with pytest.raises(ValueError):
            replace(make_product(), status=StockStatus.IN_STOCK)

    def test_replace_recomputes_status(self):
        product = make_product(quantity=45, min_stock=10)
        assert replace(product, min_stock=50).status is StockStatus.LOW_STOCK

    def test_cannot_mutate_in_place(self):
        product = make_product()
        with pytest.raises(AttributeError):
            product.quantity = 3


class TestProductStockChanges:

    def test_stocked_in(self):
        later = T0 + timedelta(hours=1)
        product = make_product(quantity=45, min_stock=10).stocked_in(20, later)
        assert product.quantity == 65
        assert product.status is StockStatus.IN_STOCK
        assert product.last_updated == later

    def test_stocked_out_clamps_at_zero(self):
        product = make_product(quantity=8, min_stock=15).stocked_out(50, T0)
        assert product.quantity == 0
        assert product.status is StockStatus.OUT_OF_STOCK

    def test_stocked_out_into_low_stock(self):
        product = make_product(quantity=20, min_stock=10).stocked_out(15, T0)
        assert product.quantity == 5
        assert product.status is StockStatus.LOW_STOCK


class TestProductFields:

    def test_with_fields_keeps_id(self):
        product = make_product("P-9")
        updated = product.with_fields(make_fields(name="Gizmo", quantity=0), T0)
        assert updated.id == "P-9"
        assert updated.name == "Gizmo"
        assert updated.status is StockStatus.OUT_OF_STOCK

    def test_fields_round_trip(self):
        fields = make_fields(name="Lamp")
        assert make_product(name="Lamp").fields == fields

    def test_value(self):
        assert make_product(quantity=3, price=Money.of("2.50")).value == Money.of("7.50")


class TestProductQuantityFloor:

    def test_negative_quantity_clamped_on_create(self):
        product = make_product(quantity=-4, min_stock=2)
        assert product.quantity == 0
        assert product.status is StockStatus.OUT_OF_STOCK

    def test_negative_stock_in_clamps_at_zero(self):
        product = make_product(quantity=5).stocked_in(-20, T0)
        assert product.quantity == 0
        assert product.status is StockStatus.OUT_OF_STOCK
