"""Unit tests for the stock status rule."""

import pytest

from invtrack.domain.model.status import StockStatus, derive_status


@pytest.mark.parametrize(
    "quantity, min_stock, expected",
    [
        (0, 0, StockStatus.OUT_OF_STOCK),
        (0, 10, StockStatus.OUT_OF_STOCK),
        (1, 10, StockStatus.LOW_STOCK),
        (10, 10, StockStatus.LOW_STOCK),
        (11, 10, StockStatus.IN_STOCK),
        (1, 0, StockStatus.IN_STOCK),
    ],
)
def test_derive_status(quantity, min_stock, expected):
    assert derive_status(quantity, min_stock) is expected


def test_display_values_match_saved_data():
    assert [s.value for s in StockStatus] == ["In Stock", "Low Stock", "Out of Stock"]
