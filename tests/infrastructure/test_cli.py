"""End-to-end tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

from invtrack.infrastructure.cli.main import cli
from invtrack.infrastructure.persistence.json_state_repository import JsonStateRepository


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def invoke(*args, **kwargs):
        return runner.invoke(cli, ["--data-dir", str(tmp_path / "data"), *args], **kwargs)

    return invoke


@pytest.fixture
def saved(tmp_path):
    return lambda: JsonStateRepository(tmp_path / "data").load()


class TestProducts:

    def test_list_starts_from_seed_data(self, run):
        result = run("product", "list")
        assert result.exit_code == 0
        assert "Wireless Headphones" in result.output
        assert "Out of Stock" in result.output

    def test_list_filters_and_sorts(self, run):
        result = run("product", "list", "--status", "low-stock")
        assert "Gaming Mouse" in result.output
        assert "Notebook Set" not in result.output

        result = run("product", "list", "--sort", "price", "--desc")
        lines = result.output.splitlines()[2:]
        assert lines[0].split()[1:3] == ["Office", "Chair"]

    def test_add_persists(self, run, saved):
        result = run(
            "product", "add", "--name", "Desk Lamp", "--sku", "DL-005",
            "--category", "Furniture", "--supplier", "FurniCorp",
            "--location", "Warehouse B", "--quantity", "3", "--min-stock", "5",
            "--max-stock", "20", "--price", "24.50",
        )
        assert result.exit_code == 0, result.output
        assert "added (Low Stock)" in result.output
        assert saved().products[-1].name == "Desk Lamp"

    def test_add_rejects_invalid_fields(self, run, saved):
        result = run(
            "product", "add", "--name", " ", "--sku", "X", "--category", "C",
            "--supplier", "S", "--location", "L", "--min-stock", "5",
            "--max-stock", "1", "--price", "0",
        )
        assert result.exit_code == 1
        assert "Product name is required" in result.output
        assert "Max stock must be greater than min stock" in result.output
        assert saved() is None

    def test_add_rejects_infinite_price(self, run, saved):
        result = run(
            "product", "add", "--name", "Lamp", "--sku", "L-1", "--category", "C",
            "--supplier", "S", "--location", "L", "--price", "inf",
        )
        assert result.exit_code == 1
        assert "must be finite" in result.output
        assert saved() is None

    def test_update_keeps_unspecified_fields(self, run, saved):
        result = run("product", "update", "--id", "P-2", "--min-stock", "2")
        assert result.exit_code == 0, result.output
        assert "(In Stock)" in result.output
        product = saved().product_by_id("P-2")
        assert product.name == "Gaming Mouse"
        assert product.quantity == 8

    def test_delete_then_show_reports_missing(self, run):
        assert run("product", "delete", "--id", "P-3").exit_code == 0
        result = run("product", "show", "--id", "P-3")
        assert result.exit_code == 1
        assert "not found" in result.output


class TestStock:

    def test_stock_in(self, run, saved):
        result = run("stock", "in", "--id", "P-1", "--quantity", "20")
        assert result.exit_code == 0, result.output
        assert "Added 20 units" in result.output
        state = saved()
        assert state.product_by_id("P-1").quantity == 65
        assert state.transactions[0].quantity == 20

    def test_stock_out_beyond_on_hand_rejected(self, run, saved):
        result = run("stock", "out", "--id", "P-2", "--quantity", "50")
        assert result.exit_code == 1
        assert "Cannot remove more items" in result.output
        assert saved() is None

    def test_unknown_product(self, run):
        result = run("stock", "in", "--id", "nope", "--quantity", "1")
        assert result.exit_code == 1
        assert "not found" in result.output


class TestReports:

    def test_overview(self, run):
        result = run("report", "overview")
        assert "Total products:   4" in result.output
        assert "Inventory value:  $6,538.27" in result.output

    def test_alerts(self, run):
        result = run("report", "alerts")
        lines = result.output.splitlines()
        assert "Office Chair" in lines[2]
        assert "Gaming Mouse" in lines[3]

    def test_explicit_zero_limits_are_honoured(self, run):
        result = run("report", "top", "--limit", "0")
        assert "No products found." in result.output

        result = run("report", "alerts", "--limit", "0")
        assert "+2 more items need attention" in result.output
        assert "Office Chair" not in result.output

        result = run("report", "activity", "--limit", "0")
        assert "No recent activity." in result.output

    def test_movement(self, run):
        result = run("report", "movement", "--range", "30days")
        assert "Last 30 Days" in result.output
        assert "Net movement:  +13" in result.output

    def test_activity_hides_deleted_products(self, run):
        run("product", "delete", "--id", "P-2")
        result = run("report", "activity")
        assert "Wireless Headphones" in result.output
        assert "Gaming Mouse" not in result.output

    def test_export(self, run, tmp_path):
        target = tmp_path / "report.json"
        result = run("report", "export", "--output", str(target))
        assert result.exit_code == 0
        assert json.loads(target.read_text(encoding="utf-8"))["dateRange"] == "Last 7 Days"


class TestData:

    def test_export_reset_import_round_trip(self, run, saved, tmp_path):
        run("stock", "out", "--id", "P-1", "--quantity", "5")
        backup = tmp_path / "backup.json"
        assert run("data", "export", "--output", str(backup)).exit_code == 0
        before = saved()

        assert run("data", "reset", "--yes").exit_code == 0
        assert saved().products == ()

        result = run("data", "import", str(backup))
        assert result.exit_code == 0, result.output
        assert "Data imported successfully!" in result.output
        assert saved() == before

    def test_import_rejects_bad_file(self, run, tmp_path, saved):
        bad = tmp_path / "bad.json"
        bad.write_text('{"items": []}', encoding="utf-8")
        result = run("data", "import", str(bad))
        assert result.exit_code == 1
        assert "Invalid file format" in result.output
        assert saved() is None

    def test_import_rejects_non_utf8_file(self, run, tmp_path, saved):
        bad = tmp_path / "bad.json"
        bad.write_bytes(b'{"products": ["\xff\xfe"]}')
        result = run("data", "import", str(bad))
        assert result.exit_code == 1
        assert "Error importing data" in result.output
        assert saved() is None

    def test_stats(self, run):
        result = run("data", "stats")
        assert "Products:      4" in result.output
        assert "1 items need restocking" in result.output
        assert "1 items are completely out of stock" in result.output


def test_bad_environment_setting(run):
    result = run("product", "list", env={"INVTRACK_TOP_N": "lots"})
    assert result.exit_code == 1
    assert "INVTRACK_TOP_N" in result.output
