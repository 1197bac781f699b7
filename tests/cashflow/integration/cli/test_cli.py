"""Integration tests for the cashflow CLI."""

import json
from decimal import Decimal
from pathlib import Path

import pytest
from typer.testing import CliRunner

from cashflow.presentation.cli.app import app
from tests.shared.fixtures.factories import TestTransactionFactory as F

runner = CliRunner()


@pytest.fixture
def transactions_file(tmp_path: Path) -> Path:
    path = tmp_path / "transactions.json"
    records = [
        {
            "amount": str(txn.amount),
            "date": txn.booked_at.isoformat(),
            "majorCategoryRef": {"name": txn.major_category_ref},
            "categoryRef": {"name": txn.category_ref},
        }
        for txn in F.two_level_sample()
    ]
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


def _show(*args: str):
    return runner.invoke(app, ["show", *args])


class TestShowCommand:
    """Tests for `cashflow show`."""

    def test_json_output_is_collapsed_by_default(self, transactions_file: Path):
        result = _show(str(transactions_file), "-p", "2024-12", "-l", "category", "--json")

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert [n["id"] for n in data["nodes"]] == [
            "income-major-salário",
            "budget",
            "expense-major-alimentação",
        ]
        assert Decimal(data["totalIncome"]) == Decimal("300")

    def test_expand_option_is_repeatable(self, transactions_file: Path):
        result = _show(
            str(transactions_file),
            "--period",
            "2024-12",
            "--level",
            "category",
            "-e",
            "income-major-salário",
            "-e",
            "expense-major-alimentação",
            "--json",
        )

        assert result.exit_code == 0, result.output
        assert len(json.loads(result.output)["nodes"]) == 7

    def test_expand_all(self, transactions_file: Path):
        result = _show(
            str(transactions_file), "-p", "2024-12", "-l", "category", "--expand-all", "--json",
        )

        assert result.exit_code == 0, result.output
        assert len(json.loads(result.output)["links"]) == 7

    def test_date_range_and_savings(self, transactions_file: Path):
        result = _show(
            str(transactions_file),
            "--from",
            "2024-12-01",
            "--to",
            "2024-12-31",
            "--savings",
            "--json",
        )

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["period"] == "01/12/2024 - 31/12/2024"
        assert "savings" in [n["id"] for n in data["nodes"]]

    def test_table_output(self, transactions_file: Path):
        result = _show(str(transactions_file), "-p", "2024-12")

        assert result.exit_code == 0, result.output
        assert "Orçamento" in result.output
        assert "Links" in result.output

    def test_empty_period_message(self, transactions_file: Path):
        result = _show(str(transactions_file), "-p", "2020-01")

        assert result.exit_code == 0
        assert "No data" in result.output

    def test_invalid_period_exits_with_error(self, transactions_file: Path):
        result = _show(str(transactions_file), "-p", "2024-13")

        assert result.exit_code == 1
        assert "Invalid period" in result.output

    def test_missing_file_exits_with_error(self, tmp_path: Path):
        result = _show(str(tmp_path / "missing.json"))

        assert result.exit_code == 1
        assert "file not found" in result.output

    def test_undecodable_file_exits_with_error(self, tmp_path: Path):
        path = tmp_path / "latin1.csv"
        path.write_bytes("amount,date,category\n-10,2024-12-01,Alimentação\n".encode("latin-1"))

        result = _show(str(path), "-p", "2024-12")

        assert result.exit_code == 1
        assert "not valid UTF-8" in result.output
