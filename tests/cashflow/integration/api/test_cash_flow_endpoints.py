"""Integration tests for the cash-flow endpoints."""

from decimal import Decimal

from fastapi.testclient import TestClient

from cashflow.infrastructure.persistence.memory import InMemoryRepositoryFactory
from cashflow.presentation.api.app import create_app
from cashflow_config.settings import Settings
from tests.shared.fixtures.factories import TestTransactionFactory as F


def _links(data: dict) -> dict:
    return {(l["source"], l["target"]): Decimal(l["value"]) for l in data["links"]}


class TestGetCashFlow:
    """Tests for GET /api/v1/transactions/cash-flow."""

    def test_major_level_full_graph(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.get(
            f"{api_v1_prefix}/transactions/cash-flow",
            params={"period": "2024-12"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["period"] == "2024-12"
        assert data["level"] == "major"
        assert Decimal(data["totalIncome"]) == Decimal("3050")
        assert Decimal(data["totalExpenses"]) == Decimal("2045")
        assert data["expanded"] == []

        budget = next(n for n in data["nodes"] if n["id"] == "budget")
        assert budget["label"] == "Orçamento"
        assert budget["role"] == "budget"
        assert budget["level"] == 1
        assert _links(data)[("budget", "major-alimentação")] == Decimal("150")

    def test_empty_expanded_param_returns_full_graph(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.get(
            f"{api_v1_prefix}/transactions/cash-flow",
            params={"period": "2024-12", "level": "category", "expanded": []},
        )

        assert response.status_code == 200
        data = response.json()
        # Empty list params are not sent; the full graph comes back
        assert {n["level"] for n in data["nodes"]} == {0, 1, 2, 3, 4}

    def test_expanded_nodes(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.get(
            f"{api_v1_prefix}/transactions/cash-flow",
            params={
                "period": "2024-12",
                "level": "category",
                "expanded": ["expense-major-alimentação"],
            },
        )

        assert response.status_code == 200
        data = response.json()
        ids = {n["id"] for n in data["nodes"]}
        assert "expense-cat-alimentação-supermercado" in ids
        assert "income-cat-salário-salário-mensal" not in ids
        assert _links(data)[("income-major-salário", "budget")] == Decimal("2900")
        assert data["expanded"] == ["expense-major-alimentação"]

        node = next(n for n in data["nodes"] if n["id"] == "income-major-salário")
        assert node["hasChildren"] is True

    def test_expand_all(self, test_client: TestClient, api_v1_prefix: str):
        full = test_client.get(
            f"{api_v1_prefix}/transactions/cash-flow",
            params={"period": "2024-12", "level": "category"},
        ).json()
        expanded = test_client.get(
            f"{api_v1_prefix}/transactions/cash-flow",
            params={"period": "2024-12", "level": "category", "expandAll": "true"},
        ).json()

        assert _links(expanded) == _links(full)

    def test_subcategory_alias(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.get(
            f"{api_v1_prefix}/transactions/cash-flow",
            params={"period": "2024-12", "level": "subcategory"},
        )

        assert response.status_code == 200
        assert response.json()["level"] == "category"

    def test_date_range(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.get(
            f"{api_v1_prefix}/transactions/cash-flow",
            params={"dateFrom": "2024-12-01", "dateTo": "2024-12-31", "period": "2020-01"},
        )

        assert response.status_code == 200
        assert response.json()["period"] == "01/12/2024 - 31/12/2024"

    def test_empty_period(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.get(
            f"{api_v1_prefix}/transactions/cash-flow",
            params={"period": "2019-01"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["nodes"] == []
        assert data["links"] == []
        assert Decimal(data["totalIncome"]) == Decimal("0")

    def test_filters(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.get(
            f"{api_v1_prefix}/transactions/cash-flow",
            params={"period": "2024-12", "majorCategory": "Alimentação", "bank": "all"},
        )

        assert response.status_code == 200
        data = response.json()
        assert Decimal(data["totalIncome"]) == Decimal("0")
        assert Decimal(data["totalExpenses"]) == Decimal("150")

    def test_invalid_period(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.get(
            f"{api_v1_prefix}/transactions/cash-flow",
            params={"period": "2024-13"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_PERIOD"

    def test_period_beyond_year_range(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.get(
            f"{api_v1_prefix}/transactions/cash-flow",
            params={"period": "9999-12"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_PERIOD"

    def test_invalid_level(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.get(
            f"{api_v1_prefix}/transactions/cash-flow",
            params={"level": "weekly"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_DETAIL_LEVEL"

    def test_reversed_date_range(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.get(
            f"{api_v1_prefix}/transactions/cash-flow",
            params={"dateFrom": "2024-12-31", "dateTo": "2024-12-01"},
        )

        assert response.status_code == 400

    def test_malformed_date_is_rejected(self, test_client: TestClient, api_v1_prefix: str):
        response = test_client.get(
            f"{api_v1_prefix}/transactions/cash-flow",
            params={"dateFrom": "yesterday", "dateTo": "2024-12-01"},
        )

        assert response.status_code == 422


class TestSettingsDrivenBehavior:
    """Settings that change the generated graph."""

    def test_default_level_and_savings_node(self, api_v1_prefix: str):
        settings = Settings(default_level="category", show_savings_node=True)
        app = create_app(settings, InMemoryRepositoryFactory(F.two_level_sample()))

        with TestClient(app) as client:
            data = client.get(
                f"{api_v1_prefix}/transactions/cash-flow",
                params={"period": "2024-12"},
            ).json()

        assert data["level"] == "category"
        savings = next(n for n in data["nodes"] if n["id"] == "savings")
        assert Decimal(savings["amount"]) == Decimal("150")
        assert savings["level"] == 3

    def test_unexpected_error_returns_500(self, api_v1_prefix: str):
        class BrokenFactory:
            def transaction_read_port(self):
                raise RuntimeError("store unavailable")

        app = create_app(Settings(), BrokenFactory())

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get(f"{api_v1_prefix}/transactions/cash-flow")

        assert response.status_code == 500
        assert response.json() == {
            "detail": "Internal server error",
            "code": "INTERNAL_ERROR",
        }


class TestPostVisibleCashFlow:
    """Tests for POST /api/v1/transactions/cash-flow/visible."""

    def test_round_trip_of_full_graph(self, test_client: TestClient, api_v1_prefix: str):
        full = test_client.get(
            f"{api_v1_prefix}/transactions/cash-flow",
            params={"period": "2024-12", "level": "category"},
        ).json()

        response = test_client.post(
            f"{api_v1_prefix}/transactions/cash-flow/visible",
            json={**full, "expanded": ["income-major-salário"]},
        )

        assert response.status_code == 200
        data = response.json()
        links = _links(data)
        assert links[("income-major-salário", "income-cat-salário-salário-mensal")] == Decimal("2500")
        assert links[("income-major-investimentos", "budget")] == Decimal("150")
        assert ("expense-major-custos-fixos", "expense-cat-custos-fixos-habitação") not in links
        assert data["expanded"] == ["income-major-salário"]
        assert data["totalIncome"] == full["totalIncome"]

    def test_non_forest_graph_is_rejected(self, test_client: TestClient, api_v1_prefix: str):
        node = {"label": "n", "amount": "1", "level": 0, "role": "expense_category"}
        body = {
            "nodes": [{**node, "id": "x"}, {**node, "id": "y"}, {**node, "id": "z"}],
            "links": [
                {"source": "x", "target": "z", "value": "1"},
                {"source": "y", "target": "z", "value": "1"},
            ],
        }

        response = test_client.post(
            f"{api_v1_prefix}/transactions/cash-flow/visible",
            json=body,
        )

        assert response.status_code == 422
        assert response.json()["code"] == "GRAPH_NOT_A_FOREST"


class TestHealth:
    def test_health(self, test_client: TestClient):
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
