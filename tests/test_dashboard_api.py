"""
API tests for /api/dashboard (aggregates come from backend RPCs and views).
"""

import pytest

from conftest import auth_header


@pytest.fixture
def aggregates(backend):
    backend.rpc_results["rpc_status_sum"] = [
        {"status": "Em negociação", "saldo_sum": "1500.25"},
        {"status": None, "saldo_sum": "100"},
        {"status": "Pago", "saldo_sum": None},
    ]
    backend.rpc_results["rpc_monthly_growth"] = [
        {"mes": "2024-04", "total_saldo": "1000", "total_pago": "250.5"},
        {"mes": "2024-05", "total_saldo": None, "total_pago": "10"},
    ]
    backend.tables["farol_paid_sum"] = [{"total": "260.50"}]
    backend.tables["farol_view"] = [
        {"id": 1, "status": "Pago"},
        {"id": 2, "status": "Em negociação"},
        {"id": 3, "status": None},
        {"id": 4, "status": "Pago"},
    ]
    return backend


def test_summary_normalises_backend_values(client, aggregates):
    r = client.get("/api/dashboard/summary", headers=auth_header("u-gestor"))
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["status_sums"] == [
        {"status": "Em negociação", "saldo_sum": 1500.25},
        {"status": "Sem status", "saldo_sum": 100.0},
        {"status": "Pago", "saldo_sum": 0.0},
    ]
    assert data["monthly"][1] == {"mes": "2024-05", "total_saldo": 0.0, "total_pago": 10.0}
    assert data["paid_total"] == 260.5
    assert data["total_saldo"] == pytest.approx(1600.25)
    assert data["error"] is None


def test_summary_without_filters_sends_nulls(client, aggregates):
    client.get("/api/dashboard/summary", headers=auth_header("u-gestor"))
    expected = {"_from": None, "_to": None, "_statuses": None}
    assert ("rpc_status_sum", expected) in aggregates.rpc_calls
    assert ("rpc_monthly_growth", expected) in aggregates.rpc_calls


def test_summary_passes_filters_to_both_rpcs(client, aggregates):
    client.get(
        "/api/dashboard/summary?from=2024-01-01&to=2024-06-30&statuses=Pago&statuses=Novo",
        headers=auth_header("u-gestor"),
    )
    expected = {"_from": "2024-01-01", "_to": "2024-06-30", "_statuses": ["Pago", "Novo"]}
    assert aggregates.rpc_calls[:2] == [("rpc_status_sum", expected), ("rpc_monthly_growth", expected)]


def test_summary_paid_total_missing_is_zero(client, aggregates):
    aggregates.tables["farol_paid_sum"] = []
    data = client.get("/api/dashboard/summary", headers=auth_header("u-gestor")).json()["data"]
    assert data["paid_total"] == 0.0


def test_summary_partial_failure_reports_first_error(client, aggregates):
    aggregates.errors["rpc_monthly_growth"] = "statement timeout"
    r = client.get("/api/dashboard/summary", headers=auth_header("u-gestor"))
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["error"] == "statement timeout"
    assert data["monthly"] == []
    assert len(data["status_sums"]) == 3
    assert data["paid_total"] == 260.5


def test_summary_total_failure_is_400(client, aggregates):
    aggregates.errors["rpc_status_sum"] = "permission denied for function rpc_status_sum"
    aggregates.errors["rpc_monthly_growth"] = "permission denied for function rpc_monthly_growth"
    aggregates.errors["farol_paid_sum"] = "permission denied for view farol_paid_sum"
    r = client.get("/api/dashboard/summary", headers=auth_header("u-gestor"))
    assert r.status_code == 400
    assert r.json() == {"ok": False, "error": "permission denied for function rpc_status_sum"}


def test_statuses_sorted_distinct_non_null(client, aggregates):
    r = client.get("/api/dashboard/statuses", headers=auth_header("u-gestor"))
    assert r.status_code == 200
    assert r.json()["data"] == ["Em negociação", "Pago"]
    query = aggregates.queries_on("farol_view")[-1]
    assert ("not.is", "status", "null") in query.calls
    assert ("limit", 2000) in query.calls


def test_dashboard_requires_authentication(client, aggregates):
    assert client.get("/api/dashboard/summary").status_code == 401
    assert client.get("/api/dashboard/statuses").status_code == 401
