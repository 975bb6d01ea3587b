import numpy as np
import pytest

from core.schema import Claim
from distributions.probabilities import PaymentProbabilities
from engine.runner import empty_result, run_simulation
from reports.aggregator import status_breakdown, summarize_outcomes
from reports.decisions import generate_forecast_report
from reports.metrics import percentile_curve, percentile_curve_frame


def test_percentile_curve_on_full_run(claims, probabilities):
    result = run_simulation(claims, probabilities)
    points = percentile_curve(result)

    assert len(points) == 20
    assert [p.percentile for p in points] == list(range(0, 100, 5))
    assert [p.revenue for p in points] == [float(result.results[i * 100]) for i in range(20)]
    assert all(0 <= p.percentile < 100 for p in points)


def test_percentile_curve_empty():
    assert percentile_curve(empty_result()) == []
    assert percentile_curve([]) == []
    assert len(percentile_curve_frame([])) == 0


def test_percentile_curve_short_sequence_uses_first_value():
    points = percentile_curve([3.0, 4.0, 5.0])
    assert len(points) == 20
    assert {(p.percentile, p.revenue) for p in points} == {(0, 3.0)}


def test_percentile_rounding_half_up():
    values = np.arange(40, dtype=float)
    # stride 5 over 40 values -> index 5 is 12.5%
    points = percentile_curve(values, n_points=8)
    assert points[1].percentile == 13


def test_percentile_curve_frame_labels():
    frame = percentile_curve_frame(np.arange(2000, dtype=float) * 10)
    assert list(frame.columns) == ["percentile", "revenue", "percentile_label", "revenue_label"]
    assert frame.loc[1, "percentile_label"] == "Percentile: 5%"
    assert frame.loc[19, "revenue_label"] == "Revenue: $19,000"


def test_summarize_outcomes(claims, probabilities):
    result = run_simulation(claims, probabilities)
    summary = summarize_outcomes(result)
    row = summary.iloc[0]
    assert row["Trials"] == 2000
    assert row["Mean"] == pytest.approx(result.mean)
    assert row["Min"] <= row["P05"] <= row["P50"] <= row["P95"] <= row["Max"]


def test_summarize_empty_run():
    row = summarize_outcomes(empty_result()).iloc[0]
    assert row["Trials"] == 0
    assert row["Mean"] == row["Std Dev"] == row["P50"] == 0.0


def test_status_breakdown_orders_known_statuses_first():
    claims = [
        Claim(claim_id="1", amount=10.0, payment_status="Denied"),
        Claim(claim_id="2", amount=20.0, payment_status="Cancelled"),
        Claim(claim_id="3", amount=30.0, payment_status="Pending"),
        Claim(claim_id="4", amount=40.0, payment_status="Pending"),
    ]
    breakdown = status_breakdown(claims)
    assert list(breakdown["payment_status"]) == ["Pending", "Denied", "Cancelled"]
    assert list(breakdown["claims"]) == [2, 1, 1]
    assert list(breakdown["amount"]) == [70.0, 10.0, 20.0]
    assert breakdown["share"].sum() == pytest.approx(1.0)


def test_status_breakdown_empty():
    assert status_breakdown([]).empty


def test_forecast_report(claims, probabilities):
    result = run_simulation(claims, probabilities)
    report = generate_forecast_report(claims, probabilities, result)

    assert report.n_claims == 5
    assert report.total_billed == pytest.approx(1475.49)
    assert report.expected_revenue == result.mean
    assert report.expected_collection_rate == pytest.approx(result.mean / 1475.49)
    assert report.flags == []

    table = report.to_dataframe()
    assert table.loc[table["Metric"] == "Total Billed", "Value"].item() == "$1,475.49"


def test_forecast_report_flags():
    claims = [
        Claim(claim_id="1", amount=100.0, payment_status="Approved"),
        Claim(claim_id="2", amount=100.0, payment_status="Cancelled"),
    ]
    probs = PaymentProbabilities(approved=1.2)
    report = generate_forecast_report(claims, probs, run_simulation(claims, probs))

    assert report.n_skipped_claims == 1
    assert report.expected_revenue == 100.0
    assert any(f.startswith("UNKNOWN_STATUS") for f in report.flags)
    assert any("approved" in f for f in report.flags if f.startswith("PROBABILITY_OUT_OF_RANGE"))
    assert "FLAGS" in set(report.to_dataframe()["Metric"])


def test_forecast_report_no_claims(probabilities):
    report = generate_forecast_report([], probabilities, empty_result())
    assert report.expected_collection_rate == 0.0
    assert report.flags == ["NO_CLAIMS: forecast is zero"]
