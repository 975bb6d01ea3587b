"""
Claim Forecast: Revenue Forecast Dashboard
===========================================

  1. Load a claims table (sample file or upload) and validate it
  2. Review the claim mix by payment status
  3. Adjust per-status payment probabilities (seeded from the claim mix)
  4. Read the simulated revenue distribution: percentile curve, expected
     revenue, and range

Run: streamlit run app/streamlit_app.py
"""

from __future__ import annotations

import sys
from pathlib import Path

import altair as alt
import pandas as pd
import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import SimulationConfig
from core.logging_setup import configure_logging
from core.schema import PaymentStatus
from core.utils import format_currency

from data_prep.loader import load_claims_file
from data_prep.claims_table import claims_from_frame
from data_prep.validators import validate_claims

from distributions.probabilities import initial_probabilities

from engine.runner import run_simulation

from reports.metrics import percentile_curve_frame
from reports.aggregator import status_breakdown, summarize_outcomes
from reports.decisions import generate_forecast_report

LOGGER = configure_logging()

DATA_DIR = PROJECT_ROOT / "data"
SAMPLE_CLAIMS = DATA_DIR / "sample_claims.csv"

STATUS_COLORS = {
    PaymentStatus.PENDING.value: "#3b82f6",
    PaymentStatus.APPROVED.value: "#22c55e",
    PaymentStatus.DENIED.value: "#ef4444",
}


# ---------------------------------------------------------------------------
# Cached loaders
# ---------------------------------------------------------------------------
@st.cache_data(show_spinner="Loading claims...")
def _load_sample(path: str) -> pd.DataFrame:
    return load_claims_file(path)


def _load_upload(upload) -> pd.DataFrame:
    if upload.name.lower().endswith(".xlsx"):
        return pd.read_excel(upload, engine="openpyxl")
    return pd.read_csv(upload)


# ---------------------------------------------------------------------------
# Chart helpers
# ---------------------------------------------------------------------------
def _plot_status_mix(breakdown: pd.DataFrame, height: int = 240):
    if len(breakdown) == 0:
        st.info("No claims.")
        return
    chart = (
        alt.Chart(breakdown).mark_bar()
        .encode(
            x=alt.X("payment_status:N", title="Status", sort=None),
            y=alt.Y("claims:Q", title="Claims"),
            color=alt.Color(
                "payment_status:N",
                scale=alt.Scale(domain=list(STATUS_COLORS), range=list(STATUS_COLORS.values())),
                legend=None,
            ),
            tooltip=["payment_status", "claims", alt.Tooltip("amount:Q", format=",.2f")],
        )
        .properties(title="Claim Distribution", height=height)
    )
    st.altair_chart(chart, use_container_width=True)


def _plot_percentile_curve(curve: pd.DataFrame, mean: float, height: int = 300):
    if len(curve) == 0:
        st.info("No simulation results to plot.")
        return
    area = (
        alt.Chart(curve).mark_area(opacity=0.3, color="#3b82f6", line={"color": "#3b82f6"})
        .encode(
            x=alt.X("percentile:Q", title="Percentile"),
            y=alt.Y("revenue:Q", title="Revenue", axis=alt.Axis(format="$,.0f")),
            tooltip=["percentile_label", "revenue_label"],
        )
    )
    rule = (
        alt.Chart(pd.DataFrame({"mean": [mean]}))
        .mark_rule(color="#3b82f6", strokeDash=[3, 3])
        .encode(y="mean:Q")
    )
    chart = (area + rule).properties(
        title=f"Revenue Forecast (expected {format_currency(mean)})", height=height
    )
    st.altair_chart(chart, use_container_width=True)


# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------
def main():
    st.set_page_config(page_title="Revenue Forecast", layout="wide")
    st.title("Revenue Forecast")

    upload = st.sidebar.file_uploader("Claims file (CSV or XLSX)", type=["csv", "xlsx"])
    raw = _load_upload(upload) if upload is not None else _load_sample(str(SAMPLE_CLAIMS))

    validation = validate_claims(raw)
    if not validation.is_valid:
        st.error(validation.summary())
        return
    if validation.warnings:
        st.warning(validation.summary())

    claims = claims_from_frame(raw)
    breakdown = status_breakdown(claims)

    col_total, col_count = st.columns(2)
    col_total.metric("Total Billing Amount", format_currency(breakdown["amount"].sum(), 0))
    col_count.metric("Total Claims", f"{len(claims):,}")
    _plot_status_mix(breakdown)

    defaults = initial_probabilities(claims)
    st.subheader("Payment Probabilities")
    pending = st.slider("Pending Claims Probability", 0, 100, int(round(defaults.pending * 100)))
    approved = st.slider("Approved Claims Probability", 0, 100, int(round(min(defaults.approved, 1.0) * 100)))
    denied = st.slider("Denied Claims Probability", 0, 100, int(round(defaults.denied * 100)))
    probabilities = (
        defaults.with_status(PaymentStatus.PENDING, pending / 100)
        .with_status(PaymentStatus.APPROVED, approved / 100)
        .with_status(PaymentStatus.DENIED, denied / 100)
    )

    cfg = SimulationConfig()
    result = run_simulation(claims, probabilities, config=cfg)
    LOGGER.info("Forecast for %d claims: mean=%.2f", len(claims), result.mean)

    _plot_percentile_curve(
        percentile_curve_frame(result, n_points=cfg.chart_points), result.mean
    )

    st.subheader("Simulation Results")
    col_mean, col_range = st.columns(2)
    col_mean.metric("Expected Revenue", format_currency(result.mean))
    col_range.metric(
        "Range", f"{format_currency(result.min, 0)} - {format_currency(result.max, 0)}"
    )

    with st.expander("Distribution summary"):
        st.dataframe(summarize_outcomes(result, percentiles=cfg.percentiles), hide_index=True)
        report = generate_forecast_report(claims, probabilities, result)
        st.dataframe(report.to_dataframe(), hide_index=True)


if __name__ == "__main__":
    main()
