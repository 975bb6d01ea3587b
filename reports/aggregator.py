"""
Aggregate a run's trial totals and the claim set into display tables.

Instead of: "Expected revenue = $12,400" (one number, no context)
The user gets: "mean=$12,400, P05=$9,800, P95=$15,100, range $7,200 – $17,900"
"""

from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np
import pandas as pd

from core.schema import Claim, PaymentStatus
from engine.runner import SimulationResult

_STATUS_ORDER = [s.value for s in PaymentStatus]


def summarize_outcomes(
    result: SimulationResult,
    *,
    percentiles: Tuple[float, ...] = (0.05, 0.25, 0.50, 0.75, 0.95),
) -> pd.DataFrame:
    """
    One-row summary of a simulation run.

    Columns: Metric, Trials, Mean, Std Dev, Min, Pxx..., Max.
    An empty run reports zeros, matching the zero SimulationResult.
    """
    values = np.asarray(result.results, dtype=float)
    row = {
        "Metric": "Total Revenue",
        "Trials": int(len(values)),
        "Mean": float(result.mean),
        "Std Dev": float(np.std(values)) if len(values) else 0.0,
        "Min": float(result.min),
    }
    for p in percentiles:
        pct_label = f"P{int(round(p * 100)):02d}"
        row[pct_label] = float(np.percentile(values, p * 100)) if len(values) else 0.0
    row["Max"] = float(result.max)
    return pd.DataFrame([row])


def status_breakdown(claims: Iterable[Claim]) -> pd.DataFrame:
    """
    Claim count and billed amount per payment status.

    Known statuses come first in Pending/Approved/Denied order; any
    unrecognized status values follow under their raw label.
    """
    df = pd.DataFrame(
        [{"payment_status": c.payment_status, "amount": c.amount} for c in claims],
        columns=["payment_status", "amount"],
    )
    if df.empty:
        return pd.DataFrame(columns=["payment_status", "claims", "amount", "share"])

    grouped = (
        df.groupby("payment_status", sort=False)["amount"]
        .agg(claims="count", amount="sum")
        .reset_index()
    )
    grouped["share"] = grouped["claims"] / grouped["claims"].sum()

    order = {s: i for i, s in enumerate(_STATUS_ORDER)}
    grouped["_order"] = grouped["payment_status"].map(lambda s: order.get(s, len(order)))
    return (
        grouped.sort_values(["_order", "payment_status"], kind="stable")
        .drop(columns="_order")
        .reset_index(drop=True)
    )
