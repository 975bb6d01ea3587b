"""
Forecast report: expected revenue, range, and flags a billing manager can act on.

Answers:
  Q1: "How much of what we billed do we expect to collect?" → expected revenue / billed
  Q2: "What is the realistic spread?"                       → min–max range, P05–P95
  Q3: "Is the input trustworthy?"                           → skipped-claim flags
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

import numpy as np
import pandas as pd

from core.schema import Claim, PaymentStatus
from core.utils import format_currency
from distributions.probabilities import PaymentProbabilities
from engine.runner import SimulationResult


@dataclass
class ForecastReport:
    """Structured forecast output."""
    n_claims: int
    total_billed: float

    expected_revenue: float
    min_revenue: float
    max_revenue: float
    p05_revenue: float
    p95_revenue: float

    # expected_revenue / total_billed
    expected_collection_rate: float

    probabilities: PaymentProbabilities
    n_skipped_claims: int

    flags: List[str] = field(default_factory=list)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        p = self.probabilities
        rows = [
            {"Metric": "Claims", "Value": f"{self.n_claims:,}"},
            {"Metric": "Total Billed", "Value": format_currency(self.total_billed)},
            {"Metric": "Expected Revenue", "Value": format_currency(self.expected_revenue)},
            {
                "Metric": "Range",
                "Value": f"{format_currency(self.min_revenue, 0)} - {format_currency(self.max_revenue, 0)}",
            },
            {
                "Metric": "P05 - P95",
                "Value": f"{format_currency(self.p05_revenue, 0)} - {format_currency(self.p95_revenue, 0)}",
            },
            {"Metric": "Expected Collection Rate", "Value": f"{self.expected_collection_rate:.1%}"},
            {"Metric": "P(Pending paid)", "Value": f"{p.pending:.0%}"},
            {"Metric": "P(Approved paid)", "Value": f"{p.approved:.0%}"},
            {"Metric": "P(Denied paid)", "Value": f"{p.denied:.0%}"},
        ]
        if self.flags:
            rows.append({"Metric": "FLAGS", "Value": " | ".join(self.flags)})
        return pd.DataFrame(rows)


def generate_forecast_report(
    claims: Sequence[Claim],
    probabilities: PaymentProbabilities,
    result: SimulationResult,
) -> ForecastReport:
    """
    Build a ForecastReport from the claims and the run they produced.

    Parameters
    ----------
    claims : sequence of Claim
        The claim set passed to run_simulation()
    probabilities : PaymentProbabilities
        The probabilities passed to run_simulation()
    result : SimulationResult
        Output of run_simulation()
    """
    total_billed = float(sum(c.amount for c in claims))
    n_skipped = sum(PaymentStatus.parse(c.payment_status) is None for c in claims)

    values = np.asarray(result.results, dtype=float)
    p05 = float(np.percentile(values, 5)) if len(values) else 0.0
    p95 = float(np.percentile(values, 95)) if len(values) else 0.0

    flags = []
    if not claims:
        flags.append("NO_CLAIMS: forecast is zero")
    if n_skipped:
        flags.append(f"UNKNOWN_STATUS: {n_skipped} claim(s) excluded from revenue")
    out_of_range = [
        name for name, value in probabilities.as_dict().items() if not 0.0 <= value <= 1.0
    ]
    if out_of_range:
        flags.append(f"PROBABILITY_OUT_OF_RANGE: {', '.join(out_of_range)}")

    return ForecastReport(
        n_claims=len(claims),
        total_billed=total_billed,
        expected_revenue=float(result.mean),
        min_revenue=float(result.min),
        max_revenue=float(result.max),
        p05_revenue=p05,
        p95_revenue=p95,
        expected_collection_rate=float(result.mean) / total_billed if total_billed > 0 else 0.0,
        probabilities=probabilities,
        n_skipped_claims=n_skipped,
        flags=flags,
    )
