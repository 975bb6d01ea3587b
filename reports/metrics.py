"""
Percentile curve: a fixed-size sample of the sorted outcomes for charting.

Computes (percentile, revenue) points by direct index lookup into the sorted
trial totals. No interpolation between ranks: with 2000 trials and 20 points
the stride is 100 and the points sit at ranks 0, 100, ..., 1900.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Union

import numpy as np
import pandas as pd

from core.utils import format_currency, round_half_up
from engine.runner import SimulationResult


@dataclass(frozen=True)
class PercentilePoint:
    percentile: int
    revenue: float


def _sorted_values(results: Union[SimulationResult, Sequence[float], np.ndarray]) -> np.ndarray:
    if isinstance(results, SimulationResult):
        return np.asarray(results.results, dtype=float)
    return np.asarray(results, dtype=float)


def percentile_curve(
    results: Union[SimulationResult, Sequence[float], np.ndarray],
    *,
    n_points: int = 20,
) -> List[PercentilePoint]:
    """
    Sample `n_points` points from an ascending outcome sequence.

    Parameters
    ----------
    results : SimulationResult or sorted sequence of float
        Trial totals in ascending order
    n_points : int
        Number of chart points

    Returns
    -------
    List of PercentilePoint; empty when there are no outcomes.
    """
    values = _sorted_values(results)
    n = len(values)
    if n == 0:
        return []

    stride = n // n_points
    points = []
    for i in range(n_points):
        index = i * stride
        percentile = round_half_up(index / n * 100)
        points.append(PercentilePoint(percentile=percentile, revenue=float(values[index])))
    return points


def percentile_curve_frame(
    results: Union[SimulationResult, Sequence[float], np.ndarray],
    *,
    n_points: int = 20,
) -> pd.DataFrame:
    """
    Percentile curve as a chart-ready table.

    Columns: percentile, revenue, percentile_label, revenue_label
    """
    points = percentile_curve(results, n_points=n_points)
    return pd.DataFrame(
        {
            "percentile": [p.percentile for p in points],
            "revenue": [p.revenue for p in points],
            "percentile_label": [f"Percentile: {p.percentile}%" for p in points],
            "revenue_label": [f"Revenue: {format_currency(p.revenue, 0)}" for p in points],
        },
        columns=["percentile", "revenue", "percentile_label", "revenue_label"],
    )
