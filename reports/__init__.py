"""
Forecast outputs: percentile curve, distribution summaries, and the forecast report.
"""

from .metrics import PercentilePoint, percentile_curve, percentile_curve_frame
from .aggregator import status_breakdown, summarize_outcomes
from .decisions import ForecastReport, generate_forecast_report

__all__ = [
    "PercentilePoint",
    "percentile_curve",
    "percentile_curve_frame",
    "status_breakdown",
    "summarize_outcomes",
    "ForecastReport",
    "generate_forecast_report",
]
