"""
Simulation configuration.
Payment probabilities live in distributions/probabilities.py (PaymentProbabilities).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

# Fixed trial count per run.
NUM_SIMULATIONS: int = 2000

DEFAULT_SEED: int = 42


@dataclass(frozen=True)
class SimulationConfig:
    seed: int = DEFAULT_SEED

    # percentile curve size (points handed to the chart)
    chart_points: int = 20

    # percentile levels for the summary table
    percentiles: Tuple[float, ...] = (0.05, 0.25, 0.50, 0.75, 0.95)

    @property
    def n_trials(self) -> int:
        return NUM_SIMULATIONS
