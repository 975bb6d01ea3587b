"""
Forecast engine: claim-level payment trials + Monte Carlo runner.
"""

from .events import ClaimTrialEvent, payment_probability, simulate_claim_trial
from .runner import SimulationResult, empty_result, run_simulation

__all__ = [
    "ClaimTrialEvent",
    "payment_probability",
    "simulate_claim_trial",
    "SimulationResult",
    "empty_result",
    "run_simulation",
]
