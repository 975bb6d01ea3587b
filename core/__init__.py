"""
Core package: claim schema, configuration, logging setup, and shared utilities.
No simulation logic lives here.
"""

from .schema import CLAIM_COLUMNS, REQUIRED_CLAIM_COLUMNS, Claim, PaymentStatus
from .config import DEFAULT_SEED, NUM_SIMULATIONS, SimulationConfig
from .logging_setup import configure_logging
from .utils import format_currency, require_columns, round_half_up, status_counts

__all__ = [
    "CLAIM_COLUMNS",
    "REQUIRED_CLAIM_COLUMNS",
    "Claim",
    "PaymentStatus",
    "DEFAULT_SEED",
    "NUM_SIMULATIONS",
    "SimulationConfig",
    "configure_logging",
    "format_currency",
    "require_columns",
    "round_half_up",
    "status_counts",
]
