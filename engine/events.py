"""
Claim-level payment trial: one draw decides whether a claim pays in a trial.

Each trial asks the same question of every claim: given this claim's status
probability, does it turn into revenue this time?
  - Claim A (Approved, p=0.8): draw 0.31 → hit, amount counted
  - Claim B (Pending,  p=0.5): draw 0.77 → miss
  - Claim C (status "Cancelled"): no probability → skipped, its draw is still spent

The comparison is inclusive (draw <= p), so p=1.0 always hits and p=0.0 only
hits on an exact zero draw.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from core.schema import Claim, PaymentStatus
from distributions.probabilities import PaymentProbabilities

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClaimTrialEvent:
    """Result of one claim in one trial."""
    hit: bool
    contribution: float


_MISS = ClaimTrialEvent(hit=False, contribution=0.0)


def payment_probability(
    claim: Claim,
    probabilities: PaymentProbabilities,
) -> Optional[float]:
    """
    Map a claim's status to its payment probability.

    Returns None for a status outside PaymentStatus; the claim is then skipped
    by the trial but keeps its slot in the draw order.
    """
    status = PaymentStatus.parse(claim.payment_status)
    if status is PaymentStatus.PENDING:
        return probabilities.pending
    elif status is PaymentStatus.APPROVED:
        return probabilities.approved
    elif status is PaymentStatus.DENIED:
        return probabilities.denied
    else:
        LOGGER.warning(
            "Unknown payment status %r on claim %s; excluded from revenue.",
            claim.payment_status,
            claim.claim_id,
        )
        return None


def simulate_claim_trial(
    claim: Claim,
    probability: Optional[float],
    draw: float,
) -> ClaimTrialEvent:
    """
    Decide whether `claim` pays in one trial.

    Parameters
    ----------
    claim : Claim
        The claim under test (read only)
    probability : float or None
        Output of payment_probability(); None means skip
    draw : float
        The claim's draw for this trial, already taken from the sequence
    """
    if probability is None:
        return _MISS
    if draw <= probability:
        return ClaimTrialEvent(hit=True, contribution=float(claim.amount))
    return _MISS
