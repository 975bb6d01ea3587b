"""
Payment probabilities: per-status chance that a claim turns into revenue.

Values are used exactly as supplied. They are meant to lie in [0, 1] but are
never clamped: with the engine's `draw <= p` test, p > 1 always pays and
p < 0 never does.

Default values (before a user touches the sliders) come from the status mix of
the claim set, with floors/caps that keep them realistic even when a status is
rare or missing:
  pending  = min(0.5, share_pending  + 0.20)   or 0.5 if no pending claims
  approved = max(0.8, share_approved + 0.50)   or 0.8 if no approved claims
  denied   = min(0.2, share_denied   + 0.05)   or 0.1 if no denied claims
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Dict, Iterable, Union

from core.schema import Claim, PaymentStatus
from core.utils import status_counts


@dataclass(frozen=True)
class PaymentProbabilities:
    """Probability of eventual payment for each claim status."""

    pending: float = 0.5
    approved: float = 0.8
    denied: float = 0.1

    def for_status(self, status: PaymentStatus) -> float:
        if status is PaymentStatus.PENDING:
            return self.pending
        if status is PaymentStatus.APPROVED:
            return self.approved
        if status is PaymentStatus.DENIED:
            return self.denied
        raise ValueError(f"Not a payment status: {status!r}")

    def with_status(
        self, status: Union[PaymentStatus, str], value: float
    ) -> "PaymentProbabilities":
        """Return a copy with one status' probability replaced."""
        parsed = PaymentStatus.parse(status)
        if parsed is None:
            raise ValueError(f"Unknown payment status: {status!r}")
        return replace(self, **{parsed.name.lower(): float(value)})

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


DEFAULT_PROBABILITIES = PaymentProbabilities(pending=0.5, approved=0.8, denied=0.1)


def initial_probabilities(claims: Iterable[Claim]) -> PaymentProbabilities:
    """
    Starting probabilities derived from the claim set's status distribution.

    Claims with an unrecognized status count toward the total only.
    """
    counts = status_counts(claims)
    total = sum(counts.values())
    if total == 0:
        return DEFAULT_PROBABILITIES

    n_pending = counts.get(PaymentStatus.PENDING.value, 0)
    n_approved = counts.get(PaymentStatus.APPROVED.value, 0)
    n_denied = counts.get(PaymentStatus.DENIED.value, 0)

    pending = min(0.5, n_pending / total + 0.2) if n_pending else 0.5
    approved = max(0.8, n_approved / total + 0.5) if n_approved else 0.8
    denied = min(0.2, n_denied / total + 0.05) if n_denied else 0.1

    return PaymentProbabilities(pending=pending, approved=approved, denied=denied)
