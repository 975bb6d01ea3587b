import pytest

from core.schema import Claim, PaymentStatus
from distributions.probabilities import (
    DEFAULT_PROBABILITIES,
    PaymentProbabilities,
    initial_probabilities,
)


def _claims(*statuses):
    return [Claim(claim_id=str(i), amount=10.0, payment_status=s) for i, s in enumerate(statuses)]


def test_no_claims_gives_defaults():
    probs = initial_probabilities([])
    assert probs == DEFAULT_PROBABILITIES
    assert (probs.pending, probs.approved, probs.denied) == (0.5, 0.8, 0.1)


def test_heuristic_caps_and_floors():
    probs = initial_probabilities(_claims("Pending", "Pending", "Approved", "Denied"))
    # pending: min(0.5, 0.5 + 0.2); approved: max(0.8, 0.25 + 0.5); denied: min(0.2, 0.25 + 0.05)
    assert probs.pending == pytest.approx(0.5)
    assert probs.approved == pytest.approx(0.8)
    assert probs.denied == pytest.approx(0.2)


def test_heuristic_missing_status_and_uncapped_approved():
    statuses = ["Pending"] + ["Approved"] * 5 + ["Cancelled"] * 4
    probs = initial_probabilities(_claims(*statuses))
    assert probs.pending == pytest.approx(0.1 + 0.2)
    assert probs.approved == pytest.approx(1.0)
    assert probs.denied == pytest.approx(0.1)


def test_heuristic_small_denied_share():
    statuses = ["Denied"] + ["Approved"] * 19
    probs = initial_probabilities(_claims(*statuses))
    assert probs.denied == pytest.approx(0.05 + 0.05)
    assert probs.pending == 0.5


def test_for_status_and_with_status():
    probs = PaymentProbabilities(pending=0.3, approved=0.9, denied=0.05)
    assert probs.for_status(PaymentStatus.APPROVED) == 0.9
    updated = probs.with_status("Denied", 0.2)
    assert updated.denied == 0.2
    assert probs.denied == 0.05
    assert updated.with_status(PaymentStatus.PENDING, 1.4).pending == 1.4


def test_with_status_rejects_unknown():
    with pytest.raises(ValueError):
        DEFAULT_PROBABILITIES.with_status("Cancelled", 0.5)
