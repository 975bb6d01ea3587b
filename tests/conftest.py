from pathlib import Path

import pytest

from core.schema import Claim
from distributions.probabilities import PaymentProbabilities

SAMPLE_CLAIMS = Path(__file__).resolve().parent.parent / "data" / "sample_claims.csv"


@pytest.fixture
def claims():
    return [
        Claim(claim_id="P1", amount=250.0, payment_status="Approved"),
        Claim(claim_id="P2", amount=375.5, payment_status="Pending"),
        Claim(claim_id="P3", amount=120.0, payment_status="Denied"),
        Claim(claim_id="P4", amount=640.0, payment_status="Pending"),
        Claim(claim_id="P5", amount=89.99, payment_status="Approved"),
    ]


@pytest.fixture
def probabilities():
    return PaymentProbabilities(pending=0.5, approved=0.8, denied=0.1)


@pytest.fixture
def sample_claims_path():
    return SAMPLE_CLAIMS
