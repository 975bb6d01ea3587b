"""
Claim schema: the billing record the forecast engine reads.

Claims are owned by the caller (claims table, dashboard, API layer). The engine
only reads them, so the model is frozen.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class PaymentStatus(str, Enum):
    """Closed set of payment statuses a claim can carry."""

    PENDING = "Pending"
    APPROVED = "Approved"
    DENIED = "Denied"

    @classmethod
    def parse(cls, value: Any) -> Optional["PaymentStatus"]:
        """Return the matching status, or None for anything outside the set."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (TypeError, ValueError):
            return None


# Canonical claims-table columns. Only the first three feed the simulation.
CLAIM_COLUMNS: Tuple[str, ...] = (
    "claim_id",
    "amount",
    "payment_status",
    "patient_name",
    "billing_code",
    "insurance_provider",
    "claim_date",
)

REQUIRED_CLAIM_COLUMNS: Tuple[str, ...] = CLAIM_COLUMNS[:3]


class Claim(BaseModel):
    """
    One billing claim.

    payment_status is kept as the raw string so that records with a status
    outside PaymentStatus still reach the engine, which skips them.
    """

    model_config = ConfigDict(frozen=True)

    claim_id: str = Field(validation_alias=AliasChoices("claim_id", "patient_id"))
    amount: float = Field(ge=0.0)
    payment_status: str

    patient_name: Optional[str] = None
    billing_code: Optional[str] = None
    insurance_provider: Optional[str] = None
    claim_date: Optional[str] = None

    @field_validator("claim_id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        # ids read from CSV often arrive as ints
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("payment_status", mode="before")
    @classmethod
    def _status_value(cls, value: Any) -> Any:
        if isinstance(value, PaymentStatus):
            return value.value
        return value

    @property
    def status(self) -> Optional[PaymentStatus]:
        """Parsed status, None when unrecognized."""
        return PaymentStatus.parse(self.payment_status)
