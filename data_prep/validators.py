"""
Data quality validation for claims tables before they enter the engine.

Catches problems early:
- Missing critical fields
- Negative or unparseable amounts
- Statuses the engine will skip
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import pandas as pd

from core.schema import REQUIRED_CLAIM_COLUMNS, PaymentStatus

from .claims_table import canonicalize_columns


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a claims table."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def validate_claims(claims_df: pd.DataFrame) -> ValidationResult:
    """
    Run all validation checks on a claims table.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult()
    df = canonicalize_columns(claims_df)

    # --- Schema checks ---
    missing = [c for c in REQUIRED_CLAIM_COLUMNS if c not in df.columns]
    if missing:
        result.errors.append(f"Missing required columns: {missing}")
        return result  # can't continue without columns

    if len(df) == 0:
        result.errors.append("Claims table is empty (0 rows).")
        return result

    # --- Claim ID ---
    if df["claim_id"].isna().any():
        n_missing = int(df["claim_id"].isna().sum())
        result.errors.append(f"{n_missing} rows have null claim_id.")

    n_dup = int(df["claim_id"].dropna().duplicated().sum())
    if n_dup > 0:
        result.warnings.append(f"{n_dup} duplicate claim IDs found.")

    # --- Amount ---
    amounts = pd.to_numeric(df["amount"], errors="coerce")
    n_null = int(amounts.isna().sum())
    n_neg = int((amounts < 0).sum())
    if n_null > 0:
        result.errors.append(f"{n_null} rows have null/unparseable amount.")
    if n_neg > 0:
        result.errors.append(f"{n_neg} rows have negative amount.")

    # --- Payment status ---
    statuses = df["payment_status"].astype(str).str.strip()
    unknown = statuses[statuses.map(PaymentStatus.parse).isna()]
    if len(unknown) > 0:
        values = sorted(unknown.unique())
        result.warnings.append(
            f"{len(unknown)} rows have an unrecognized payment_status {values}: "
            f"these claims will be excluded from the revenue forecast."
        )

    return result
