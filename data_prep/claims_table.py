"""
Convert between claims tables (DataFrames) and Claim records.

Row order is preserved in both directions; the engine assigns draws by claim
position, so reordering a table changes the forecast.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

import pandas as pd

from core.schema import CLAIM_COLUMNS, REQUIRED_CLAIM_COLUMNS, Claim
from core.utils import require_columns


_COLUMN_ALIASES: Dict[str, str] = {
    # identifiers
    "patient_id": "claim_id",
    "Patient ID": "claim_id",
    "Claim ID": "claim_id",
    "ClaimID": "claim_id",
    "id": "claim_id",
    # amount
    "Amount": "amount",
    "billed_amount": "amount",
    "Billed Amount": "amount",
    # status
    "status": "payment_status",
    "Status": "payment_status",
    "Payment Status": "payment_status",
    # descriptive
    "Patient Name": "patient_name",
    "Billing Code": "billing_code",
    "Insurance Provider": "insurance_provider",
    "Claim Date": "claim_date",
}

_OPTIONAL_COLUMNS = [c for c in CLAIM_COLUMNS if c not in REQUIRED_CLAIM_COLUMNS]


def canonicalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy with known column aliases renamed to CLAIM_COLUMNS names."""
    ren = {c: _COLUMN_ALIASES.get(str(c).strip(), str(c).strip()) for c in df.columns}
    out = df.rename(columns=ren).copy()
    # alias and canonical name both present: keep the first occurrence
    return out.loc[:, ~out.columns.duplicated()]


def _optional_str(value) -> object:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    if isinstance(value, pd.Timestamp):
        return value.date().isoformat()
    return str(value)


def claims_from_frame(df: pd.DataFrame) -> List[Claim]:
    """
    Build Claim records from a claims table, one per row, in row order.

    Raises ValueError when a required column is missing; individual bad rows
    surface as pydantic ValidationError (run validate_claims first to get a
    readable report).
    """
    df = canonicalize_columns(df)
    require_columns(df, REQUIRED_CLAIM_COLUMNS)

    claims = []
    for rec in df.to_dict(orient="records"):
        payload = {
            "claim_id": str(rec["claim_id"]),
            "amount": float(rec["amount"]),
            "payment_status": str(rec["payment_status"]).strip(),
        }
        for col in _OPTIONAL_COLUMNS:
            if col in rec:
                payload[col] = _optional_str(rec[col])
        claims.append(Claim(**payload))
    return claims


def claims_to_frame(claims: Iterable[Claim]) -> pd.DataFrame:
    """Claims → DataFrame with CLAIM_COLUMNS, in input order."""
    return pd.DataFrame([c.model_dump() for c in claims], columns=list(CLAIM_COLUMNS))
