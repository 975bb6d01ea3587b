from __future__ import annotations

import math
from collections import Counter
from typing import Dict, Iterable

import pandas as pd

from .schema import Claim


def require_columns(df: pd.DataFrame, cols: Iterable[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def status_counts(claims: Iterable[Claim]) -> Dict[str, int]:
    """Count claims per raw payment_status value (unrecognized values included)."""
    return dict(Counter(c.payment_status for c in claims))


def round_half_up(x: float) -> int:
    """Round to nearest integer, ties toward +inf (chart percentile labels)."""
    return int(math.floor(x + 0.5))


def format_currency(val: float, decimals: int = 2) -> str:
    """Format an amount with thousands separators, e.g. $1,234.50."""
    return f"${val:,.{decimals}f}"
