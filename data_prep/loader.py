from __future__ import annotations

from pathlib import Path
from typing import Union

import pandas as pd


def load_claims_file(path: Union[str, Path]) -> pd.DataFrame:
    """
    Load a raw claims table. .xlsx goes through pandas' Excel reader
    (openpyxl engine); anything else is read as CSV.
    """
    path = Path(path)
    if path.suffix.lower() == ".xlsx":
        return pd.read_excel(path, engine="openpyxl")
    return pd.read_csv(path, dtype={"claim_id": str, "patient_id": str})
