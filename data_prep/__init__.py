"""
Data preparation: loading claims tables, converting to Claim records, validation.
"""

from .loader import load_claims_file
from .claims_table import canonicalize_columns, claims_from_frame, claims_to_frame
from .validators import ValidationResult, validate_claims

__all__ = [
    "load_claims_file",
    "canonicalize_columns",
    "claims_from_frame",
    "claims_to_frame",
    "ValidationResult",
    "validate_claims",
]
