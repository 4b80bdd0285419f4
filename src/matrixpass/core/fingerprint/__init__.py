"""Fingerprint — Flattener и Digest Computer."""

from .digest import compute_digest, is_valid_digest
from .flatten import flatten_matrix

__all__ = [
    "compute_digest",
    "flatten_matrix",
    "is_valid_digest",
]
