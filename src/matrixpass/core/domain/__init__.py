"""
Domain models and value objects.

Contains the Matrix model, dataset names and the pipeline result.
"""

from matrixpass.core.domain.matrix import Dataset, Matrix
from matrixpass.core.domain.result import (
    DIGEST_HEX_LENGTH,
    DIGEST_PATTERN,
    PipelineResult,
)

__all__ = [
    # Matrix model
    "Dataset",
    "Matrix",
    # Pipeline result
    "DIGEST_HEX_LENGTH",
    "DIGEST_PATTERN",
    "PipelineResult",
]
