"""
matrixpass — получение passphrase через умножение матриц numbers API.

Pipeline:
    MatrixBuilder(A), MatrixBuilder(B) -> MatrixMultiplier -> flatten_matrix
    -> compute_digest -> PassphraseValidator
"""

__version__ = "0.1.0"

from matrixpass.config import PipelineConfig  # noqa: E402
from matrixpass.pipeline import MatrixPipeline  # noqa: E402

__all__ = [
    "PipelineConfig",
    "MatrixPipeline",
    "__version__",
]
