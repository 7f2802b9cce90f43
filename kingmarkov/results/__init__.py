"""Result schema validation, writing, and run ID generation."""

from kingmarkov.results.schema import load_result, validate_result, write_result
from kingmarkov.results.run_id import generate_run_id

__all__ = [
    "validate_result",
    "write_result",
    "load_result",
    "generate_run_id",
]
