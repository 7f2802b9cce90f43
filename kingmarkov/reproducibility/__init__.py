"""Reproducibility infrastructure: seed verification and code provenance tracking."""

from kingmarkov.reproducibility.git_hash import get_git_hash
from kingmarkov.reproducibility.seed import verify_seed_determinism

__all__ = [
    "get_git_hash",
    "verify_seed_determinism",
]
