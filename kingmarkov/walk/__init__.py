"""Metropolis walk module: types, the walker, multi-chain runs, and caching."""

from kingmarkov.walk.cache import (
    generate_or_load_walk,
    load_walk,
    save_walk,
    walk_cache_key,
)
from kingmarkov.walk.chains import run_chains
from kingmarkov.walk.generator import make_rng, resolve_weights, run_metropolis, run_walk
from kingmarkov.walk.types import ChainSet, DomainError, WalkResult

__all__ = [
    "ChainSet",
    "DomainError",
    "WalkResult",
    "make_rng",
    "resolve_weights",
    "run_walk",
    "run_metropolis",
    "run_chains",
    "generate_or_load_walk",
    "load_walk",
    "save_walk",
    "walk_cache_key",
]
