"""Simulation configuration dataclasses, all frozen and slotted for immutability."""

from dataclasses import dataclass, field

WEIGHTINGS = ("proportional", "uniform", "inverse")


@dataclass(frozen=True, slots=True)
class ArchipelagoConfig:
    """The ring of islands and how their populations are assigned."""

    n_islands: int = 10  # N, islands numbered 1..N
    weighting: str = "proportional"  # population of island k: k, 1 or 1/k


@dataclass(frozen=True, slots=True)
class WalkConfig:
    """Metropolis walk parameters."""

    num_steps: int = 100_000  # W, number of weeks
    start: int = 10  # island occupied in week 1
    n_chains: int = 1
    randomize_start: bool = False  # extra chains draw their own start island


@dataclass(frozen=True, slots=True)
class SimulationConfig:
    """Top-level simulation configuration composing all sub-configs.

    All fields are frozen and typed. Cross-parameter validation runs
    in __post_init__ to reject invalid configurations early.
    """

    archipelago: ArchipelagoConfig = field(default_factory=ArchipelagoConfig)
    walk: WalkConfig = field(default_factory=WalkConfig)
    seed: int = 42
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.archipelago.n_islands < 2:
            raise ValueError(
                f"n_islands must be >= 2, got {self.archipelago.n_islands}"
            )
        if self.archipelago.weighting not in WEIGHTINGS:
            raise ValueError(
                f"weighting must be one of {WEIGHTINGS}, "
                f"got {self.archipelago.weighting!r}"
            )
        if self.walk.num_steps < 0:
            raise ValueError(
                f"num_steps must be >= 0, got {self.walk.num_steps}"
            )
        if not 1 <= self.walk.start <= self.archipelago.n_islands:
            raise ValueError(
                f"start ({self.walk.start}) must be in "
                f"1..n_islands ({self.archipelago.n_islands})"
            )
        if self.walk.n_chains < 1:
            raise ValueError(
                f"n_chains must be >= 1, got {self.walk.n_chains}"
            )
