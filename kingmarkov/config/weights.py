"""Population weightings selectable by name in ArchipelagoConfig."""

from collections.abc import Callable

from kingmarkov.config.experiment import ArchipelagoConfig


def proportional(k: int) -> float:
    """Island k holds k units of population."""
    return float(k)


def uniform(k: int) -> float:
    return 1.0


def inverse(k: int) -> float:
    return 1.0 / k


_WEIGHT_FUNCTIONS: dict[str, Callable[[int], float]] = {
    "proportional": proportional,
    "uniform": uniform,
    "inverse": inverse,
}


def population_weights(config: ArchipelagoConfig) -> Callable[[int], float]:
    """Look up the population function named by config.weighting."""
    return _WEIGHT_FUNCTIONS[config.weighting]
