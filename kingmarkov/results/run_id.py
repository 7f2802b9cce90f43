"""Run ID generation with scannable parameter slug format."""

from datetime import datetime, timezone

from kingmarkov.config.experiment import SimulationConfig


def generate_run_id(config: SimulationConfig) -> str:
    """Generate a scannable run ID from config parameters.

    Format: N{n_islands}_W{num_steps}_s{start}_seed{seed}_{YYYYMMDD}_{HHMMSS}
    Example: N10_W100000_s10_seed42_20260224_143012
    """
    ts = datetime.now(timezone.utc)
    return (
        f"N{config.archipelago.n_islands}"
        f"_W{config.walk.num_steps}"
        f"_s{config.walk.start}"
        f"_seed{config.seed}"
        f"_{ts.strftime('%Y%m%d_%H%M%S')}"
    )
