#!/usr/bin/env python3
"""Entry point for running the King Markov Metropolis simulation.

Chains all pipeline stages into a single executable command:
walk simulation -> (optional) extra chains -> analysis -> result.json ->
visualization.

Usage:
    python run_simulation.py
    python run_simulation.py --config config.json
    python run_simulation.py --config config.json --dry-run
    python run_simulation.py --config config.json --verbose
"""

import argparse
import logging
import sys
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator

from kingmarkov.config import (
    DEFAULT_CONFIG,
    SimulationConfig,
    config_from_json,
    full_config_hash,
    population_weights,
)
from kingmarkov.results import generate_run_id

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that prints stage banners with elapsed time."""
    print(f"\n=== {name} ===")
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    elapsed = time.monotonic() - t0
    print(f"... done in {elapsed:.1f}s")
    log.info("Completed: %s in %.1fs", name, elapsed)


def run_pipeline(
    config: SimulationConfig,
    results_dir: str = "results",
    cache_dir: Path | None = None,
    run_id: str | None = None,
) -> Path:
    """Execute the full simulation pipeline.

    Args:
        config: Simulation configuration.
        results_dir: Base directory for results output.
        cache_dir: Trajectory cache directory. None disables caching.
        run_id: Name of the output directory. Generated from config if omitted.

    Returns:
        Path to the output directory.
    """
    # Lazy imports to keep --dry-run fast
    from kingmarkov.analysis import split_rhat, summarize_walk
    from kingmarkov.reproducibility import get_git_hash
    from kingmarkov.results import write_result
    from kingmarkov.visualization import render_all
    from kingmarkov.walk import (
        generate_or_load_walk,
        resolve_weights,
        run_chains,
        run_metropolis,
    )

    pipeline_start = time.monotonic()
    log.info("Seed: %d", config.seed)
    log.info("Git hash: %s", get_git_hash())

    weights = resolve_weights(
        population_weights(config.archipelago), config.archipelago.n_islands
    )

    # ── Stage 1: Walk ──────────────────────────────────────────────
    with stage_timer("Metropolis Walk"):
        if cache_dir is None:
            result = run_metropolis(config)
        else:
            result = generate_or_load_walk(config, cache_dir)

    # ── Stage 2: Extra chains ──────────────────────────────────────
    chains = None
    extra_metrics: dict[str, Any] = {}
    if config.walk.n_chains > 1 and config.walk.num_steps < 4:
        log.warning(
            "Skipping %d independent chains: split R-hat needs >= 4 weeks, got %d",
            config.walk.n_chains,
            config.walk.num_steps,
        )
    elif config.walk.n_chains > 1:
        with stage_timer("Independent Chains"):
            chains = run_chains(config)
            rhat = split_rhat(chains.positions)
            extra_metrics["chains"] = {
                "n_chains": chains.n_chains,
                "starts": chains.starts.tolist(),
                "acceptance_rates": (
                    chains.n_accepted / config.walk.num_steps
                ).tolist(),
                "split_rhat": rhat,
            }
            log.info("Split R-hat over %d chains: %.4f", chains.n_chains, rhat)

    # ── Stage 3: Analysis ──────────────────────────────────────────
    with stage_timer("Analysis"):
        scalars = summarize_walk(result, weights)
        if scalars["trajectory_errors"]:
            log.warning(
                "Trajectory validation reported %d problems:\n%s",
                len(scalars["trajectory_errors"]),
                "\n".join(f"  - {e}" for e in scalars["trajectory_errors"]),
            )
        if "max_abs_deviation" in scalars:
            log.info(
                "Max |empirical - target| proportion: %.4f",
                scalars["max_abs_deviation"],
            )

    # ── Stage 4: Result JSON ───────────────────────────────────────
    with stage_timer("Write Result JSON"):
        result_path = write_result(
            config,
            scalars,
            results_dir=results_dir,
            run_id=run_id,
            extra_metrics=extra_metrics,
        )
        output_dir = result_path.parent
        log.info("result.json written to %s", result_path)

    # ── Stage 5: Visualization ─────────────────────────────────────
    with stage_timer("Visualization"):
        figures = render_all(result, weights, output_dir, chains=chains)
        log.info("Generated %d figure files", len(figures))

    total_elapsed = time.monotonic() - pipeline_start
    print(f"\n{'=' * 60}")
    print(f"Pipeline complete in {total_elapsed:.1f}s")
    print(f"  Run:        {output_dir.name}")
    print(f"  Output:     {output_dir}")
    print(f"  Result:     {result_path}")
    print(f"  Figures:    {len(figures)} files")
    print(f"  Acceptance: {result.acceptance_rate:.3f}")
    print(f"{'=' * 60}")

    return output_dir


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Run the King Markov Metropolis simulation"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to simulation config JSON file (default: built-in example)",
    )
    parser.add_argument(
        "--results-dir",
        type=str,
        default="results",
        help="Base directory for run outputs",
    )
    parser.add_argument(
        "--cache-dir",
        type=str,
        default=".cache/walks",
        help="Directory for cached trajectories",
    )
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Always simulate; neither read nor write the trajectory cache",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show pipeline plan without running the simulation",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.config is None:
        config = DEFAULT_CONFIG
    else:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        config = config_from_json(config_path.read_text())
        log.info("Config loaded from %s", config_path)

    run_id = generate_run_id(config)
    print(f"Run ID:      {run_id}")
    print(f"Config hash: {full_config_hash(config)}")
    print()
    print(f"Islands:  N={config.archipelago.n_islands}, "
          f"weighting={config.archipelago.weighting}")
    print(f"Walk:     W={config.walk.num_steps}, start={config.walk.start}, "
          f"chains={config.walk.n_chains}")
    print(f"Seed:     {config.seed}")

    if args.dry_run:
        print(f"\nPipeline plan for run {run_id}:")
        print(f"  1. Metropolis walk: {config.walk.num_steps} weeks "
              f"({'no cache' if args.no_cache else 'cache ' + args.cache_dir})")
        if config.walk.n_chains > 1:
            print(f"  2. Independent chains: {config.walk.n_chains}, split R-hat")
        print(f"  3. Analysis: visit frequencies, chi-square, ESS")
        print(f"  4. result.json")
        print(f"  5. Visualization: walk overview, autocorrelation")
        print(f"\n[dry-run] Config loaded successfully. Exiting.")
        return

    cache_dir = None if args.no_cache else Path(args.cache_dir)
    try:
        run_pipeline(
            config,
            results_dir=args.results_dir,
            cache_dir=cache_dir,
            run_id=run_id,
        )
    except Exception:
        log.exception("Pipeline failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
