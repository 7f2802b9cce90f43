"""Result schema validation and writing.

Uses a Python validation function (not jsonschema) to check required
fields and types before writing result.json files.
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from kingmarkov.config.experiment import SimulationConfig
from kingmarkov.config.hashing import full_config_hash, walk_config_hash
from kingmarkov.config.serialization import config_to_dict
from kingmarkov.reproducibility.git_hash import get_git_hash
from kingmarkov.results.run_id import generate_run_id

SCHEMA_VERSION = "1.0"

REQUIRED_TOP_FIELDS = {
    "schema_version",
    "run_id",
    "timestamp",
    "description",
    "tags",
    "config",
    "metrics",
}

REQUIRED_SCALARS = {"num_steps", "domain_size", "acceptance_rate"}


def validate_result(result: dict[str, Any]) -> list[str]:
    """Validate a result dict against the project schema.

    Returns a list of error strings. An empty list means the result is valid.
    """
    errors: list[str] = []

    missing = REQUIRED_TOP_FIELDS - set(result.keys())
    if missing:
        errors.append(f"Missing required top-level fields: {sorted(missing)}")

    if "schema_version" in result and not isinstance(result["schema_version"], str):
        errors.append("schema_version must be a string")

    if "tags" in result and not isinstance(result["tags"], list):
        errors.append("tags must be a list")

    if "config" in result and not isinstance(result["config"], dict):
        errors.append("config must be a dict")

    if "timestamp" in result:
        ts = result["timestamp"]
        if not isinstance(ts, str):
            errors.append("timestamp must be a string")
        else:
            try:
                datetime.fromisoformat(ts)
            except ValueError:
                errors.append("timestamp must be in ISO 8601 format")

    if "metrics" in result:
        metrics = result["metrics"]
        if not isinstance(metrics, dict):
            errors.append("metrics must be a dict")
        elif not isinstance(metrics.get("scalars"), dict):
            errors.append("metrics.scalars is required")
        else:
            absent = REQUIRED_SCALARS - set(metrics["scalars"].keys())
            if absent:
                errors.append(f"metrics.scalars missing fields: {sorted(absent)}")
            rate = metrics["scalars"].get("acceptance_rate")
            if isinstance(rate, (int, float)) and not 0.0 <= rate <= 1.0:
                errors.append("metrics.scalars.acceptance_rate must be in [0, 1]")

    return errors


def write_result(
    config: SimulationConfig,
    scalars: dict[str, Any],
    results_dir: str | Path = "results",
    run_id: str | None = None,
    extra_metrics: dict[str, Any] | None = None,
) -> Path:
    """Assemble, validate and write result.json for a run.

    Args:
        config: Simulation configuration of the run.
        scalars: Summary scalars (see analysis.summarize_walk).
        results_dir: Base directory; the file goes to {results_dir}/{run_id}/.
        run_id: Optional run ID. Generated from config if omitted.
        extra_metrics: Additional blocks merged into "metrics".

    Returns:
        Path to the written result.json.

    Raises:
        ValueError: If the assembled result fails validation.
    """
    if run_id is None:
        run_id = generate_run_id(config)

    metrics: dict[str, Any] = {"scalars": scalars}
    if extra_metrics:
        metrics.update(extra_metrics)

    result = {
        "schema_version": SCHEMA_VERSION,
        "run_id": run_id,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "description": config.description,
        "tags": list(config.tags),
        "config": config_to_dict(config),
        "metrics": metrics,
        "metadata": {
            "seed": config.seed,
            "git_hash": get_git_hash(),
            "config_hash": full_config_hash(config),
            "walk_config_hash": walk_config_hash(config),
        },
    }

    errors = validate_result(result)
    if errors:
        raise ValueError(
            "Result validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        )

    out_dir = Path(results_dir) / run_id
    out_dir.mkdir(parents=True, exist_ok=True)
    result_path = out_dir / "result.json"
    with open(result_path, "w") as f:
        json.dump(result, f, indent=2)
    return result_path


def load_result(path: str | Path) -> dict[str, Any]:
    """Load a result.json file (or the result.json inside a run directory)."""
    path = Path(path)
    if path.is_dir():
        path = path / "result.json"
    with open(path) as f:
        return json.load(f)
