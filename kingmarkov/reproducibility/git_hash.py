"""Git hash capture with dirty-tree detection for run provenance."""

import subprocess


def _git(*args: str) -> bool:
    """Run a quiet git command; True when it exits with status 0."""
    try:
        subprocess.check_output(["git", *args], stderr=subprocess.DEVNULL)
    except subprocess.CalledProcessError:
        return False
    return True


def get_git_hash() -> str:
    """Short SHA of HEAD, suffixed with '-dirty' if there are uncommitted changes.

    Returns:
        "a3f9c1d", "a3f9c1d-dirty", or "unknown" outside a git checkout
        or when git is not installed.
    """
    try:
        sha = subprocess.check_output(
            ["git", "rev-parse", "--short", "HEAD"],
            stderr=subprocess.DEVNULL,
        ).decode().strip()
    except (subprocess.CalledProcessError, FileNotFoundError):
        return "unknown"

    # Unstaged, then staged changes
    if not _git("diff", "--quiet") or not _git("diff", "--quiet", "--cached"):
        sha += "-dirty"
    return sha
