from pathlib import Path
from importlib import metadata as importlib_metadata
from typing import Any
import tomllib

DISTRIBUTION_NAME = "testlab"

# --------------------
# Find pyproject.toml
# --------------------


def find_pyproject(start: Path, max_up: int = 5) -> Path | None:
    p = start
    for _ in range(max_up):
        candidate = p / "pyproject.toml"
        if candidate.exists():
            return candidate
        if p.parent == p:
            break
        p = p.parent
    return None


def get_pyproject_value(key: str, start: Path | None = None, max_up: int = 5, default: Any = None) -> Any:
    """
    Return the value for a dot-separated `key` (e.g. "project.version") from the nearest
    pyproject.toml above `start` (defaults to this module's folder), or `default` when the
    file is missing, unreadable, or lacks the key.
    """
    pyproject = find_pyproject(start or Path(__file__).resolve().parent, max_up=max_up)
    if pyproject is None:
        return default

    try:
        with pyproject.open("rb") as f:
            cur = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        return default

    for part in key.split("."):
        if isinstance(cur, dict) and part in cur:
            cur = cur[part]
        else:
            return default
    return cur


def get_project_version(default: str = "unknown") -> str:
    """
    Installed distribution version first (pip install / container), then the source tree's
    pyproject.toml, then `default`.
    """
    try:
        return importlib_metadata.version(DISTRIBUTION_NAME)
    except importlib_metadata.PackageNotFoundError:
        pass
    value = get_pyproject_value("project.version")
    return value if isinstance(value, str) else default


__all__ = [
    "DISTRIBUTION_NAME",
    "find_pyproject",
    "get_pyproject_value",
    "get_project_version",
]
