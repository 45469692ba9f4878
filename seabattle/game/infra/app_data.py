"""Where SeaBattle keeps run logs."""

from __future__ import annotations

import os
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parents[2]


def resolve_app_data_root() -> Path:
    """Return ``SEABATTLE_APP_DATA_DIR`` or ``<package>/appdata``."""
    return _configured_path("SEABATTLE_APP_DATA_DIR", base=PACKAGE_ROOT) or PACKAGE_ROOT / "appdata"


def resolve_logs_dir() -> Path:
    """Return ``SEABATTLE_LOG_DIR`` (relative to the app-data root) or ``<root>/logs``."""
    root = resolve_app_data_root()
    return _configured_path("SEABATTLE_LOG_DIR", base=root) or root / "logs"


def ensure_app_data_dirs() -> dict[str, Path]:
    """Create app-data directories and return resolved paths."""
    paths = {"root": resolve_app_data_root(), "logs": resolve_logs_dir()}
    for path in paths.values():
        path.mkdir(parents=True, exist_ok=True)
    return paths


def _configured_path(name: str, *, base: Path) -> Path | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    path = Path(raw)
    return path if path.is_absolute() else base / path
