"""Utility functions for passwordguard."""

import os
from pathlib import Path


def ensure_dir(path: Path) -> Path:
    """Ensure a directory exists, creating it if necessary."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_data_path() -> Path:
    """Get the passwordguard data directory.

    Respects PASSWORDGUARD_HOME environment variable; falls back to ~/.passwordguard.
    """
    guard_home = os.environ.get("PASSWORDGUARD_HOME", "").strip()
    if guard_home:
        return Path(guard_home).expanduser()
    return Path.home() / ".passwordguard"
