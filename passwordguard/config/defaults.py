"""Centralized policy and runtime defaults."""

from __future__ import annotations

from typing import Any

DEFAULT_POLICY: dict[str, Any] = {
    "min_length": 12,
    "require_upper": True,
    "require_lower": True,
    "require_digit": True,
    "require_special": True,
    "reject_username": True,
    "advisory_mode": False,
}

DEFAULT_RUNTIME: dict[str, Any] = {
    "reload_on_change": True,
    "reload_check_interval_seconds": 5.0,
}
