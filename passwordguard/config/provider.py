"""Live snapshot provider backed by the config file.

Readers get immutable ``PolicySnapshot`` objects.  A configuration change
never mutates a snapshot that was already handed out: the new config, its
default snapshot and every role snapshot are built first and then swapped in
with a single assignment, so the evaluation path takes no lock.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from loguru import logger

from passwordguard.config.loader import load_config, read_config
from passwordguard.config.schema import PasswordGuardConfig
from passwordguard.core.models import PolicySnapshot
from passwordguard.core.ports import SnapshotSource

SnapshotListener = Callable[[PolicySnapshot], None]


@dataclass(frozen=True, slots=True)
class _ProviderState:
    config: PasswordGuardConfig
    default: PolicySnapshot
    roles: Mapping[str, PolicySnapshot]


def _build_state(config: PasswordGuardConfig) -> _ProviderState:
    roles = {name: config.policy_for(name).to_snapshot() for name in config.roles}
    return _ProviderState(
        config=config,
        default=config.policy.to_snapshot(),
        roles=MappingProxyType(roles),
    )


class SnapshotProvider(SnapshotSource):
    """Serve per-account policy snapshots and rebuild them on config change."""

    def __init__(
        self,
        config: PasswordGuardConfig | None = None,
        *,
        config_path: Path | None = None,
        reload_on_change: bool | None = None,
        reload_check_interval_seconds: float | None = None,
    ) -> None:
        self._config_path = config_path
        self._write_lock = threading.Lock()
        self._listeners: list[SnapshotListener] = []
        if config is None:
            config = load_config(config_path)
        runtime = config.runtime
        self._reload_on_change = runtime.reload_on_change if reload_on_change is None else reload_on_change
        self._reload_check_interval_seconds = (
            runtime.reload_check_interval_seconds
            if reload_check_interval_seconds is None
            else reload_check_interval_seconds
        )
        self._last_reload_check = time.monotonic()
        self._last_mtime_ns = self._stat_mtime_ns()
        self._state = _build_state(config)

    @property
    def config(self) -> PasswordGuardConfig:
        return self._state.config

    def snapshot_for(self, account: str | None = None) -> PolicySnapshot:
        self._maybe_reload()
        state = self._state
        if account is None:
            return state.default
        return state.roles.get(account, state.default)

    def apply(self, config: PasswordGuardConfig) -> PolicySnapshot:
        """Replace the active config and notify subscribers with the new default snapshot."""
        state = _build_state(config)
        with self._write_lock:
            self._state = state
            listeners = list(self._listeners)
        for listener in listeners:
            listener(state.default)
        return state.default

    def subscribe(self, callback: SnapshotListener) -> Callable[[], None]:
        with self._write_lock:
            self._listeners.append(callback)

        def _unsubscribe() -> None:
            with self._write_lock:
                if callback in self._listeners:
                    self._listeners.remove(callback)

        return _unsubscribe

    def reload(self) -> PolicySnapshot:
        """Re-read the config file unconditionally.

        Unlike the periodic check, read and validation errors propagate.
        """
        self._last_mtime_ns = self._stat_mtime_ns()
        self._last_reload_check = time.monotonic()
        return self.apply(read_config(self._config_path))

    def _stat_mtime_ns(self) -> int | None:
        if self._config_path is None:
            return None
        try:
            return self._config_path.stat().st_mtime_ns
        except OSError:
            return None

    def _maybe_reload(self) -> None:
        if not self._reload_on_change or self._config_path is None:
            return

        now = time.monotonic()
        if now - self._last_reload_check < self._reload_check_interval_seconds:
            return
        self._last_reload_check = now

        current_mtime = self._stat_mtime_ns()
        if current_mtime == self._last_mtime_ns:
            return
        self._last_mtime_ns = current_mtime

        logger.info("policy_config_reload path={}", self._config_path)
        try:
            config = read_config(self._config_path)
        except (OSError, ValueError) as e:
            # Keep serving the last good policy; a broken file must not loosen it.
            logger.warning("policy_config_reload_failed path={} error={}; keeping previous config", self._config_path, e)
            return
        self.apply(config)
