"""Port interfaces between the evaluator core and its integration layer."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from passwordguard.core.models import PasswordChangeRequest, PolicySnapshot


@runtime_checkable
class PasswordCheckHook(Protocol):
    """Callable invoked for every credential change.

    Implementations return ``None`` to let the change through and raise to
    reject it.
    """

    def __call__(self, request: PasswordChangeRequest) -> None: ...


class SnapshotSource(Protocol):
    """Source of the policy snapshot in force for one account."""

    def snapshot_for(self, account: str | None = None) -> PolicySnapshot:
        """Return the effective snapshot for *account* (or the default)."""

    def subscribe(self, callback: Callable[[PolicySnapshot], None]) -> Callable[[], None]:
        """Register a listener for snapshot replacement; returns an unsubscribe callable."""
