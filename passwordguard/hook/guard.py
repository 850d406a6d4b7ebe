"""Credential-change hook enforcing the complexity policy."""

from __future__ import annotations

from loguru import logger

from passwordguard.core.models import Accepted, PasswordCandidate, PasswordChangeRequest, Violated
from passwordguard.core.ports import PasswordCheckHook, SnapshotSource
from passwordguard.errors import PasswordPolicyError
from passwordguard.hook.redact import sanitize_context
from passwordguard.policy.evaluator import evaluate
from passwordguard.policy.messages import REJECTION_MESSAGE, render_detail, short_message


class PasswordGuardHook(PasswordCheckHook):
    """Evaluate plaintext password changes; reject or warn on violations."""

    def __init__(self, snapshots: SnapshotSource) -> None:
        self._snapshots = snapshots

    def __call__(self, request: PasswordChangeRequest) -> None:
        if request.password_type != "plaintext":
            logger.debug("passwordguard: skipping non-plaintext password type={}", request.password_type)
            return

        # Password cleared; nothing to check.
        if request.password is None:
            logger.debug("passwordguard: skipping cleared password user={}", request.username)
            return

        snapshot = self._snapshots.snapshot_for(request.username)
        result = evaluate(snapshot, PasswordCandidate(request.password, request.username))
        if isinstance(result, Accepted):
            return

        if result.advisory:
            self._warn(result)
            return

        context = sanitize_context(
            {"user": request.username, "violations": list(result.codes)}
        )
        logger.info("passwordguard: rejected password change context={}", context)
        raise PasswordPolicyError(
            REJECTION_MESSAGE,
            detail=render_detail(result.violations),
            violations=result.violations,
        )

    @staticmethod
    def _warn(result: Violated) -> None:
        for violation in result.violations:
            logger.warning("passwordguard: {}", short_message(violation))
