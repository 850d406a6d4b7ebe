"""Exception types raised by passwordguard."""

from __future__ import annotations

from passwordguard.core.models import ViolationKind


class PasswordGuardError(Exception):
    """Base class for passwordguard errors."""


class PolicyContractError(PasswordGuardError, ValueError):
    """Caller handed the evaluator input it must never receive."""


class PasswordPolicyError(PasswordGuardError):
    """A password change was rejected by the complexity policy."""

    def __init__(
        self,
        message: str,
        *,
        detail: str = "",
        violations: tuple[ViolationKind, ...] = (),
        code: str = "invalid_parameter_value",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail
        self.violations = violations
        self.code = code

    def __str__(self) -> str:
        if not self.detail:
            return self.message
        return f"{self.message}: {self.detail}"
