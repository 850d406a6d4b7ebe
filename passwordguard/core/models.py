"""Domain models for password policy evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Literal, TypeAlias

PasswordType: TypeAlias = Literal["plaintext", "md5", "scram-sha-256"]
ViolationCode: TypeAlias = Literal[
    "too_short",
    "missing_uppercase",
    "missing_lowercase",
    "missing_digit",
    "missing_special",
    "contains_account_identifier",
]


@dataclass(frozen=True, slots=True, kw_only=True)
class PolicySnapshot:
    """Complexity settings in force for one evaluation.

    Snapshots are never mutated; a configuration change produces a new one.
    """

    min_length: int = 12
    require_upper: bool = True
    require_lower: bool = True
    require_digit: bool = True
    require_special: bool = True
    reject_username: bool = True
    advisory_mode: bool = False


@dataclass(frozen=True, slots=True)
class PasswordCandidate:
    """Plaintext password and the account it is being set for."""

    password: str
    account_identifier: str | None = None

    def __repr__(self) -> str:
        return f"PasswordCandidate(password='***', account_identifier={self.account_identifier!r})"


@dataclass(frozen=True, slots=True)
class TooShort:
    actual: int
    minimum: int

    code: ClassVar[ViolationCode] = "too_short"


@dataclass(frozen=True, slots=True)
class MissingUppercase:
    code: ClassVar[ViolationCode] = "missing_uppercase"


@dataclass(frozen=True, slots=True)
class MissingLowercase:
    code: ClassVar[ViolationCode] = "missing_lowercase"


@dataclass(frozen=True, slots=True)
class MissingDigit:
    code: ClassVar[ViolationCode] = "missing_digit"


@dataclass(frozen=True, slots=True)
class MissingSpecial:
    code: ClassVar[ViolationCode] = "missing_special"


@dataclass(frozen=True, slots=True)
class ContainsAccountIdentifier:
    code: ClassVar[ViolationCode] = "contains_account_identifier"


ViolationKind: TypeAlias = (
    TooShort
    | MissingUppercase
    | MissingLowercase
    | MissingDigit
    | MissingSpecial
    | ContainsAccountIdentifier
)


@dataclass(frozen=True, slots=True)
class Accepted:
    """Password satisfies every enabled rule."""


@dataclass(frozen=True, slots=True, kw_only=True)
class Violated:
    """Password broke one or more rules.

    ``violations`` is never empty and keeps rule evaluation order.
    """

    violations: tuple[ViolationKind, ...]
    advisory: bool = False

    def __post_init__(self) -> None:
        if not self.violations:
            raise ValueError("Violated requires at least one violation")

    @property
    def codes(self) -> tuple[ViolationCode, ...]:
        return tuple(v.code for v in self.violations)


PolicyResult: TypeAlias = Accepted | Violated


@dataclass(frozen=True, slots=True, kw_only=True)
class PasswordChangeRequest:
    """One credential change as seen by the hook chain."""

    username: str | None
    password: str | None
    password_type: PasswordType = "plaintext"
    valid_until: datetime | None = None

    def __repr__(self) -> str:
        masked = None if self.password is None else "***"
        return (
            f"PasswordChangeRequest(username={self.username!r}, password={masked!r}, "
            f"password_type={self.password_type!r}, valid_until={self.valid_until!r})"
        )
