"""Password complexity evaluation.

``evaluate`` is a pure function: it reads the snapshot and candidate, keeps no
state between calls and never logs.  Rules run in a fixed order so repeated
calls produce identical violation sequences:

1. length (a failure returns immediately with a single ``TooShort``),
2. character classes, reported as uppercase, lowercase, digit, special,
3. account identifier containment.

Character classes are ASCII-only.  Anything that is not an ASCII letter or
digit, including every non-ASCII character, counts as special.
"""

from __future__ import annotations

import string

from passwordguard.core.models import (
    Accepted,
    ContainsAccountIdentifier,
    MissingDigit,
    MissingLowercase,
    MissingSpecial,
    MissingUppercase,
    PasswordCandidate,
    PolicyResult,
    PolicySnapshot,
    TooShort,
    ViolationKind,
    Violated,
)
from passwordguard.errors import PolicyContractError

_UPPER = frozenset(string.ascii_uppercase)
_LOWER = frozenset(string.ascii_lowercase)
_DIGIT = frozenset(string.digits)
_ASCII_LOWERING = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_lower(text: str) -> str:
    """Lower-case ASCII letters only; other characters pass through untouched."""
    return text.translate(_ASCII_LOWERING)


def evaluate(snapshot: PolicySnapshot, candidate: PasswordCandidate) -> PolicyResult:
    """Classify *candidate* against *snapshot*.

    Raises:
        PolicyContractError: the password is ``None`` or ``min_length`` is negative.
    """
    if candidate.password is None:
        raise PolicyContractError("evaluate() requires a password; filter cleared passwords before calling")
    if snapshot.min_length < 0:
        raise PolicyContractError(f"min_length must be non-negative, got {snapshot.min_length}")

    password = candidate.password
    length = len(password)
    if length < snapshot.min_length:
        return Violated(
            violations=(TooShort(actual=length, minimum=snapshot.min_length),),
            advisory=snapshot.advisory_mode,
        )

    violations: list[ViolationKind] = []
    violations.extend(_missing_classes(snapshot, password))

    identifier = candidate.account_identifier
    if snapshot.reject_username and identifier is not None:
        if ascii_lower(identifier) in ascii_lower(password):
            violations.append(ContainsAccountIdentifier())

    if not violations:
        return Accepted()
    return Violated(violations=tuple(violations), advisory=snapshot.advisory_mode)


def _missing_classes(snapshot: PolicySnapshot, password: str) -> list[ViolationKind]:
    has_upper = has_lower = has_digit = has_special = False
    for ch in password:
        if ch in _UPPER:
            has_upper = True
        elif ch in _LOWER:
            has_lower = True
        elif ch in _DIGIT:
            has_digit = True
        else:
            has_special = True

    missing: list[ViolationKind] = []
    if snapshot.require_upper and not has_upper:
        missing.append(MissingUppercase())
    if snapshot.require_lower and not has_lower:
        missing.append(MissingLowercase())
    if snapshot.require_digit and not has_digit:
        missing.append(MissingDigit())
    if snapshot.require_special and not has_special:
        missing.append(MissingSpecial())
    return missing
