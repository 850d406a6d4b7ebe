"""Human-readable rendering of policy violations.

Two registers are produced for each violation: a short log line used for
advisory warnings and a full sentence used as rejection detail.  Neither
ever includes password material.
"""

from __future__ import annotations

from passwordguard.core.models import (
    ContainsAccountIdentifier,
    MissingDigit,
    MissingLowercase,
    MissingSpecial,
    MissingUppercase,
    TooShort,
    ViolationKind,
)

REJECTION_MESSAGE = "password does not meet complexity requirements"


def short_message(violation: ViolationKind) -> str:
    match violation:
        case TooShort(actual=actual, minimum=minimum):
            return f"password too short (len={actual}, min={minimum})"
        case MissingUppercase():
            return "missing uppercase letter"
        case MissingLowercase():
            return "missing lowercase letter"
        case MissingDigit():
            return "missing digit"
        case MissingSpecial():
            return "missing special character"
        case ContainsAccountIdentifier():
            return "password contains username"
    raise TypeError(f"unknown violation: {violation!r}")


def detail_message(violation: ViolationKind) -> str:
    match violation:
        case TooShort(minimum=minimum):
            return f"Password must be at least {minimum} characters long."
        case MissingUppercase():
            return "Password must contain at least one uppercase letter."
        case MissingLowercase():
            return "Password must contain at least one lowercase letter."
        case MissingDigit():
            return "Password must contain at least one digit."
        case MissingSpecial():
            return "Password must contain at least one special character."
        case ContainsAccountIdentifier():
            return "Password must not contain the username."
    raise TypeError(f"unknown violation: {violation!r}")


def render_detail(violations: tuple[ViolationKind, ...]) -> str:
    """Join full-sentence details for *violations* in order."""
    return " ".join(detail_message(v) for v in violations)
