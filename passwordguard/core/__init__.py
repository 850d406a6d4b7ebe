"""Typed core domain primitives."""

from passwordguard.core.chain import HookChain
from passwordguard.core.models import (
    Accepted,
    ContainsAccountIdentifier,
    MissingDigit,
    MissingLowercase,
    MissingSpecial,
    MissingUppercase,
    PasswordCandidate,
    PasswordChangeRequest,
    PolicyResult,
    PolicySnapshot,
    TooShort,
    ViolationKind,
    Violated,
)

__all__ = [
    "Accepted",
    "ContainsAccountIdentifier",
    "HookChain",
    "MissingDigit",
    "MissingLowercase",
    "MissingSpecial",
    "MissingUppercase",
    "PasswordCandidate",
    "PasswordChangeRequest",
    "PolicyResult",
    "PolicySnapshot",
    "TooShort",
    "ViolationKind",
    "Violated",
]
