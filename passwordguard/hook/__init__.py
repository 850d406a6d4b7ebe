"""Credential-change integration."""

from passwordguard.hook.guard import PasswordGuardHook
from passwordguard.hook.redact import sanitize_context

__all__ = ["PasswordGuardHook", "sanitize_context"]
