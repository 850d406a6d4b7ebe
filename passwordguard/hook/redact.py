"""Log-context redaction for the credential-change hook."""

from __future__ import annotations

_SENSITIVE_CONTEXT_KEYS = (
    "password",
    "passwd",
    "secret",
    "token",
    "credential",
    "shadow",
    "private_key",
)

_MAX_LOG_VALUE_CHARS = 256


def sanitize_context(context: dict[str, object] | None) -> dict[str, object]:
    """Return a copy of *context* safe to put on a log line."""
    if not context:
        return {}
    return {str(key): _sanitize_value(value, parent_key=str(key)) for key, value in context.items()}


def _sanitize_value(value: object, *, parent_key: str = "") -> object:
    lowered_key = parent_key.lower()
    if any(token in lowered_key for token in _SENSITIVE_CONTEXT_KEYS):
        return "[REDACTED]"

    if isinstance(value, dict):
        return {str(k): _sanitize_value(v, parent_key=str(k)) for k, v in value.items()}

    if isinstance(value, list):
        return [_sanitize_value(item, parent_key=parent_key) for item in value]

    if isinstance(value, tuple):
        return tuple(_sanitize_value(item, parent_key=parent_key) for item in value)

    if isinstance(value, str) and len(value) > _MAX_LOG_VALUE_CHARS:
        return value[:_MAX_LOG_VALUE_CHARS] + "...(truncated)"

    return value
