"""Ordered chain of password-check hooks.

A host keeps exactly one chain.  Installing a hook never displaces the hooks
that were there before it: each installed hook runs after the ones installed
earlier, so a previously-registered checker always gets the first look at a
request.  Any hook may reject the change by raising; the exception propagates
to the caller and the remaining hooks are skipped.

Usage::

    chain = HookChain()
    chain.install(audit_hook)
    chain.install(PasswordGuardHook(provider))
    chain.run(PasswordChangeRequest(username="bob", password="..."))
"""

from __future__ import annotations

from passwordguard.core.models import PasswordChangeRequest
from passwordguard.core.ports import PasswordCheckHook


class HookChain:
    """Hooks invoked in registration order."""

    __slots__ = ("_hooks",)

    def __init__(self, hooks: list[PasswordCheckHook] | None = None) -> None:
        self._hooks: list[PasswordCheckHook] = list(hooks or [])

    def install(self, hook: PasswordCheckHook) -> None:
        """Append *hook* after every hook already installed."""
        self._hooks.append(hook)

    def run(self, request: PasswordChangeRequest) -> None:
        """Run every hook against *request*; the first raised error stops the chain."""
        for hook in list(self._hooks):
            hook(request)

    def __len__(self) -> int:
        return len(self._hooks)

    def __repr__(self) -> str:
        names = [getattr(h, "__name__", type(h).__name__) for h in self._hooks]
        return f"HookChain({' → '.join(names)})"
