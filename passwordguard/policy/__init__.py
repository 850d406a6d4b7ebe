"""Password complexity policy evaluation."""

from passwordguard.policy.evaluator import ascii_lower, evaluate
from passwordguard.policy.messages import REJECTION_MESSAGE, detail_message, render_detail, short_message

__all__ = [
    "REJECTION_MESSAGE",
    "ascii_lower",
    "detail_message",
    "evaluate",
    "render_detail",
    "short_message",
]
