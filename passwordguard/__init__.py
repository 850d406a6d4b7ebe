"""passwordguard - password complexity policy for credential changes."""

__version__ = "0.1.0"
__logo__ = "🔐"
