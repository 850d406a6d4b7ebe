"""CLI module for passwordguard."""
