"""Configuration module for passwordguard."""

from passwordguard.config.loader import get_config_path, load_config, save_config
from passwordguard.config.provider import SnapshotProvider
from passwordguard.config.schema import GuardPolicyConfig, GuardPolicyOverride, PasswordGuardConfig

__all__ = [
    "GuardPolicyConfig",
    "GuardPolicyOverride",
    "PasswordGuardConfig",
    "SnapshotProvider",
    "get_config_path",
    "load_config",
    "save_config",
]
