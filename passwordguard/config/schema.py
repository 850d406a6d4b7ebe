"""Configuration schema using Pydantic."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from passwordguard.config.defaults import DEFAULT_POLICY, DEFAULT_RUNTIME
from passwordguard.core.models import PolicySnapshot


class GuardPolicyConfig(BaseModel):
    """Complexity rules applied to every account without an override."""

    model_config = ConfigDict(extra="ignore")

    min_length: int = Field(default=int(DEFAULT_POLICY["min_length"]), ge=0)
    require_upper: bool = bool(DEFAULT_POLICY["require_upper"])
    require_lower: bool = bool(DEFAULT_POLICY["require_lower"])
    require_digit: bool = bool(DEFAULT_POLICY["require_digit"])
    require_special: bool = bool(DEFAULT_POLICY["require_special"])
    reject_username: bool = bool(DEFAULT_POLICY["reject_username"])
    advisory_mode: bool = bool(DEFAULT_POLICY["advisory_mode"])

    def to_snapshot(self) -> PolicySnapshot:
        return PolicySnapshot(**self.model_dump())


class GuardPolicyOverride(BaseModel):
    """Partial per-account override; unset fields inherit from the base policy."""

    model_config = ConfigDict(extra="forbid")

    min_length: int | None = Field(default=None, ge=0)
    require_upper: bool | None = None
    require_lower: bool | None = None
    require_digit: bool | None = None
    require_special: bool | None = None
    reject_username: bool | None = None
    advisory_mode: bool | None = None

    def merge_into(self, base: GuardPolicyConfig) -> GuardPolicyConfig:
        return base.model_copy(update=self.model_dump(exclude_none=True))


class RuntimeConfig(BaseModel):
    """Live-reload behaviour of the snapshot provider."""

    reload_on_change: bool = bool(DEFAULT_RUNTIME["reload_on_change"])
    reload_check_interval_seconds: float = Field(
        default=float(DEFAULT_RUNTIME["reload_check_interval_seconds"]), ge=0
    )


class PasswordGuardConfig(BaseSettings):
    """Root configuration for passwordguard."""

    model_config = SettingsConfigDict(
        extra="ignore",
        populate_by_name=True,
        env_prefix="PASSWORDGUARD_",
        env_nested_delimiter="__",
    )

    config_version: int = 1
    policy: GuardPolicyConfig = Field(default_factory=GuardPolicyConfig)
    roles: dict[str, GuardPolicyOverride] = Field(default_factory=dict)
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)

    def policy_for(self, account: str | None) -> GuardPolicyConfig:
        """Effective policy for *account* after applying its role override."""
        if account is None:
            return self.policy
        override = self.roles.get(account)
        if override is None:
            return self.policy
        return override.merge_into(self.policy)
