import json
import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from passwordguard.config.loader import (
    convert_keys,
    convert_to_camel,
    get_config_path,
    load_config,
    parse_config,
    save_config,
)
from passwordguard.config.provider import SnapshotProvider
from passwordguard.config.schema import GuardPolicyConfig, GuardPolicyOverride, PasswordGuardConfig
from passwordguard.core.models import PolicySnapshot


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PASSWORDGUARD_HOME", str(tmp_path / "home"))
    for key in list(os.environ):
        if key.startswith("PASSWORDGUARD_POLICY") or key.startswith("PASSWORDGUARD_RUNTIME"):
            monkeypatch.delenv(key)


def test_defaults_match_documented_policy() -> None:
    assert PasswordGuardConfig().policy.to_snapshot() == PolicySnapshot(
        min_length=12,
        require_upper=True,
        require_lower=True,
        require_digit=True,
        require_special=True,
        reject_username=True,
        advisory_mode=False,
    )


def test_negative_min_length_rejected_by_config_layer() -> None:
    with pytest.raises(ValidationError):
        parse_config({"policy": {"minLength": -1}})
    with pytest.raises(ValidationError):
        GuardPolicyOverride(min_length=-5)


def test_config_path_respects_home_override(tmp_path: Path) -> None:
    assert get_config_path() == tmp_path / "home" / "config.json"


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path / "nope.json") == PasswordGuardConfig()


def test_malformed_file_falls_back_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json")
    assert load_config(path) == PasswordGuardConfig()

    path.write_text(json.dumps({"policy": {"minLength": "many"}}))
    assert load_config(path) == PasswordGuardConfig()


def test_save_and_load_camel_case_with_role_names_preserved(tmp_path: Path) -> None:
    path = tmp_path / "cfg" / "config.json"
    config = parse_config(
        {
            "policy": {"minLength": 14, "advisoryMode": True},
            "roles": {"app_user": {"minLength": 20}, "svcReport": {"requireSpecial": False}},
        }
    )
    save_config(config, path)

    raw = json.loads(path.read_text())
    assert raw["policy"]["minLength"] == 14
    assert raw["roles"]["app_user"] == {"minLength": 20}
    assert raw["roles"]["svcReport"] == {"requireSpecial": False}
    assert (path.stat().st_mode & 0o777) == 0o600

    loaded = load_config(path)
    assert loaded.policy.min_length == 14
    assert set(loaded.roles) == {"app_user", "svcReport"}


def test_key_conversion_leaves_role_names_alone() -> None:
    data = {"roles": {"someUser": {"minLength": 3}}, "runtime": {"reloadOnChange": False}}
    snake = convert_keys(data)
    assert snake == {"roles": {"someUser": {"min_length": 3}}, "runtime": {"reload_on_change": False}}
    assert convert_to_camel(snake) == data


def test_env_overrides_fill_unset_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PASSWORDGUARD_POLICY__MIN_LENGTH", "16")
    assert PasswordGuardConfig().policy.min_length == 16


def test_role_override_merges_over_base_policy() -> None:
    config = parse_config({"policy": {"minLength": 10}, "roles": {"svc": {"requireSpecial": False}}})
    provider = SnapshotProvider(config, reload_on_change=False)

    assert provider.snapshot_for(None) == PolicySnapshot(min_length=10)
    assert provider.snapshot_for("someone") == PolicySnapshot(min_length=10)
    assert provider.snapshot_for("svc") == PolicySnapshot(min_length=10, require_special=False)
    assert provider.snapshot_for("svc") is provider.snapshot_for("svc")


def test_apply_swaps_snapshot_and_notifies_subscribers() -> None:
    provider = SnapshotProvider(PasswordGuardConfig(), reload_on_change=False)
    old = provider.snapshot_for()
    seen: list[PolicySnapshot] = []
    unsubscribe = provider.subscribe(seen.append)

    new = provider.apply(parse_config({"policy": {"minLength": 20}}))

    assert seen == [new]
    assert new.min_length == 20
    assert old.min_length == 12
    assert provider.snapshot_for() is new

    unsubscribe()
    provider.apply(PasswordGuardConfig())
    assert seen == [new]


def test_provider_reloads_when_file_changes(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    save_config(parse_config({"policy": {"minLength": 8}}), path)
    provider = SnapshotProvider(config_path=path, reload_check_interval_seconds=0)
    assert provider.snapshot_for().min_length == 8

    save_config(parse_config({"policy": {"minLength": 30}}), path)
    stat = path.stat()
    os.utime(path, ns=(stat.st_atime_ns, stat.st_mtime_ns + 5_000_000_000))

    assert provider.snapshot_for().min_length == 30


def test_provider_ignores_file_changes_when_reload_disabled(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    save_config(parse_config({"policy": {"minLength": 8}}), path)
    provider = SnapshotProvider(config_path=path, reload_on_change=False)

    save_config(parse_config({"policy": {"minLength": 30}}), path)
    stat = path.stat()
    os.utime(path, ns=(stat.st_atime_ns, stat.st_mtime_ns + 5_000_000_000))

    assert provider.snapshot_for().min_length == 8
    assert provider.reload().min_length == 30


def test_reader_during_apply_sees_previous_roles_until_swap(monkeypatch: pytest.MonkeyPatch) -> None:
    provider = SnapshotProvider(parse_config({"roles": {"svc": {"minLength": 20}}}), reload_on_change=False)
    assert provider.snapshot_for("svc").min_length == 20

    seen_mid_swap: list[int] = []
    original = GuardPolicyConfig.to_snapshot

    def to_snapshot_with_reader(self: GuardPolicyConfig) -> PolicySnapshot:
        seen_mid_swap.append(provider.snapshot_for("svc").min_length)
        return original(self)

    monkeypatch.setattr(GuardPolicyConfig, "to_snapshot", to_snapshot_with_reader)
    provider.apply(parse_config({"roles": {"svc": {"minLength": 4}}}))
    monkeypatch.setattr(GuardPolicyConfig, "to_snapshot", original)

    assert seen_mid_swap and set(seen_mid_swap) == {20}
    assert provider.snapshot_for("svc").min_length == 4
    assert provider.config.roles["svc"].min_length == 4


def test_reload_keeps_last_good_config_when_file_breaks(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    save_config(parse_config({"policy": {"minLength": 20}}), path)
    provider = SnapshotProvider(config_path=path, reload_check_interval_seconds=0)

    path.write_text("{broken")
    stat = path.stat()
    os.utime(path, ns=(stat.st_atime_ns, stat.st_mtime_ns + 5_000_000_000))

    assert provider.snapshot_for().min_length == 20


def test_reload_keeps_last_good_config_on_read_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "config.json"
    save_config(parse_config({"policy": {"minLength": 20}}), path)
    provider = SnapshotProvider(config_path=path, reload_check_interval_seconds=0)

    def denied(config_path: Path | None = None) -> PasswordGuardConfig:
        raise PermissionError(13, "Permission denied", str(config_path))

    monkeypatch.setattr("passwordguard.config.provider.read_config", denied)
    stat = path.stat()
    os.utime(path, ns=(stat.st_atime_ns, stat.st_mtime_ns + 5_000_000_000))

    assert provider.snapshot_for().min_length == 20
    with pytest.raises(PermissionError):
        provider.reload()


def test_unreadable_config_path_falls_back_to_defaults(tmp_path: Path) -> None:
    directory = tmp_path / "config.json"
    directory.mkdir()
    assert load_config(directory) == PasswordGuardConfig()


def test_invalid_env_setting_propagates(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("PASSWORDGUARD_POLICY__MIN_LENGTH", "abc")
    with pytest.raises(ValidationError):
        load_config(tmp_path / "missing.json")
