"""
Configuration Layer Tests

Covers the built-in defaults, the system and user file layers, the
environment layer, and the precedence of the assembled client chain.

Usage:
    pytest tests/configuration/test_layers.py
"""

from __future__ import annotations

from pathlib import Path

import pytest

from OpenShiftClient.Configuration import (
    ConfigurationOptions,
    DefaultConfiguration,
    EnvironmentConfiguration,
    OpenShiftConfiguration,
    SystemConfiguration,
    UserConfiguration,
)

# --- Test Cases ---


def test_default_configuration_values() -> None:
    defaults = DefaultConfiguration()

    assert defaults.file is None
    assert defaults.get_libra_server() == "https://openshift.redhat.com"
    assert defaults.get_libra_domain() == "rhcloud.com"
    assert defaults.get_timeout() == 180000
    assert defaults.get_disable_bad_ssl_ciphers() is ConfigurationOptions.NO
    assert defaults.get_rhlogin() is None


def test_system_configuration_reads_configured_path(system_config_path: Path, write_config) -> None:
    write_config("libra_server='system.example.com'\n", system_config_path)

    system = SystemConfiguration(DefaultConfiguration())

    assert system.file == system_config_path
    assert system.get_libra_server() == "https://system.example.com"
    assert system.get_timeout() == 180000


def test_user_configuration_overrides_system(
    system_config_path: Path, user_config_path: Path, write_config
) -> None:
    write_config("default_rhlogin=system-user\ntimeout=1000\n", system_config_path)
    write_config("default_rhlogin=desk-user\n", user_config_path)

    user = UserConfiguration(SystemConfiguration(DefaultConfiguration()))

    assert user.file == user_config_path
    assert user.get_rhlogin() == "desk-user"
    assert user.get_timeout() == 1000


def test_explicit_file_wins_over_configured_path(tmp_path: Path, write_config) -> None:
    custom = write_config("default_rhlogin=custom\n", tmp_path / "custom.conf")

    user = UserConfiguration(file=custom)

    assert user.file == custom
    assert user.get_rhlogin() == "custom"


def test_user_configuration_save_creates_file(user_config_path: Path) -> None:
    user = UserConfiguration(SystemConfiguration(DefaultConfiguration()))
    user.set_rhlogin("dev@example.com")
    user.set_libra_domain("example.com")

    user.save()

    assert user_config_path.is_file()
    reloaded = UserConfiguration()
    assert reloaded.get_rhlogin() == "dev@example.com"
    assert reloaded.get_properties().get("libra_domain") == "'example.com'"
    assert reloaded.get_properties().get("timeout") is None


def test_environment_configuration_reads_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("default_rhlogin", "env-user")
    monkeypatch.setenv("proxyHost", "proxy.example.com")
    monkeypatch.setenv("proxyPort", "3128")
    monkeypatch.setenv("proxySet", "true")
    monkeypatch.setenv("timeout", "42")

    env = EnvironmentConfiguration()

    assert env.get_properties().local == {
        "default_rhlogin": "env-user",
        "timeout": "42",
        "proxyHost": "proxy.example.com",
        "proxyPort": "3128",
        "proxySet": "true",
    }
    assert env.get_proxy_set() is True
    assert env.get_timeout() == 42


def test_environment_accepts_broker_aliases(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENSHIFT_BROKER_HOST", "broker.example.com")
    monkeypatch.setenv("OPENSHIFT_CLOUD_DOMAIN", "apps.example.com")

    env = EnvironmentConfiguration(DefaultConfiguration())

    assert env.get_libra_server() == "https://broker.example.com"
    assert env.get_libra_domain() == "apps.example.com"


def test_environment_ignores_blank_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("default_rhlogin", "   ")
    monkeypatch.setenv("rhpassword", "")

    env = EnvironmentConfiguration(DefaultConfiguration())

    assert env.get_properties().keys() == []
    assert env.get_rhlogin() is None


@pytest.mark.parametrize(
    ("name", "value"),
    [("TIMEOUT", "30s"), ("CLIENT_ID", "my-oauth-app"), ("ProxyHost", "elsewhere")],
)
def test_environment_ignores_differently_cased_names(
    monkeypatch: pytest.MonkeyPatch, name: str, value: str
) -> None:
    monkeypatch.setenv(name, value)

    config = OpenShiftConfiguration()

    assert config.environment.get_properties().keys() == []
    assert config.get_timeout() == 180000
    assert config.get_client_id() is None
    assert config.get_proxy_host() is None


def test_environment_layer_save_is_noop(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("rhpassword", "s3cret")

    EnvironmentConfiguration().save()

    assert list(tmp_path.iterdir()) == []


def test_openshift_configuration_precedence(
    monkeypatch: pytest.MonkeyPatch,
    system_config_path: Path,
    user_config_path: Path,
    write_config,
) -> None:
    write_config("libra_domain=system.com\ntimeout=9000\nproxyHost=sys-proxy\n", system_config_path)
    write_config("libra_domain=user.com\ndefault_rhlogin=desk-user\n", user_config_path)
    monkeypatch.setenv("default_rhlogin", "env-user")

    config = OpenShiftConfiguration()

    assert config.get_rhlogin() == "env-user"
    assert config.get_libra_domain() == "user.com"
    assert config.get_timeout() == 9000
    assert config.get_proxy_host() == "sys-proxy"
    assert config.get_libra_server() == "https://openshift.redhat.com"
    assert config.file is None


def test_openshift_configuration_without_files_uses_defaults() -> None:
    config = OpenShiftConfiguration()

    assert config.get_libra_server() == "https://openshift.redhat.com"
    assert config.get_libra_domain() == "rhcloud.com"
    assert config.get_timeout() == 180000
    assert config.get_rhlogin() is None
    assert config.get_proxy_set() is False


def test_openshift_configuration_persists_through_user_layer(user_config_path: Path) -> None:
    config = OpenShiftConfiguration()
    config.user.set_rhlogin("dev@example.com")
    config.save()

    assert not user_config_path.exists()
    assert config.get_rhlogin() == "dev@example.com"

    config.user.save()

    assert OpenShiftConfiguration().get_rhlogin() == "dev@example.com"
