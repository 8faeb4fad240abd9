"""Shared fixtures for the configuration test suite."""

from __future__ import annotations

import logging
import os
import textwrap
from pathlib import Path
from typing import Callable, Iterator

import pytest

from OpenShiftClient.Configuration.settings import SettingKey

_ENVIRONMENT_NAMES = {key.value.lower() for key in SettingKey} | {
    "openshift_broker_host",
    "openshift_cloud_domain",
    "openshift_system_config",
    "openshift_user_config",
    "openshift_log_level",
    "openshift_log_emit_json",
    "openshift_log_file",
    "openshift_log_max_size_mb",
}


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Strip configuration variables and point config files into ``tmp_path``.

    Returns the directory holding the (initially absent) system and user files.
    """

    for name in list(os.environ):
        if name.lower() in _ENVIRONMENT_NAMES:
            monkeypatch.delenv(name, raising=False)

    config_root = tmp_path / "config"
    monkeypatch.setenv("OPENSHIFT_SYSTEM_CONFIG", str(config_root / "etc" / "express.conf"))
    monkeypatch.setenv("OPENSHIFT_USER_CONFIG", str(config_root / "home" / "express.conf"))
    return config_root


@pytest.fixture
def system_config_path(isolated_environment: Path) -> Path:
    return isolated_environment / "etc" / "express.conf"


@pytest.fixture
def user_config_path(isolated_environment: Path) -> Path:
    return isolated_environment / "home" / "express.conf"


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing dedented properties text to a file."""

    def _write(content: str, path: Path | None = None) -> Path:
        target = path or tmp_path / "express.conf"
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
        return target

    return _write


@pytest.fixture
def config_logger() -> Iterator[logging.Logger]:
    """Package logger with propagation enabled so ``caplog`` sees its records."""

    logger = logging.getLogger("OpenShiftClient.Configuration")
    previous = logger.propagate
    logger.propagate = True
    yield logger
    logger.propagate = previous
