# === NAVMAP v1 ===
# {
#   "module": "OpenShiftClient.Configuration.settings",
#   "purpose": "Recognised setting keys and environment-driven settings models",
#   "sections": [
#     {"id": "keys", "name": "Setting Keys", "anchor": "KEY", "kind": "api"},
#     {"id": "paths", "name": "Configuration Paths", "anchor": "PTH", "kind": "api"},
#     {"id": "env", "name": "Environment Overrides", "anchor": "ENV", "kind": "api"},
#     {"id": "logging", "name": "Logging Configuration", "anchor": "LOG", "kind": "api"}
#   ]
# }
# === /NAVMAP ===

"""Setting keys and environment-backed settings models.

The key strings must match existing ``express.conf`` files verbatim, so they
live in a closed :class:`SettingKey` enumeration. Everything the library reads
from the process environment (file locations, environment-level overrides,
logging) is modelled with ``pydantic-settings`` so values are validated and
empty variables are treated as absent.
"""

from __future__ import annotations

from enum import Enum, unique
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = [
    "SettingKey",
    "DEFAULT_TIMEOUT",
    "DEFAULT_LIBRA_SERVER",
    "DEFAULT_LIBRA_DOMAIN",
    "DEFAULT_SYSTEM_CONFIG",
    "CONFIG_FILE_NAME",
    "ConfigurationPaths",
    "EnvironmentOverrides",
    "LoggingConfiguration",
]


@unique
class SettingKey(str, Enum):
    """Keys recognised in OpenShift express configuration files."""

    RHLOGIN = "default_rhlogin"
    LIBRA_SERVER = "libra_server"
    LIBRA_DOMAIN = "libra_domain"
    PASSWORD = "rhpassword"
    CLIENT_ID = "client_id"
    TIMEOUT = "timeout"
    DISABLE_BAD_SSL_CIPHERS = "disable_bad_sslciphers"
    PROXY_HOST = "proxyHost"
    PROXY_PORT = "proxyPort"
    PROXY_SET = "proxySet"

    def __str__(self) -> str:
        return self.value


DEFAULT_TIMEOUT = "180000"  # 3 minutes, in milliseconds
DEFAULT_LIBRA_SERVER = "openshift.redhat.com"
DEFAULT_LIBRA_DOMAIN = "rhcloud.com"

CONFIG_FILE_NAME = "express.conf"
DEFAULT_SYSTEM_CONFIG = Path("/etc/openshift") / CONFIG_FILE_NAME


def _default_user_config() -> Path:
    return Path.home() / ".openshift" / CONFIG_FILE_NAME


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class ConfigurationPaths(BaseSettings):
    """Locations of the system-wide and per-user configuration files.

    Overridable through ``OPENSHIFT_SYSTEM_CONFIG`` and ``OPENSHIFT_USER_CONFIG``.
    """

    system_config: Path = Field(default=DEFAULT_SYSTEM_CONFIG)
    user_config: Path = Field(default_factory=_default_user_config)

    model_config = SettingsConfigDict(
        env_prefix="OPENSHIFT_", case_sensitive=False, env_ignore_empty=True, extra="ignore"
    )

    @field_validator("system_config", "user_config", mode="after")
    @classmethod
    def _expand_user(cls, value: Path) -> Path:
        return Path(value).expanduser()


class EnvironmentOverrides(BaseSettings):
    """Settings supplied through process environment variables.

    Each recognised key may be set using its own name (``default_rhlogin``,
    ``proxyHost`` and so on, matched exactly so that generic variables such as
    ``TIMEOUT`` or ``CLIENT_ID`` are not picked up). The broker host and cloud
    domain are also accepted as ``OPENSHIFT_BROKER_HOST`` and
    ``OPENSHIFT_CLOUD_DOMAIN``.
    """

    rhlogin: Optional[str] = Field(default=None, validation_alias=SettingKey.RHLOGIN.value)
    libra_server: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(SettingKey.LIBRA_SERVER.value, "OPENSHIFT_BROKER_HOST"),
    )
    libra_domain: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(SettingKey.LIBRA_DOMAIN.value, "OPENSHIFT_CLOUD_DOMAIN"),
    )
    password: Optional[str] = Field(default=None, validation_alias=SettingKey.PASSWORD.value)
    client_id: Optional[str] = Field(default=None, validation_alias=SettingKey.CLIENT_ID.value)
    timeout: Optional[str] = Field(default=None, validation_alias=SettingKey.TIMEOUT.value)
    disable_bad_ssl_ciphers: Optional[str] = Field(
        default=None, validation_alias=SettingKey.DISABLE_BAD_SSL_CIPHERS.value
    )
    proxy_host: Optional[str] = Field(default=None, validation_alias=SettingKey.PROXY_HOST.value)
    proxy_port: Optional[str] = Field(default=None, validation_alias=SettingKey.PROXY_PORT.value)
    proxy_set: Optional[str] = Field(default=None, validation_alias=SettingKey.PROXY_SET.value)

    model_config = SettingsConfigDict(case_sensitive=True, env_ignore_empty=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _ignore_blank(cls, value: Any) -> Any:
        return _blank_to_none(value)

    def as_properties(self) -> Dict[str, str]:
        """Return the supplied overrides keyed by their properties-file names."""

        properties: Dict[str, str] = {}
        for field_name, value in self.model_dump(exclude_none=True).items():
            properties[SettingKey[field_name.upper()].value] = str(value)
        return properties


class LoggingConfiguration(BaseSettings):
    """Logging options, overridable through ``OPENSHIFT_LOG_*`` variables."""

    level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    emit_json: bool = Field(default=False, description="Format log lines as JSON objects")
    file: Optional[Path] = Field(default=None, description="Optional rotating log file")
    max_size_mb: int = Field(default=10, gt=0, description="Maximum size of the rotated log file")

    model_config = SettingsConfigDict(
        env_prefix="OPENSHIFT_LOG_",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
        validate_assignment=True,
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR"}
        upper = value.upper()
        if upper not in valid_levels:
            raise ValueError(f"level must be one of {sorted(valid_levels)}")
        return upper

    @field_validator("file", mode="before")
    @classmethod
    def _no_file_when_blank(cls, value: Any) -> Any:
        return _blank_to_none(value)
