# === NAVMAP v1 ===
# {
#   "module": "OpenShiftClient.Configuration.configuration",
#   "purpose": "Typed accessors over a layered properties store",
#   "sections": [
#     {
#       "id": "openshiftconfigurationbase",
#       "name": "OpenShiftConfigurationBase",
#       "anchor": "class-openshiftconfigurationbase",
#       "kind": "class"
#     },
#     {
#       "id": "to-boolean",
#       "name": "_to_boolean",
#       "anchor": "function-to-boolean",
#       "kind": "function"
#     }
#   ]
# }
# === /NAVMAP ===

"""Typed configuration accessors.

:class:`OpenShiftConfigurationBase` wraps one :class:`LayeredPropertyStore`
and translates between the raw strings kept in ``express.conf`` files and the
values client code works with: quotes are stripped on read, the broker URL
gains an ``https://`` prefix, the cipher policy becomes a
:class:`ConfigurationOptions` member, and the timeout becomes an ``int``.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Optional, Union

from .errors import FormatError
from .logging_utils import get_logger, mask_sensitive_data
from .options import ConfigurationOptions
from .properties import LayeredPropertyStore, PathLike, load_properties
from .quoting import force_single_quote, strip_quotes
from .settings import SettingKey
from .urls import ensure_starts_with_https

logger = get_logger(__name__)

_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")

KeyLike = Union[SettingKey, str]


def _key(key: KeyLike) -> str:
    return key.value if isinstance(key, SettingKey) else key


def _to_boolean(value: Optional[str]) -> bool:
    return value is not None and value.lower() == "true"


class OpenShiftConfigurationBase:
    """Configuration layer exposing typed getters and setters.

    Args:
        file: Optional backing properties file. A missing or unreadable file
            gives an empty layer; ``save`` writes back to it.
        parent: Optional configuration whose store answers lookups this layer
            does not define.

    Examples:
        >>> defaults = OpenShiftConfigurationBase()
        >>> defaults.get_properties().set("timeout", "180000")
        >>> child = OpenShiftConfigurationBase(parent=defaults)
        >>> child.get_timeout()
        180000
    """

    def __init__(
        self,
        file: Optional[PathLike] = None,
        parent: Optional["OpenShiftConfigurationBase"] = None,
    ) -> None:
        self._file: Optional[Path] = Path(file) if file is not None else None
        parent_store = parent.get_properties() if parent is not None else None
        self._properties: LayeredPropertyStore = self._load_properties(self._file, parent_store)
        self._ssl_cert_checks = False

    def _load_properties(
        self, file: Optional[Path], parent_store: Optional[LayeredPropertyStore]
    ) -> LayeredPropertyStore:
        """Materialise this layer's store; subclasses override to seed values."""

        return load_properties(file, parent_store)

    # --- Store access ---

    @property
    def file(self) -> Optional[Path]:
        """Backing file of this layer, if any."""

        return self._file

    def get_properties(self) -> LayeredPropertyStore:
        """Return this layer's store; lookups on it still fall through to parents."""

        return self._properties

    def save(self) -> None:
        """Persist this layer's own entries to its backing file.

        Without a backing file this is a no-op.

        Raises:
            IOFailure: If the backing file cannot be written.
        """

        if self._file is None:
            logger.debug(
                "%s has no backing file; nothing to save",
                type(self).__name__,
                extra={"stage": "config"},
            )
            return
        self._properties.save(self._file)

    def _get(self, key: KeyLike) -> Optional[str]:
        return self._properties.get(_key(key))

    def _set(self, key: KeyLike, value: str) -> None:
        self._properties.set(_key(key), value)

    # --- Login and credentials ---

    def get_rhlogin(self) -> Optional[str]:
        return strip_quotes(self._get(SettingKey.RHLOGIN))

    def set_rhlogin(self, rhlogin: str) -> None:
        self._set(SettingKey.RHLOGIN, rhlogin)

    def get_password(self) -> Optional[str]:
        return strip_quotes(self._get(SettingKey.PASSWORD))

    def get_client_id(self) -> Optional[str]:
        """Return the client id exactly as stored, quotes included."""

        return self._get(SettingKey.CLIENT_ID)

    # --- Broker ---

    def get_libra_server(self) -> Optional[str]:
        """Return the broker URL, always with an ``https://`` prefix."""

        return ensure_starts_with_https(strip_quotes(self._get(SettingKey.LIBRA_SERVER)))

    def set_libra_server(self, libra_server: Optional[str]) -> None:
        self._set(SettingKey.LIBRA_SERVER, force_single_quote(libra_server))

    def get_libra_domain(self) -> Optional[str]:
        return strip_quotes(self._get(SettingKey.LIBRA_DOMAIN))

    def set_libra_domain(self, libra_domain: Optional[str]) -> None:
        self._set(SettingKey.LIBRA_DOMAIN, force_single_quote(libra_domain))

    def get_timeout(self) -> int:
        """Return the request timeout in milliseconds.

        Raises:
            FormatError: If no layer defines ``timeout`` or its value is not a
                base-10 integer.
        """

        raw = self._get(SettingKey.TIMEOUT)
        if raw is None:
            raise FormatError(
                f"No value configured for '{SettingKey.TIMEOUT.value}'",
                key=SettingKey.TIMEOUT.value,
            )
        if not _INTEGER_PATTERN.match(raw):
            raise FormatError(
                f"'{SettingKey.TIMEOUT.value}' must be an integer, got {raw!r}",
                key=SettingKey.TIMEOUT.value,
                value=raw,
            )
        return int(raw)

    # --- SSL ---

    def get_disable_bad_ssl_ciphers(self) -> ConfigurationOptions:
        raw = strip_quotes(self._get(SettingKey.DISABLE_BAD_SSL_CIPHERS))
        return ConfigurationOptions.safe_value_of(raw)

    def set_disable_bad_ssl_ciphers(self, option: ConfigurationOptions) -> None:
        self._set(SettingKey.DISABLE_BAD_SSL_CIPHERS, option.name)

    def set_enable_ssl_cert_checks(self, enabled: bool) -> None:
        """Toggle certificate checks for this session; the flag is never saved."""

        self._ssl_cert_checks = bool(enabled)

    def is_ssl_cert_checks_enabled(self) -> bool:
        return self._ssl_cert_checks

    # --- Proxy ---

    def get_proxy_host(self) -> Optional[str]:
        return strip_quotes(self._get(SettingKey.PROXY_HOST))

    def get_proxy_port(self) -> Optional[str]:
        return strip_quotes(self._get(SettingKey.PROXY_PORT))

    def get_proxy_set(self) -> bool:
        """Return ``True`` only when ``proxySet`` reads ``true`` (any case)."""

        return _to_boolean(strip_quotes(self._get(SettingKey.PROXY_SET)))

    # --- Diagnostics ---

    def describe(self) -> Dict[str, object]:
        """Snapshot of every recognised key as resolved through the layer chain.

        Values are the raw strings; the password is masked.
        """

        snapshot: Dict[str, object] = {key.value: self._get(key) for key in SettingKey}
        return mask_sensitive_data(snapshot)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(file={self._file!s})"


__all__ = ["OpenShiftConfigurationBase"]
