# === NAVMAP v1 ===
# {
#   "module": "OpenShiftClient.Configuration.layers",
#   "purpose": "Concrete configuration layers and the default lookup chain",
#   "sections": [
#     {"id": "defaults", "name": "DefaultConfiguration", "anchor": "class-defaultconfiguration", "kind": "class"},
#     {"id": "system", "name": "SystemConfiguration", "anchor": "class-systemconfiguration", "kind": "class"},
#     {"id": "user", "name": "UserConfiguration", "anchor": "class-userconfiguration", "kind": "class"},
#     {"id": "environment", "name": "EnvironmentConfiguration", "anchor": "class-environmentconfiguration", "kind": "class"},
#     {"id": "chain", "name": "OpenShiftConfiguration", "anchor": "class-openshiftconfiguration", "kind": "class"}
#   ]
# }
# === /NAVMAP ===

"""
Configuration Layers

The client resolves each setting through a fixed chain, most specific first::

    EnvironmentConfiguration   process environment
      -> UserConfiguration     ~/.openshift/express.conf
        -> SystemConfiguration /etc/openshift/express.conf
          -> DefaultConfiguration built-in defaults

:class:`OpenShiftConfiguration` assembles that chain. Each layer can also be
constructed on its own with an explicit parent, which is how tests and tools
compose partial chains.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .configuration import OpenShiftConfigurationBase
from .logging_utils import get_logger
from .properties import LayeredPropertyStore, PathLike
from .settings import (
    DEFAULT_LIBRA_DOMAIN,
    DEFAULT_LIBRA_SERVER,
    DEFAULT_TIMEOUT,
    ConfigurationPaths,
    EnvironmentOverrides,
    SettingKey,
)

logger = get_logger(__name__)


class DefaultConfiguration(OpenShiftConfigurationBase):
    """Root layer holding the built-in broker, domain and timeout defaults."""

    def __init__(self) -> None:
        super().__init__(None, None)

    def _load_properties(
        self, file: Optional[Path], parent_store: Optional[LayeredPropertyStore]
    ) -> LayeredPropertyStore:
        return LayeredPropertyStore(
            {
                SettingKey.LIBRA_SERVER.value: DEFAULT_LIBRA_SERVER,
                SettingKey.LIBRA_DOMAIN.value: DEFAULT_LIBRA_DOMAIN,
                SettingKey.TIMEOUT.value: DEFAULT_TIMEOUT,
            }
        )


class SystemConfiguration(OpenShiftConfigurationBase):
    """Layer backed by the machine-wide ``express.conf``."""

    def __init__(
        self,
        parent: Optional[OpenShiftConfigurationBase] = None,
        file: Optional[PathLike] = None,
    ) -> None:
        super().__init__(file if file is not None else ConfigurationPaths().system_config, parent)


class UserConfiguration(OpenShiftConfigurationBase):
    """Layer backed by the current user's ``express.conf``.

    This is the layer interactive tools write to: set the login or broker on
    it and call :meth:`save`.
    """

    def __init__(
        self,
        parent: Optional[OpenShiftConfigurationBase] = None,
        file: Optional[PathLike] = None,
    ) -> None:
        super().__init__(file if file is not None else ConfigurationPaths().user_config, parent)


class EnvironmentConfiguration(OpenShiftConfigurationBase):
    """In-memory layer seeded from process environment variables.

    See :class:`~OpenShiftClient.Configuration.settings.EnvironmentOverrides`
    for the variable names. The layer has no backing file, so :meth:`save`
    never writes environment values to disk.
    """

    def __init__(self, parent: Optional[OpenShiftConfigurationBase] = None) -> None:
        super().__init__(None, parent)

    def _load_properties(
        self, file: Optional[Path], parent_store: Optional[LayeredPropertyStore]
    ) -> LayeredPropertyStore:
        overrides = EnvironmentOverrides().as_properties()
        if overrides:
            logger.debug(
                "Environment overrides present for: %s",
                ", ".join(sorted(overrides)),
                extra={"stage": "config"},
            )
        return LayeredPropertyStore(overrides, parent=parent_store)


class OpenShiftConfiguration(OpenShiftConfigurationBase):
    """Complete client configuration: environment, user, system, then defaults.

    The outermost layer has no backing file; to persist user settings, save
    the :attr:`user` layer.
    """

    def __init__(self) -> None:
        self.defaults = DefaultConfiguration()
        self.system = SystemConfiguration(self.defaults)
        self.user = UserConfiguration(self.system)
        self.environment = EnvironmentConfiguration(self.user)
        super().__init__(None, self.environment)


__all__ = [
    "DefaultConfiguration",
    "SystemConfiguration",
    "UserConfiguration",
    "EnvironmentConfiguration",
    "OpenShiftConfiguration",
]
