"""Layered, file-backed configuration for the OpenShift client.

Settings are read from Java-style ``express.conf`` properties files and
resolved through a chain of layers (environment, user file, system file,
built-in defaults). Typical use::

    from OpenShiftClient.Configuration import OpenShiftConfiguration

    config = OpenShiftConfiguration()
    config.get_libra_server()      # 'https://openshift.redhat.com'
    config.user.set_rhlogin("dev@example.com")
    config.user.save()
"""

from .configuration import OpenShiftConfigurationBase
from .errors import ConfigurationError, FormatError, IOFailure
from .layers import (
    DefaultConfiguration,
    EnvironmentConfiguration,
    OpenShiftConfiguration,
    SystemConfiguration,
    UserConfiguration,
)
from .logging_utils import mask_sensitive_data, setup_logging
from .options import ConfigurationOptions, safe_parse
from .properties import LayeredPropertyStore, load_properties
from .quoting import force_single_quote, strip_quotes
from .settings import (
    DEFAULT_TIMEOUT,
    ConfigurationPaths,
    EnvironmentOverrides,
    LoggingConfiguration,
    SettingKey,
)
from .urls import ensure_starts_with_https

__all__ = [
    "ConfigurationError",
    "ConfigurationOptions",
    "ConfigurationPaths",
    "DEFAULT_TIMEOUT",
    "DefaultConfiguration",
    "EnvironmentConfiguration",
    "EnvironmentOverrides",
    "FormatError",
    "IOFailure",
    "LayeredPropertyStore",
    "LoggingConfiguration",
    "OpenShiftConfiguration",
    "OpenShiftConfigurationBase",
    "SettingKey",
    "SystemConfiguration",
    "UserConfiguration",
    "ensure_starts_with_https",
    "force_single_quote",
    "load_properties",
    "mask_sensitive_data",
    "safe_parse",
    "setup_logging",
    "strip_quotes",
]
