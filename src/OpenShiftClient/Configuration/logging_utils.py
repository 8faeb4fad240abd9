# === NAVMAP v1 ===
# {
#   "module": "OpenShiftClient.Configuration.logging_utils",
#   "purpose": "Logging setup and secret masking for configuration diagnostics",
#   "sections": [
#     {
#       "id": "mask-sensitive-data",
#       "name": "mask_sensitive_data",
#       "anchor": "function-mask-sensitive-data",
#       "kind": "function"
#     },
#     {
#       "id": "jsonformatter",
#       "name": "JSONFormatter",
#       "anchor": "class-jsonformatter",
#       "kind": "class"
#     },
#     {
#       "id": "setup-logging",
#       "name": "setup_logging",
#       "anchor": "function-setup-logging",
#       "kind": "function"
#     }
#   ]
# }
# === /NAVMAP ===

"""
Logging Utilities

Configuration layers log where values came from (which file was read, which
layer fell back to an empty store, when a file was written). Those records can
carry the user's password, so everything that serialises a settings mapping
goes through :func:`mask_sensitive_data` first.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Dict, Mapping, Optional

from .settings import LoggingConfiguration, SettingKey

LOGGER_NAME = "OpenShiftClient.Configuration"
MASK = "***masked***"

_SENSITIVE_KEYS = frozenset(
    {
        SettingKey.PASSWORD.value,
        "password",
        "authorization",
        "api_key",
        "apikey",
        "token",
        "secret",
    }
)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger or one of its children."""

    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def mask_sensitive_data(payload: Mapping[str, object]) -> Dict[str, object]:
    """Return a copy of ``payload`` with secret fields replaced.

    Args:
        payload: Arbitrary key/value pairs, typically a settings snapshot.

    Returns:
        Copy of the payload where password-like fields hold ``***masked***``.
        Absent (``None``) secrets stay ``None`` so diagnostics still show that
        nothing was configured.

    Examples:
        >>> mask_sensitive_data({"rhpassword": "s3cret", "libra_server": "x"})
        {'rhpassword': '***masked***', 'libra_server': 'x'}
    """

    masked: Dict[str, object] = {}
    for key, value in payload.items():
        if key.lower() in _SENSITIVE_KEYS and value is not None:
            masked[key] = MASK
        else:
            masked[key] = value
    return masked


class JSONFormatter(logging.Formatter):
    """Formatter emitting one JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        now = datetime.now(timezone.utc)
        log_obj: Dict[str, object] = {
            "timestamp": now.isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "stage": getattr(record, "stage", None),
        }
        if hasattr(record, "extra_fields") and isinstance(record.extra_fields, dict):
            log_obj.update(record.extra_fields)
        if record.exc_info:
            log_obj["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(mask_sensitive_data(log_obj), default=str)


def setup_logging(config: Optional[LoggingConfiguration] = None) -> logging.Logger:
    """Attach managed handlers to the configuration logger.

    Calling this repeatedly replaces the handlers installed by an earlier call
    instead of stacking duplicates.

    Args:
        config: Logging options; read from ``OPENSHIFT_LOG_*`` when omitted.

    Returns:
        The ``OpenShiftClient.Configuration`` logger.
    """

    config = config or LoggingConfiguration()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, config.level.upper(), logging.INFO))

    for handler in list(logger.handlers):
        if getattr(handler, "_openshift_managed", False):
            logger.removeHandler(handler)
            handler.close()

    formatter: logging.Formatter
    if config.emit_json:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter("%(levelname)s: %(name)s: %(message)s")

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    stream_handler._openshift_managed = True  # type: ignore[attr-defined]
    logger.addHandler(stream_handler)

    if config.file is not None:
        config.file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            config.file,
            maxBytes=int(config.max_size_mb * 1024 * 1024),
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(JSONFormatter())
        file_handler._openshift_managed = True  # type: ignore[attr-defined]
        logger.addHandler(file_handler)

    logger.propagate = True
    return logger


__all__ = ["LOGGER_NAME", "JSONFormatter", "get_logger", "mask_sensitive_data", "setup_logging"]
