# === NAVMAP v1 ===
# {
#   "module": "OpenShiftClient.Configuration.properties",
#   "purpose": "Layered key/value store backed by Java-style properties files",
#   "sections": [
#     {
#       "id": "layeredpropertystore",
#       "name": "LayeredPropertyStore",
#       "anchor": "class-layeredpropertystore",
#       "kind": "class"
#     },
#     {
#       "id": "load-properties",
#       "name": "load_properties",
#       "anchor": "function-load-properties",
#       "kind": "function"
#     },
#     {
#       "id": "is-readable-file",
#       "name": "_is_readable_file",
#       "anchor": "function-is-readable-file",
#       "kind": "function"
#     },
#     {
#       "id": "file-mode",
#       "name": "_file_mode",
#       "anchor": "function-file-mode",
#       "kind": "function"
#     }
#   ]
# }
# === /NAVMAP ===

"""
Layered Property Store

A :class:`LayeredPropertyStore` holds the raw string settings of one
configuration layer and an optional reference to the store of the next, less
specific layer. Reads fall through the chain on a local miss; writes and saves
only ever touch the local map.

The on-disk format is the Java properties grammar used by the OpenShift client
tooling, parsed and written with ``jproperties``. Files are read and written
as UTF-8.

Saving replaces the destination wholesale. Two processes saving the same file
concurrently race (last writer wins); the atomic replace only guarantees that
readers never observe a partially written file.
"""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from typing import Dict, Iterator, List, Mapping, Optional, Tuple, Union

from jproperties import ParseError, Properties

from .errors import IOFailure
from .logging_utils import get_logger

ENCODING = "utf-8"

PathLike = Union[str, "os.PathLike[str]"]

logger = get_logger(__name__)


class LayeredPropertyStore:
    """String key/value map with fall-through lookups to a parent store.

    Attributes:
        parent: Store consulted when a key is missing locally. The parent is
            referenced, not owned; it is never written through this store.

    Examples:
        >>> defaults = LayeredPropertyStore({"timeout": "180000"})
        >>> store = LayeredPropertyStore(parent=defaults)
        >>> store.get("timeout")
        '180000'
        >>> store.set("timeout", "5000")
        >>> (store.get("timeout"), defaults.get("timeout"))
        ('5000', '180000')
    """

    def __init__(
        self,
        values: Optional[Mapping[str, str]] = None,
        parent: Optional["LayeredPropertyStore"] = None,
    ) -> None:
        self._local: Dict[str, str] = {}
        self.parent = parent
        for key, value in (values or {}).items():
            self.set(key, value)

    def get(self, key: str) -> Optional[str]:
        """Return the value for ``key`` from the nearest layer that defines it."""

        store: Optional[LayeredPropertyStore] = self
        while store is not None:
            if key in store._local:
                return store._local[key]
            store = store.parent
        return None

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key`` in this layer only."""

        if not isinstance(key, str):
            raise TypeError(f"property keys must be strings, not {type(key).__name__}")
        if not isinstance(value, str):
            raise TypeError(f"property '{key}' must be a string, not {type(value).__name__}")
        self._local[key] = value

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self.get(key) is not None

    def __len__(self) -> int:
        return len(self._local)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._local))

    def keys(self) -> List[str]:
        """Keys defined in this layer, excluding parents."""

        return list(self._local)

    def items(self) -> List[Tuple[str, str]]:
        """Entries defined in this layer, excluding parents."""

        return list(self._local.items())

    @property
    def local(self) -> Dict[str, str]:
        """Copy of the entries defined in this layer."""

        return dict(self._local)

    def save(self, path: Optional[PathLike]) -> None:
        """Write the local entries to ``path``, replacing its contents.

        Parent entries are never written. A ``None`` path makes this a no-op so
        purely in-memory layers can be saved unconditionally.

        Raises:
            IOFailure: If the file or its directory cannot be written.
        """

        if path is None:
            return
        destination = Path(path)
        properties = Properties()
        for key, value in self._local.items():
            properties[key] = value

        temp_name: Optional[str] = None
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "wb",
                dir=destination.parent,
                prefix=f".{destination.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                temp_name = handle.name
                properties.store(handle, encoding=ENCODING, timestamp=True)
                handle.flush()
                os.fsync(handle.fileno())
            os.chmod(temp_name, _file_mode(destination))
            Path(temp_name).replace(destination)
        except OSError as exc:
            if temp_name is not None:
                Path(temp_name).unlink(missing_ok=True)
            raise IOFailure(
                f"Unable to save configuration to {destination}: {exc}", path=destination
            ) from exc

        logger.info(
            "Saved %d setting(s) to %s",
            len(self._local),
            destination,
            extra={"stage": "config"},
        )

    def __repr__(self) -> str:
        return (
            f"LayeredPropertyStore(keys={sorted(self._local)!r}, "
            f"has_parent={self.parent is not None})"
        )


def _file_mode(destination: Path) -> int:
    """Permission bits for a saved file: the existing ones, else 0o666 minus umask."""

    try:
        return stat.S_IMODE(destination.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _is_readable_file(path: Path) -> bool:
    try:
        return path.is_file() and os.access(path, os.R_OK)
    except OSError:
        return False


def load_properties(
    path: Optional[PathLike],
    parent: Optional[LayeredPropertyStore] = None,
) -> LayeredPropertyStore:
    """Build a store from the properties file at ``path``.

    Args:
        path: Backing file, or ``None`` for an in-memory store.
        parent: Store to fall back to on local misses.

    Returns:
        A store holding the file's entries, or an empty store when ``path`` is
        ``None``, missing, or not readable by the current user.

    Raises:
        IOFailure: If a readable file cannot be read or is not valid
            properties text.
    """

    if path is None:
        return LayeredPropertyStore(parent=parent)
    source = Path(path)
    if not _is_readable_file(source):
        logger.debug(
            "Configuration file %s is absent or unreadable; starting empty",
            source,
            extra={"stage": "config"},
        )
        return LayeredPropertyStore(parent=parent)

    properties = Properties()
    try:
        with source.open("rb") as handle:
            properties.load(handle, ENCODING)
    except OSError as exc:
        raise IOFailure(f"Unable to read configuration from {source}: {exc}", path=source) from exc
    except (ParseError, UnicodeDecodeError) as exc:
        raise IOFailure(
            f"Configuration file {source} is not valid properties text: {exc}", path=source
        ) from exc

    store = LayeredPropertyStore(properties.properties, parent=parent)
    logger.debug(
        "Loaded %d setting(s) from %s",
        len(store),
        source,
        extra={"stage": "config"},
    )
    return store


__all__ = ["ENCODING", "LayeredPropertyStore", "load_properties"]
