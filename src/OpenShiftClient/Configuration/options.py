"""Tri-state configuration options and tolerant enum parsing."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Type, TypeVar

E = TypeVar("E", bound=Enum)


def safe_parse(name: Optional[str], enum_cls: Type[E], fallback: E) -> E:
    """Resolve ``name`` to a member of ``enum_cls`` without raising.

    Member names are compared case-insensitively. ``None``, an empty string,
    or text that matches no member yields ``fallback``.

    Examples:
        >>> safe_parse("yEs", ConfigurationOptions, ConfigurationOptions.NO)
        <ConfigurationOptions.YES: 'YES'>
        >>> safe_parse("bogus", ConfigurationOptions, ConfigurationOptions.NO)
        <ConfigurationOptions.NO: 'NO'>
    """

    if name is None:
        return fallback
    wanted = name.upper()
    for member in enum_cls:
        if member.name.upper() == wanted:
            return member
    return fallback


class ConfigurationOptions(Enum):
    """Boolean-like setting that also supports an automatic state."""

    YES = "YES"
    NO = "NO"
    AUTO = "AUTO"

    @classmethod
    def safe_value_of(cls, name: Optional[str]) -> "ConfigurationOptions":
        """Parse ``name`` leniently, defaulting to :attr:`NO`."""

        return safe_parse(name, cls, cls.NO)

    def __str__(self) -> str:
        return self.name


__all__ = ["ConfigurationOptions", "safe_parse"]
