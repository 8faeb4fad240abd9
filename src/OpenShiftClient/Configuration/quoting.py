# === NAVMAP v1 ===
# {
#   "module": "OpenShiftClient.Configuration.quoting",
#   "purpose": "Quote normalisation helpers for hand-edited configuration values",
#   "sections": [
#     {
#       "id": "strip-quotes",
#       "name": "strip_quotes",
#       "anchor": "function-strip-quotes",
#       "kind": "function"
#     },
#     {
#       "id": "force-single-quote",
#       "name": "force_single_quote",
#       "anchor": "function-force-single-quote",
#       "kind": "function"
#     }
#   ]
# }
# === /NAVMAP ===

"""Quote normalisation for raw configuration values.

Values in ``express.conf`` files may be written bare, single-quoted, or
double-quoted. Readers strip whatever quoting is present; a couple of writers
(server and domain) always store the value single-quoted so that the shell
tooling sharing the file keeps working.
"""

from __future__ import annotations

import re
from typing import Optional

SINGLE_QUOTE = "'"

_QUOTED_PATTERN = re.compile(r"""['"]*([^'"]+)['"]*""")
_EMPTY_QUOTED = frozenset({"''", '""'})


def strip_quotes(value: Optional[str]) -> Optional[str]:
    """Remove leading and trailing quote characters from ``value``.

    Args:
        value: Raw value as read from a properties store, or ``None``.

    Returns:
        ``None`` when ``value`` is ``None``; otherwise the first run of
        non-quote characters with its surrounding quotes removed. Input made
        only of quote characters is returned unchanged, with exactly two
        exceptions: the empty pairs ``''`` and ``""`` strip to ``""``. Mixed or
        longer quote-only runs such as ``'"`` or ``''''`` pass through as is.

    Examples:
        >>> strip_quotes("'openshift.redhat.com'")
        'openshift.redhat.com'
        >>> strip_quotes('"mylogin"')
        'mylogin'
        >>> strip_quotes("plain")
        'plain'
        >>> strip_quotes(None) is None
        True
    """

    if value is None:
        return None
    if value in _EMPTY_QUOTED:
        return ""
    match = _QUOTED_PATTERN.search(value)
    if match is None:
        return value
    return match.group(1)


def force_single_quote(value: Optional[str]) -> str:
    """Return ``value`` wrapped in exactly one pair of single quotes.

    Existing quotes are stripped first so already-quoted input is not double
    wrapped. ``None`` is treated as the empty string.

    Examples:
        >>> force_single_quote('"rhcloud.com"')
        "'rhcloud.com'"
        >>> force_single_quote(None)
        "''"
    """

    stripped = strip_quotes(value)
    return f"{SINGLE_QUOTE}{stripped or ''}{SINGLE_QUOTE}"


__all__ = ["SINGLE_QUOTE", "strip_quotes", "force_single_quote"]
