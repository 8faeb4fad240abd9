"""URL helpers for broker addresses read from configuration."""

from __future__ import annotations

from typing import Optional

HTTP_PREFIX = "http://"
HTTPS_PREFIX = "https://"


def ensure_starts_with_https(url: Optional[str]) -> Optional[str]:
    """Return ``url`` with an ``https://`` scheme prefix.

    Bare host names are prefixed, ``http://`` is upgraded, and values that
    already use ``https://`` are returned untouched. ``None`` and the empty
    string pass through unchanged.

    Examples:
        >>> ensure_starts_with_https("openshift.redhat.com")
        'https://openshift.redhat.com'
        >>> ensure_starts_with_https("http://broker.example.com")
        'https://broker.example.com'
    """

    if not url:
        return url
    lowered = url.lower()
    if lowered.startswith(HTTPS_PREFIX):
        return url
    if lowered.startswith(HTTP_PREFIX):
        return HTTPS_PREFIX + url[len(HTTP_PREFIX) :]
    return HTTPS_PREFIX + url


__all__ = ["ensure_starts_with_https", "HTTP_PREFIX", "HTTPS_PREFIX"]
