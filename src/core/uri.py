"""Generic URI splitting helpers.

This module centralizes URI parsing for every storage backend.
It keeps host, port and path extraction consistent across parsers.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit, urlunsplit

from core.errors import FssInvalidUriError


@dataclass(frozen=True)
class UriParts:
    """Parsed URI components.

    Attributes:
        scheme: Lowercased scheme, empty when absent.
        host: Host name with case preserved, ``None`` without an authority.
        port: Port number when given.
        path: Path component, empty when absent.
        netloc: Raw authority component.
        query: Raw query string.
        fragment: Raw fragment.
        has_authority: Whether the URI carries a ``//`` authority section.
    """

    scheme: str
    host: str | None
    port: int | None
    path: str
    netloc: str
    query: str
    fragment: str
    has_authority: bool

    def origin(self) -> str:
        """Return ``scheme://netloc`` with path, query and fragment removed."""
        return urlunsplit((self.scheme, self.netloc, "", "", ""))


def split_uri(uri: str) -> UriParts:
    """Split a URI into typed components.

    Args:
        uri: Raw URI or path string.

    Returns:
        Parsed URI components.

    Raises:
        FssInvalidUriError: If the URI cannot be parsed, for example
            because of a malformed port or IPv6 literal.
    """
    try:
        parsed = urlsplit(uri)
        port = parsed.port
    except ValueError as error:
        raise FssInvalidUriError(f"Invalid URI {uri!r}: {error}.") from error
    return UriParts(
        scheme=parsed.scheme,
        host=_host_from_netloc(parsed.netloc),
        port=port,
        path=parsed.path,
        netloc=parsed.netloc,
        query=parsed.query,
        fragment=parsed.fragment,
        has_authority=_has_authority(uri, parsed.scheme),
    )


def _host_from_netloc(netloc: str) -> str | None:
    """Extract the host from an authority, dropping userinfo and port.

    Args:
        netloc: Raw authority section.

    Returns:
        Host string, or ``None`` when the authority is empty.
    """
    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        host = host[1 : host.find("]") + 1]
    else:
        host = host.partition(":")[0]
    return host or None


def _has_authority(uri: str, scheme: str) -> bool:
    remainder = uri.strip()[len(scheme) + 1 :] if scheme else uri.strip()
    return remainder.startswith("//")


def redact_uri(uri: str | None) -> str | None:
    """Reduce a URI to ``scheme://host[:port]`` for logging.

    Userinfo, path, query and fragment are dropped, so credentials and
    presigned query parameters never reach log output.

    Args:
        uri: Raw URI, or ``None``.

    Returns:
        Redacted URI, ``None`` for ``None``, or ``"<unparseable>"``.
    """
    if uri is None:
        return None
    try:
        parts = split_uri(uri)
    except FssInvalidUriError:
        return "<unparseable>"
    if parts.host is None:
        return f"{parts.scheme}:" if parts.scheme else ""
    host = parts.host if parts.port is None else f"{parts.host}:{parts.port}"
    return urlunsplit((parts.scheme, host, "", "", ""))
