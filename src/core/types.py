"""Shared typed models.

This module defines immutable entry and config models returned by
the backend parsers and consumed by downstream I/O layers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from core.errors import FssConfigError


@dataclass(frozen=True)
class LocalEntry:
    """A file on the local filesystem.

    Attributes:
        path: Filesystem path, kept verbatim.
    """

    path: str


@dataclass(frozen=True)
class HttpConfig:
    """Request settings for an HTTP(S) resource.

    Attributes:
        headers: Ordered ``(name, value)`` string pairs.
    """

    headers: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", _freeze_headers(self.headers))


@dataclass(frozen=True)
class HttpEntry:
    """An HTTP(S) resource.

    Attributes:
        url: Resource URL, kept verbatim.
        config: Header settings used to reach the URL.
    """

    url: str
    config: HttpConfig = field(default_factory=HttpConfig)


@dataclass(frozen=True)
class S3Config:
    """Credentials and addressing for an S3 or S3-compatible bucket.

    Attributes:
        access_key_id: AWS access key id.
        secret_access_key: AWS secret access key.
        region: Bucket region; optional for addressing when endpoint is set.
        endpoint: Base URL of the S3 service. Derived from bucket and
            region when absent.
        token: Optional session token.
        bucket: Bucket name, always taken from the parsed URI or URL.
    """

    access_key_id: str | None = None
    secret_access_key: str | None = None
    region: str | None = None
    endpoint: str | None = None
    token: str | None = None
    bucket: str | None = None

    def __repr__(self) -> str:
        return (
            "S3Config("
            f"access_key_id={self.access_key_id!r}, "
            f"secret_access_key={_mask(self.secret_access_key)}, "
            f"region={self.region!r}, "
            f"endpoint={self.endpoint!r}, "
            f"token={_mask(self.token)}, "
            f"bucket={self.bucket!r})"
        )


@dataclass(frozen=True)
class S3Entry:
    """An object inside an S3 bucket.

    Attributes:
        key: Object key without the leading slash; may be empty.
        config: Resolved config carrying bucket and endpoint.
    """

    key: str
    config: S3Config


Entry = Union[LocalEntry, HttpEntry, S3Entry]


def _freeze_headers(headers: Any) -> tuple[tuple[str, str], ...]:
    """Validate header pairs and convert them to nested tuples.

    Args:
        headers: Sequence of two-element string pairs.

    Returns:
        Headers as a tuple of ``(name, value)`` tuples, order preserved.

    Raises:
        FssConfigError: If headers is not a sequence of string pairs.
    """
    if isinstance(headers, (str, bytes)) or not isinstance(headers, (list, tuple)):
        raise _invalid_headers(headers)
    frozen: list[tuple[str, str]] = []
    for pair in headers:
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise _invalid_headers(headers)
        name, value = pair
        if not isinstance(name, str) or not isinstance(value, str):
            raise _invalid_headers(headers)
        frozen.append((name, value))
    return tuple(frozen)


def _invalid_headers(headers: Any) -> FssConfigError:
    return FssConfigError(
        "one of the headers is invalid. Expecting a list of "
        f'("key", "value") string pairs, but got: {headers!r}'
    )


def _mask(secret: str | None) -> str:
    return "None" if secret is None else "'***'"
