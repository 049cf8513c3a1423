"""Public surface for FSS.

This module provides a stable import path for file storage specs.
It re-exports the backend parsers and typed entry models.
"""

from __future__ import annotations

from core.config import config_from_environment
from core.errors import (
    FssConfigError,
    FssDependencyError,
    FssError,
    FssInvalidUriError,
    FssMissingEndpointError,
    FssMissingFieldError,
    FssUnresolvableBucketError,
)
from core.types import Entry, HttpConfig, HttpEntry, LocalEntry, S3Config, S3Entry
from specs import http, local, s3
from specs.entry import parse_entry
from specs.s3_bucket_url import parse_bucket_url
from specs.s3_endpoint import addressing_style, object_url

__all__ = [
    "Entry",
    "FssConfigError",
    "FssDependencyError",
    "FssError",
    "FssInvalidUriError",
    "FssMissingEndpointError",
    "FssMissingFieldError",
    "FssUnresolvableBucketError",
    "HttpConfig",
    "HttpEntry",
    "LocalEntry",
    "S3Config",
    "S3Entry",
    "addressing_style",
    "config_from_environment",
    "http",
    "local",
    "object_url",
    "parse_bucket_url",
    "parse_entry",
    "s3",
]
