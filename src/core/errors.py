"""FSS exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each failure class raises a specific error type for debuggability.
"""

from __future__ import annotations


class FssError(Exception):
    """Base exception for all FSS failures."""


class FssInvalidUriError(FssError):
    """Raised when a URI does not match the shape a backend expects."""


class FssConfigError(FssError):
    """Raised for configuration values of the wrong shape or with unknown keys."""


class FssMissingFieldError(FssError):
    """Raised when a required S3 credential or region field is empty.

    Attributes:
        field: Name of the missing config field.
        env_var: Environment variable that can supply the field.
    """

    def __init__(self, field: str, env_var: str) -> None:
        self.field = field
        self.env_var = env_var
        super().__init__(
            f"missing {field!r} for S3 config. "
            f"Set the {field} key or the {env_var} env var."
        )


class FssMissingEndpointError(FssError):
    """Raised when neither a bucket nor an endpoint is available."""


class FssUnresolvableBucketError(FssError):
    """Raised when a bucket name cannot be extracted from a bucket URL."""


class FssDependencyError(FssError):
    """Raised when an optional runtime dependency is missing."""
