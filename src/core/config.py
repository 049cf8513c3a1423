"""Environment defaults for S3 configuration.

This module owns all environment variable parsing.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

import os

from core.constants import (
    ENV_ACCESS_KEY_ID,
    ENV_DEFAULT_REGION,
    ENV_REGION,
    ENV_SECRET_ACCESS_KEY,
    ENV_SESSION_TOKEN,
)
from core.types import S3Config


def config_from_environment() -> S3Config:
    """Build an S3 config from process environment variables.

    Absent variables map to ``None``. The region falls back to
    ``AWS_DEFAULT_REGION`` only when ``AWS_REGION`` is unset. Values are
    read on every call, so environment changes are observed.

    Returns:
        Config with credentials, region and token; bucket and endpoint unset.
    """
    return S3Config(
        access_key_id=os.getenv(ENV_ACCESS_KEY_ID),
        secret_access_key=os.getenv(ENV_SECRET_ACCESS_KEY),
        region=os.getenv(ENV_REGION, os.getenv(ENV_DEFAULT_REGION)),
        token=os.getenv(ENV_SESSION_TOKEN),
    )
