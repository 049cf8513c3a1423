"""Core constants used across FSS modules.

This module centralizes env var names, schemes and AWS host parts.
Keeping values here avoids magic literals in parsing logic.
"""

from __future__ import annotations

ENV_ACCESS_KEY_ID = "AWS_ACCESS_KEY_ID"
ENV_SECRET_ACCESS_KEY = "AWS_SECRET_ACCESS_KEY"
ENV_REGION = "AWS_REGION"
ENV_DEFAULT_REGION = "AWS_DEFAULT_REGION"
ENV_SESSION_TOKEN = "AWS_SESSION_TOKEN"
S3_SCHEME = "s3"
HTTP_SCHEMES = ("http", "https")
FILE_SCHEME = "file"
AWS_S3_HOST_LABEL = "s3"
AWS_DOMAIN_LABELS = ("amazonaws", "com")
AWS_S3_HOST_TEMPLATE = "s3.{region}.amazonaws.com"
AWS_ENDPOINT_SCHEME = "https"
S3_CONFIG_FIELDS = (
    "access_key_id",
    "secret_access_key",
    "region",
    "endpoint",
    "token",
    "bucket",
)
HTTP_CONFIG_FIELDS = ("headers",)
REQUIRED_S3_FIELDS = (
    ("access_key_id", ENV_ACCESS_KEY_ID),
    ("secret_access_key", ENV_SECRET_ACCESS_KEY),
    ("region", ENV_REGION),
)
ADDRESSING_VIRTUAL = "virtual"
ADDRESSING_PATH = "path"
