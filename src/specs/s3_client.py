"""boto3 client construction for resolved S3 configs.

This module maps an ``S3Config`` onto boto3 session and client
arguments. Creating a client sends no request.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import urlunsplit

from core.constants import ADDRESSING_VIRTUAL
from core.errors import FssDependencyError
from core.types import S3Config
from core.uri import split_uri
from specs.s3_endpoint import addressing_style, is_aws_endpoint


def session_kwargs(config: S3Config) -> dict[str, str]:
    """Build boto3 session arguments from credentials and region.

    Args:
        config: S3 config; unset fields are omitted.

    Returns:
        Keyword arguments for ``boto3.session.Session``.
    """
    field_map = {
        "aws_access_key_id": config.access_key_id,
        "aws_secret_access_key": config.secret_access_key,
        "aws_session_token": config.token,
        "region_name": config.region,
    }
    return {name: value for name, value in field_map.items() if value}


def client_kwargs(config: S3Config) -> dict[str, Any]:
    """Build boto3 S3 client arguments from the resolved endpoint.

    AWS endpoints are left to boto3, which derives them from the region;
    only the addressing style is pinned. S3-compatible endpoints are
    passed as ``endpoint_url``; botocore prepends the bucket itself for
    virtual-host addressing, so a leading ``<bucket>.`` label is removed.

    Args:
        config: Resolved S3 config.

    Returns:
        Keyword arguments for ``session.client("s3", ...)`` with an
        ``s3_options`` entry for the botocore config.
    """
    kwargs: dict[str, Any] = {}
    if config.endpoint and not is_aws_endpoint(config):
        kwargs["endpoint_url"] = config.endpoint
    if config.endpoint:
        style = addressing_style(config)
        kwargs["s3_options"] = {"addressing_style": style}
        if style == ADDRESSING_VIRTUAL and "endpoint_url" in kwargs:
            kwargs["endpoint_url"] = _without_bucket_label(config)
    return kwargs


def create_s3_client(config: S3Config) -> Any:
    """Create a boto3 S3 client for a resolved config.

    Args:
        config: Resolved S3 config.

    Returns:
        Boto3 S3 client.

    Raises:
        FssDependencyError: If boto3 is missing.
    """
    try:
        import boto3
        from botocore.config import Config as BotoConfig
    except ImportError as error:
        raise FssDependencyError(
            "S3 clients require boto3, but it is not installed. "
            "Install the fss[s3] extra to create clients."
        ) from error
    kwargs = client_kwargs(config)
    s3_options = kwargs.pop("s3_options", None)
    if s3_options:
        kwargs["config"] = BotoConfig(s3=s3_options)
    session = boto3.session.Session(**session_kwargs(config))
    return session.client("s3", **kwargs)


def _without_bucket_label(config: S3Config) -> str:
    """Drop the leading ``<bucket>.`` label from a virtual-host endpoint."""
    endpoint = config.endpoint or ""
    parts = split_uri(endpoint)
    host = parts.host or ""
    bare_host = host[len(config.bucket or "") + 1 :]
    netloc = parts.netloc.replace(host, bare_host, 1)
    return urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))
