"""boto3 client factory for Cognito, cached per region."""

from __future__ import annotations

from typing import Any

import boto3

from cognito_util.utils.logging import get_logger

logger = get_logger(__name__)

COGNITO_IDP_SERVICE = "cognito-idp"

_CLIENT_CACHE: dict[str, Any] = {}


def get_cognito_idp_client(region_name: str) -> Any:
    """Return the shared ``cognito-idp`` client for *region_name*.

    boto3 clients are thread-safe, so one client per region is reused for
    every call made by this process.
    """
    client = _CLIENT_CACHE.get(region_name)
    if client is None:
        logger.debug(f"Creating {COGNITO_IDP_SERVICE} client for {region_name}")
        client = boto3.client(  # type: ignore[call-overload]
            COGNITO_IDP_SERVICE,
            region_name=region_name,
        )
        _CLIENT_CACHE[region_name] = client
    return client


def clear_client_cache() -> None:
    """Clear cached boto3 clients (useful in tests)."""
    _CLIENT_CACHE.clear()
