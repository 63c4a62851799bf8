"""AWS service helpers."""

from cognito_util.services.aws_clients import (
    clear_client_cache,
    get_cognito_idp_client,
)

__all__ = [
    "clear_client_cache",
    "get_cognito_idp_client",
]
