"""Utility modules for the Cognito helpers."""

from cognito_util.utils.logging import (
    configure_logging,
    get_logger,
    mask_email,
    mask_pii,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "mask_email",
    "mask_pii",
]
