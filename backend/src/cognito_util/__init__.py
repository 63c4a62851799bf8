"""Cognito user directory utilities."""

from cognito_util.client import BotoCognitoClient, CognitoClient
from cognito_util.cognito import CognitoUtil, build_filter
from cognito_util.config import CognitoEnvConfig, CognitoEnvKey
from cognito_util.exceptions import (
    AppError,
    CognitoConnectionError,
    ConfigurationError,
    CriticalError,
)

__all__ = [
    "AppError",
    "BotoCognitoClient",
    "CognitoClient",
    "CognitoConnectionError",
    "CognitoEnvConfig",
    "CognitoEnvKey",
    "CognitoUtil",
    "ConfigurationError",
    "CriticalError",
    "build_filter",
]
