"""Environment configuration for the Cognito utilities."""

from __future__ import annotations

import enum
import os
from types import MappingProxyType
from typing import Mapping
from typing import Optional

from cognito_util.exceptions import ConfigurationError


class CognitoEnvKey(str, enum.Enum):
    """Required settings, valued by their environment variable name."""

    REGION = "COGNITO_REGION"
    USER_POOL_ID = "COGNITO_USER_POOL_ID"


class CognitoEnvConfig:
    """Read-only snapshot of the Cognito settings.

    Values are captured once at construction. Missing or empty values are
    left out, and reading them later raises ConfigurationError.
    """

    def __init__(self, values: Mapping[CognitoEnvKey, str]):
        self._values = MappingProxyType(
            {CognitoEnvKey(key): value for key, value in values.items() if value}
        )

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
    ) -> CognitoEnvConfig:
        """Build a config from ``os.environ`` or the given mapping."""
        source = os.environ if environ is None else environ
        values: dict[CognitoEnvKey, str] = {}
        for key in CognitoEnvKey:
            value = source.get(key.value)
            if value:
                values[key] = value
        return cls(values)

    def get(self, key: CognitoEnvKey) -> str:
        """Return the value for *key* or raise ConfigurationError."""
        value = self._values.get(key)
        if not value:
            raise ConfigurationError(key.value)
        return value

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __repr__(self) -> str:
        keys = ", ".join(key.name for key in self._values)
        return f"CognitoEnvConfig({keys})"
