"""Cognito user directory helpers.

CognitoUtil looks users up by attribute and removes their email attribute.
It works against any CognitoClient, so tests can inject an in-memory
client while production code goes through boto3.
"""

from __future__ import annotations

from typing import Optional

from botocore.exceptions import BotoCoreError, ClientError

from cognito_util.client import BotoCognitoClient, CognitoClient
from cognito_util.config import CognitoEnvConfig, CognitoEnvKey
from cognito_util.exceptions import CognitoConnectionError, CriticalError
from cognito_util.services.aws_clients import get_cognito_idp_client
from cognito_util.utils.logging import get_logger, mask_email, mask_pii

logger = get_logger(__name__)

EMAIL_ATTRIBUTE = "email"
SUB_ATTRIBUTE = "sub"


def build_filter(attribute_name: str, value: str) -> str:
    """Build a ListUsers equality filter, e.g. ``email = "a@b.com"``."""
    return f'{attribute_name} = "{value}"'


class CognitoUtil:
    """Username lookup and attribute removal for one user pool."""

    def __init__(self, client: CognitoClient, env: CognitoEnvConfig):
        self.client = client
        self.env = env

    @classmethod
    def from_env(cls, env: Optional[CognitoEnvConfig] = None) -> CognitoUtil:
        """Build a CognitoUtil backed by boto3.

        The client's region comes from ``COGNITO_REGION``; a missing value
        raises ConfigurationError before any client is created.
        """
        env = env if env is not None else CognitoEnvConfig.from_env()
        region = env.get(CognitoEnvKey.REGION)
        return cls(BotoCognitoClient(get_cognito_idp_client(region)), env)

    def get_username_from_email(self, email: str) -> Optional[str]:
        """Return the username whose email matches, or None."""
        logger.debug(f"Looking up Cognito user by email {mask_email(email)}")
        return self.get_username_from_attribute(EMAIL_ATTRIBUTE, email)

    def delete_email_for_user(self, subject_id: str) -> None:
        """Remove the email attribute from the user with this ``sub``.

        Does nothing if no user matches.
        """
        username = self.get_username_from_attribute(SUB_ATTRIBUTE, subject_id)
        if username is None:
            logger.info(
                f"No Cognito user for sub {mask_pii(subject_id)}; nothing to delete"
            )
            return

        user_pool_id = self.env.get(CognitoEnvKey.USER_POOL_ID)
        try:
            self.client.admin_delete_user_attributes(
                user_pool_id,
                username,
                [EMAIL_ATTRIBUTE],
            )
        except (ClientError, BotoCoreError) as exc:
            raise CognitoConnectionError(str(exc)) from exc

        logger.info(f"Deleted email attribute for Cognito user {mask_pii(username)}")

    def get_username_from_attribute(
        self,
        attribute_name: str,
        value: str,
    ) -> Optional[str]:
        """Return the username of the user whose *attribute_name* equals *value*.

        Raises:
            ConfigurationError: If the user pool id is not configured.
            CognitoConnectionError: If the ListUsers call fails.
            CriticalError: If a user matches but has no username.
        """
        user_pool_id = self.env.get(CognitoEnvKey.USER_POOL_ID)

        try:
            response = self.client.list_users(
                user_pool_id,
                build_filter(attribute_name, value),
                1,
            )
        except (ClientError, BotoCoreError) as exc:
            raise CognitoConnectionError(str(exc)) from exc

        users = response.get("Users") or []
        if not users:
            return None

        username = users[-1].get("Username")
        if not username:
            raise CriticalError(
                "user found but username is missing",
                detail=f"{attribute_name} lookup",
            )
        return username
