"""Cognito client interface.

The facade talks to Cognito through the narrow CognitoClient protocol so
tests can swap in an in-memory client. BotoCognitoClient is the production
implementation backed by a boto3 ``cognito-idp`` client.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence


class CognitoClient(Protocol):
    """The subset of the Cognito API used by CognitoUtil."""

    def list_users(
        self,
        user_pool_id: str,
        filter_expression: str,
        limit: int,
    ) -> dict[str, Any]:
        ...

    def admin_delete_user_attributes(
        self,
        user_pool_id: str,
        username: str,
        attribute_names: Sequence[str],
    ) -> dict[str, Any]:
        ...


class BotoCognitoClient:
    """CognitoClient backed by a boto3 ``cognito-idp`` client.

    botocore errors are raised unchanged; translating them is the caller's
    job.
    """

    def __init__(self, client: Any):
        self._client = client

    def list_users(
        self,
        user_pool_id: str,
        filter_expression: str,
        limit: int,
    ) -> dict[str, Any]:
        return self._client.list_users(
            UserPoolId=user_pool_id,
            Filter=filter_expression,
            Limit=limit,
        )

    def admin_delete_user_attributes(
        self,
        user_pool_id: str,
        username: str,
        attribute_names: Sequence[str],
    ) -> dict[str, Any]:
        return self._client.admin_delete_user_attributes(
            UserPoolId=user_pool_id,
            Username=username,
            UserAttributeNames=list(attribute_names),
        )
