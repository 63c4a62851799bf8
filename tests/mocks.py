"""In-memory stand-ins for AWS clients."""

from __future__ import annotations

from typing import Any
from typing import Optional
from typing import Sequence


TEST_REGION = 'us-east-1'
TEST_USER_POOL_ID = 'us-east-1_123456789'


class MockCognitoClient:
    """CognitoClient returning zero or one canned user.

    Every call is recorded so tests can assert on the arguments.
    """

    def __init__(
        self,
        should_find_user: bool,
        username: Optional[str] = 'username',
        error: Optional[Exception] = None,
    ):
        self.should_find_user = should_find_user
        self.username = username
        self.error = error
        self.list_users_calls: list[tuple[str, str, int]] = []
        self.delete_calls: list[tuple[str, str, list[str]]] = []

    @property
    def calls(self) -> int:
        return len(self.list_users_calls) + len(self.delete_calls)

    def list_users(
        self,
        user_pool_id: str,
        filter_expression: str,
        limit: int,
    ) -> dict[str, Any]:
        self.list_users_calls.append((user_pool_id, filter_expression, limit))
        if self.error is not None:
            raise self.error
        users: list[dict[str, Any]] = []
        if self.should_find_user:
            user: dict[str, Any] = {'Attributes': [], 'Enabled': True}
            if self.username is not None:
                user['Username'] = self.username
            users.append(user)
        return {'Users': users}

    def admin_delete_user_attributes(
        self,
        user_pool_id: str,
        username: str,
        attribute_names: Sequence[str],
    ) -> dict[str, Any]:
        self.delete_calls.append((user_pool_id, username, list(attribute_names)))
        return {}
