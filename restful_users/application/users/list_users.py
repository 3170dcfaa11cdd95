"""
Use case: List every stored user.

Input: None
Output: list[UserResult]
Side effects: None (read-only query).
Failure cases: None.
"""

import logging

from restful_users.application.users.dtos import UserResult
from restful_users.application.users.mappers import to_user_result
from restful_users.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)


class ListUsersUseCase:
    """Returns all users in storage-defined order."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self) -> list[UserResult]:
        """Run the list users use case."""
        logger.info("Getting all users")
        return [to_user_result(user) for user in self._user_repo.find_all()]
