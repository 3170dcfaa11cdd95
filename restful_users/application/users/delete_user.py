"""
Use case: Delete a user.

Input: DeleteUserCommand (user_id)
Output: None
Side effects: Removes one user record.
Failure cases: UserNotFoundError (deleting a missing user is not a no-op).
"""

import logging

from restful_users.application.users.dtos import DeleteUserCommand
from restful_users.domain.users.errors import UserNotFoundError
from restful_users.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Removes an existing user by id."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, command: DeleteUserCommand) -> None:
        """Run the delete user use case.

        Raises:
            UserNotFoundError: If no user has ``command.user_id``.
        """
        logger.info("Deleting user with id=%d", command.user_id)

        if not self._user_repo.exists_by_id(command.user_id):
            raise UserNotFoundError(command.user_id)

        self._user_repo.delete_by_id(command.user_id)
