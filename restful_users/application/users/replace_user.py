"""
Use case: Overwrite every mutable field of a user.

Input: ReplaceUserCommand
Output: UserResult
Side effects: Updates one user record.
Failure cases: UserNotFoundError, ConstraintViolationError.
"""

import logging

from restful_users.application.users.dtos import ReplaceUserCommand, UserResult
from restful_users.application.users.mappers import to_user_result
from restful_users.domain.users.entities import User
from restful_users.domain.users.errors import UserNotFoundError
from restful_users.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)


class ReplaceUserUseCase:
    """Full replace of a user's fields. The stored id is kept."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, command: ReplaceUserCommand) -> UserResult:
        """Run the replace user use case.

        Raises:
            UserNotFoundError: If no user has ``command.user_id``.
        """
        logger.info("Updating all fields for user with id=%d", command.user_id)

        existing = self._user_repo.find_by_id(command.user_id)
        if existing is None:
            raise UserNotFoundError(command.user_id)

        existing.replace_fields(
            User(
                email=command.email,
                first_name=command.first_name,
                last_name=command.last_name,
                birth_date=command.birth_date,
                address=command.address,
                phone_number=command.phone_number,
            )
        )
        return to_user_result(self._user_repo.save(existing))
