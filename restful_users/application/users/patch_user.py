"""
Use case: Partially update a user.

Input: PatchUserCommand (user_id, updates)
Output: UserResult
Side effects: Updates one user record.
Failure cases: UserNotFoundError, InvalidFieldError, InvalidFieldValueError,
    ConstraintViolationError.
"""

import logging

from restful_users.application.users.dtos import PatchUserCommand, UserResult
from restful_users.application.users.mappers import to_user_result
from restful_users.domain.users.errors import UserNotFoundError
from restful_users.domain.users.ports import UserRepository
from restful_users.domain.users.rules import parse_updates

logger = logging.getLogger(__name__)


class PatchUserUseCase:
    """Merges a field map into an existing user.

    The whole update is validated before the entity is touched;
    the birth date is not re-checked against the minimum age.
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, command: PatchUserCommand) -> UserResult:
        """Run the patch user use case.

        Args:
            command: Target id and the fields to change.

        Returns:
            The merged and stored user.

        Raises:
            UserNotFoundError: If no user has ``command.user_id``.
            InvalidFieldError: If a key is not a patchable field.
            InvalidFieldValueError: If a value has the wrong type, is blank
                for a required field, or is longer than the column.
        """
        logger.info(
            "Updating user with id=%d, fields=%s",
            command.user_id,
            sorted(command.updates),
        )

        user = self._user_repo.find_by_id(command.user_id)
        if user is None:
            raise UserNotFoundError(command.user_id)

        for field, value in parse_updates(command.updates).items():
            user.assign(field, value)

        return to_user_result(self._user_repo.save(user))
