"""
Use case: Register a new user.

Input: CreateUserCommand
Output: UserResult (with the storage-assigned id)
Side effects: Inserts one user record.
Failure cases: UnderageUserError, ConstraintViolationError.
"""

import logging
from datetime import date
from typing import Callable

from restful_users.application.users.dtos import CreateUserCommand, UserResult
from restful_users.application.users.mappers import to_user_result
from restful_users.domain.users.entities import User
from restful_users.domain.users.errors import UnderageUserError
from restful_users.domain.users.ports import UserRepository
from restful_users.domain.users.rules import is_old_enough

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Orchestrates user registration.

    Checks the age eligibility rule against the injected clock,
    then delegates persistence to the UserRepository port.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        min_age: int,
        today: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the use case.

        Args:
            user_repo: Repository used to store the new user.
            min_age: Minimum age in years required at creation time.
            today: Clock returning the current date.
        """
        self._user_repo = user_repo
        self._min_age = min_age
        self._today = today

    def execute(self, command: CreateUserCommand) -> UserResult:
        """Run the create user use case.

        Args:
            command: Field values of the new user.

        Returns:
            The stored user with its assigned id.

        Raises:
            UnderageUserError: If the birth date is less than ``min_age``
                years before today.
        """
        logger.info("Creating user: email=%s", command.email)

        if not is_old_enough(command.birth_date, self._today(), self._min_age):
            raise UnderageUserError(self._min_age)

        user = User(
            email=command.email,
            first_name=command.first_name,
            last_name=command.last_name,
            birth_date=command.birth_date,
            address=command.address,
            phone_number=command.phone_number,
        )
        stored = self._user_repo.save(user)
        logger.info("Created user id=%s", stored.id)
        return to_user_result(stored)
