"""
Use case: Search users by birth date range.

Input: SearchUsersQuery (date_from, date_to)
Output: list[UserResult]
Side effects: None (read-only query).
Failure cases: InvalidDateRangeError.
"""

import logging

from restful_users.application.users.dtos import SearchUsersQuery, UserResult
from restful_users.application.users.mappers import to_user_result
from restful_users.domain.users.errors import InvalidDateRangeError
from restful_users.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)


class SearchUsersUseCase:
    """Finds users born within an inclusive date range."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, query: SearchUsersQuery) -> list[UserResult]:
        """Run the search use case.

        Args:
            query: Inclusive birth date bounds.

        Returns:
            Matching users; an empty list when none match.

        Raises:
            InvalidDateRangeError: If ``date_from`` is after ``date_to``.
        """
        logger.info(
            "Searching for users between %s and %s",
            query.date_from,
            query.date_to,
        )

        if query.date_from > query.date_to:
            raise InvalidDateRangeError()

        users = self._user_repo.find_by_birth_date_between(
            query.date_from, query.date_to
        )
        return [to_user_result(user) for user in users]
