"""Entity -> DTO mapping shared by the users use cases."""

from restful_users.application.users.dtos import UserResult
from restful_users.domain.users.entities import User


def to_user_result(user: User) -> UserResult:
    """Map a stored ``User`` entity to its output DTO."""
    return UserResult(
        id=user.id,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        birth_date=user.birth_date,
        address=user.address,
        phone_number=user.phone_number,
    )
