"""
Dependency injection for the users bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the users context. Tests
override ``get_user_repository`` to swap the storage adapter.
"""

from fastapi import Depends

from restful_users.application.users.create_user import CreateUserUseCase
from restful_users.application.users.delete_user import DeleteUserUseCase
from restful_users.application.users.list_users import ListUsersUseCase
from restful_users.application.users.patch_user import PatchUserUseCase
from restful_users.application.users.replace_user import ReplaceUserUseCase
from restful_users.application.users.search_users import SearchUsersUseCase
from restful_users.core.config import settings
from restful_users.domain.users.ports import UserRepository
from restful_users.infrastructure.database import get_engine
from restful_users.infrastructure.users.user_repository import (
    SqlUserRepositoryAdapter,
)


def get_user_repository() -> UserRepository:
    """Build the SQL user repository on the shared engine."""
    return SqlUserRepositoryAdapter(engine=get_engine())


def get_list_users_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> ListUsersUseCase:
    """Build ListUsersUseCase with its infrastructure dependencies."""
    return ListUsersUseCase(user_repo=user_repo)


def get_create_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> CreateUserUseCase:
    """Build CreateUserUseCase with the configured minimum age."""
    return CreateUserUseCase(user_repo=user_repo, min_age=settings.min_user_age)


def get_patch_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> PatchUserUseCase:
    """Build PatchUserUseCase with its infrastructure dependencies."""
    return PatchUserUseCase(user_repo=user_repo)


def get_replace_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> ReplaceUserUseCase:
    """Build ReplaceUserUseCase with its infrastructure dependencies."""
    return ReplaceUserUseCase(user_repo=user_repo)


def get_delete_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> DeleteUserUseCase:
    """Build DeleteUserUseCase with its infrastructure dependencies."""
    return DeleteUserUseCase(user_repo=user_repo)


def get_search_users_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
) -> SearchUsersUseCase:
    """Build SearchUsersUseCase with its infrastructure dependencies."""
    return SearchUsersUseCase(user_repo=user_repo)
