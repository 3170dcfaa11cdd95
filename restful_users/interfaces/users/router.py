"""
FastAPI router for the users bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from datetime import date
from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Response, status

from restful_users.application.users.create_user import CreateUserUseCase
from restful_users.application.users.delete_user import DeleteUserUseCase
from restful_users.application.users.dtos import (
    CreateUserCommand,
    DeleteUserCommand,
    PatchUserCommand,
    ReplaceUserCommand,
    SearchUsersQuery,
    UserResult,
)
from restful_users.application.users.list_users import ListUsersUseCase
from restful_users.application.users.patch_user import PatchUserUseCase
from restful_users.application.users.replace_user import ReplaceUserUseCase
from restful_users.application.users.search_users import SearchUsersUseCase
from restful_users.interfaces.users.dependencies import (
    get_create_user_use_case,
    get_delete_user_use_case,
    get_list_users_use_case,
    get_patch_user_use_case,
    get_replace_user_use_case,
    get_search_users_use_case,
)
from restful_users.interfaces.users.schemas import (
    ErrorResponse,
    UserRequest,
    UserResponse,
)

router = APIRouter(prefix="/users", tags=["users"])

BAD_REQUEST_RESPONSES = {400: {"model": ErrorResponse}}


def _to_response(result: UserResult) -> UserResponse:
    return UserResponse(
        id=result.id,
        email=result.email,
        first_name=result.first_name,
        last_name=result.last_name,
        birth_date=result.birth_date,
        address=result.address,
        phone_number=result.phone_number,
    )


@router.get(
    "",
    response_model=list[UserResponse],
    summary="List users",
    description="Return every stored user.",
)
def list_users(
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
) -> list[UserResponse]:
    """Return all users."""
    return [_to_response(r) for r in use_case.execute()]


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST_RESPONSES,
    summary="Create a user",
    description="Register a user who is at least the configured minimum age.",
)
def create_user(
    request: UserRequest,
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
) -> UserResponse:
    """Create a user. Any id in the body is ignored."""
    command = CreateUserCommand(
        email=request.email,
        first_name=request.first_name,
        last_name=request.last_name,
        birth_date=request.birth_date,
        address=request.address,
        phone_number=request.phone_number,
    )
    return _to_response(use_case.execute(command))


@router.get(
    "/search",
    response_model=list[UserResponse],
    responses=BAD_REQUEST_RESPONSES,
    summary="Search users by birth date",
    description="Return users born within the inclusive [from, to] range.",
)
def search_users(
    date_from: date = Query(..., alias="from", description="First birth date (YYYY-MM-DD)"),
    date_to: date = Query(..., alias="to", description="Last birth date (YYYY-MM-DD)"),
    use_case: SearchUsersUseCase = Depends(get_search_users_use_case),
) -> list[UserResponse]:
    """Search users by birth date range."""
    query = SearchUsersQuery(date_from=date_from, date_to=date_to)
    return [_to_response(r) for r in use_case.execute(query)]


@router.put(
    "/updateAll/{user_id}",
    response_model=UserResponse,
    responses=BAD_REQUEST_RESPONSES,
    summary="Replace a user",
    description="Overwrite every mutable field of an existing user.",
)
def replace_user(
    user_id: int,
    request: UserRequest,
    use_case: ReplaceUserUseCase = Depends(get_replace_user_use_case),
) -> UserResponse:
    """Replace all fields of a user; the path id wins over any body id."""
    command = ReplaceUserCommand(
        user_id=user_id,
        email=request.email,
        first_name=request.first_name,
        last_name=request.last_name,
        birth_date=request.birth_date,
        address=request.address,
        phone_number=request.phone_number,
    )
    return _to_response(use_case.execute(command))


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses=BAD_REQUEST_RESPONSES,
    summary="Patch a user",
    description=(
        "Update only the listed fields. Allowed keys: email, firstName, "
        "lastName, birthDate, address, phoneNumber."
    ),
)
def patch_user(
    user_id: int,
    updates: dict[str, Any] = Body(..., examples=[{"address": "New street 1"}]),
    use_case: PatchUserUseCase = Depends(get_patch_user_use_case),
) -> UserResponse:
    """Apply a partial update to a user."""
    command = PatchUserCommand(user_id=user_id, updates=updates)
    return _to_response(use_case.execute(command))


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=BAD_REQUEST_RESPONSES,
    summary="Delete a user",
)
def delete_user(
    user_id: int,
    use_case: DeleteUserUseCase = Depends(get_delete_user_use_case),
) -> Response:
    """Delete a user. Deleting a missing user is an error."""
    use_case.execute(DeleteUserCommand(user_id=user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
