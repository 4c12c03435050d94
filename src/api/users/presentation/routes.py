"""HTTP routes for user management.

Expected outcomes map to fixed statuses: a missing user is 404, a taken
username or a body id that disagrees with the path is 409. Anything else
propagates to the application's 500 handler, which logs it.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from users.application.services import UserService
from users.dependencies import get_user_service
from users.ports.exceptions import (
    DuplicateUsernameError,
    UserIdMismatchError,
    UserNotFoundError,
)
from users.presentation.models import (
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
)

router = APIRouter(
    prefix="/users",
    tags=["users"],
)


def _not_found(user_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"User {user_id} not found",
    )


def _username_conflict() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail="A user with this username already exists",
    )


@router.get("")
async def list_users(
    service: Annotated[UserService, Depends(get_user_service)],
) -> list[UserResponse]:
    """List all users.

    Returns:
        Every stored user, credential omitted
    """
    users = await service.list_users()
    return [UserResponse.from_domain(user) for user in users]


@router.get(
    "/{user_id:int}",
    responses={404: {"description": "User not found"}},
)
async def get_user(
    user_id: int,
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    """Get a user by id.

    Raises:
        HTTPException: 404 if user not found
    """
    try:
        user = await service.get_user(user_id)
    except UserNotFoundError:
        raise _not_found(user_id)

    return UserResponse.from_domain(user)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={409: {"description": "Username already exists"}},
)
async def create_user(
    request: CreateUserRequest,
    response: Response,
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    """Create a new user.

    The Location header of the 201 response points at the new resource.

    Raises:
        HTTPException: 409 if the username is taken
    """
    try:
        user = await service.create_user(request.to_domain())
    except DuplicateUsernameError:
        raise _username_conflict()

    response.headers["Location"] = f"{router.prefix}/{user.id}"
    return UserResponse.from_domain(user)


@router.delete(
    "/{user_id:int}",
    response_class=Response,
    responses={
        200: {"description": "User deleted"},
        404: {"description": "User not found"},
    },
)
async def delete_user(
    user_id: int,
    service: Annotated[UserService, Depends(get_user_service)],
) -> Response:
    """Delete a user permanently.

    Raises:
        HTTPException: 404 if user not found
    """
    try:
        await service.delete_user(user_id)
    except UserNotFoundError:
        raise _not_found(user_id)

    return Response(status_code=status.HTTP_200_OK)


@router.put(
    "/{user_id:int}",
    responses={
        404: {"description": "User not found"},
        409: {"description": "Id mismatch or username already exists"},
    },
)
async def update_user(
    user_id: int,
    request: UpdateUserRequest,
    service: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    """Update a user.

    The body must carry the same id as the path.

    Raises:
        HTTPException: 404 if user not found
        HTTPException: 409 if the ids differ or the username is taken
    """
    try:
        user = await service.update_user(user_id, request.to_domain())
    except UserNotFoundError:
        raise _not_found(user_id)
    except UserIdMismatchError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User id in body does not match id in path",
        )
    except DuplicateUsernameError:
        raise _username_conflict()

    return UserResponse.from_domain(user)
