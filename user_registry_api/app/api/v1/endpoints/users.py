"""
User endpoints for API v1.

Five routes cover the whole user lifecycle: list, fetch, create,
update and delete.  Missing users answer 404 with a ``message`` body;
an unexpected failure while creating a user answers 500 with the
message and the underlying error text.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from user_registry_api.app.core.dependencies import get_user_service
from user_registry_api.app.core.exceptions import (
    SERVER_ERROR_MESSAGE,
    USER_NOT_FOUND_MESSAGE,
    UserNotFoundError,
)
from user_registry_api.app.schemas.user import ErrorMessage, Message, UserCreate, UserRead, UserUpdate
from user_registry_api.app.services.user_service import UserService


logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND_RESPONSE = {status.HTTP_404_NOT_FOUND: {"model": Message, "description": "The user was not found"}}


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND_MESSAGE)


# Collection routes live at "/users" exactly; Starlette answers "/users/"
# with a 307 redirect to it, which keeps the method and body.
@router.get("", response_model=List[UserRead], summary="List all users")
def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return every user in insertion order."""
    return service.list_users()


@router.get("/{user_id}", response_model=UserRead, responses=NOT_FOUND_RESPONSE, summary="Get a user by id")
def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> UserRead:
    try:
        return service.get_user(user_id)
    except UserNotFoundError:
        raise _not_found()


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorMessage}},
    summary="Create a user",
)
def create_user(
    user: Optional[UserCreate] = None,
    service: UserService = Depends(get_user_service),
):
    """Create a user with a server‑generated id.

    An ``id`` in the request body is ignored.  A missing body creates a
    user with no name and no e‑mail.
    """
    try:
        return service.create_user(user or UserCreate())
    except Exception as exc:
        logger.exception("Error while handling POST /users")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": SERVER_ERROR_MESSAGE, "error": str(exc)},
        )


@router.put("/{user_id}", response_model=UserRead, responses=NOT_FOUND_RESPONSE, summary="Update a user")
def update_user(
    user_id: str,
    user: Optional[UserUpdate] = None,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Update the fields present in the body; the id never changes."""
    try:
        return service.update_user(user_id, user or UserUpdate())
    except UserNotFoundError:
        raise _not_found()


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND_RESPONSE,
    summary="Delete a user",
)
def delete_user(user_id: str, service: UserService = Depends(get_user_service)) -> None:
    try:
        service.delete_user(user_id)
    except UserNotFoundError:
        raise _not_found()
    return None
