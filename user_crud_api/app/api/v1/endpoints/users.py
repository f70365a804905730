"""
User endpoints for API v1.

Every handler calls exactly one ``UserService`` operation.  A missing
user surfaces as ``UserNotFoundError``, which the exception handler
registered in ``main.create_app`` turns into a 404 response whose body
is the error message.  Create, update and delete return an empty body.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from user_crud_api.app.api.deps import get_user_service
from user_crud_api.app.schemas.user import User
from user_crud_api.app.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=List[User])
def list_users(service: UserService = Depends(get_user_service)) -> List[User]:
    """Return all users."""
    return service.list_users()


@router.get("/name/{name}", response_model=User)
def get_user_by_name(name: str, service: UserService = Depends(get_user_service)) -> User:
    """Return the user with the given name, or 404."""
    return service.get_user_by_name(name)


@router.get("/{user_id}", response_model=User)
def get_user_by_id(user_id: int, service: UserService = Depends(get_user_service)) -> User:
    """Return the user with the given ID, or 404."""
    return service.get_user_by_id(user_id)


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def insert_user(user: User, service: UserService = Depends(get_user_service)) -> Response:
    """Create a new user.

    An ``id`` in the body is ignored; the database assigns one.
    """
    service.insert_user(user)
    return Response(status_code=status.HTTP_201_CREATED)


@router.put("", status_code=status.HTTP_200_OK, response_class=Response)
def update_user(user: User, service: UserService = Depends(get_user_service)) -> Response:
    """Merge the body into the stored user with the same ``id``.

    Blank or unchanged ``name``/``email`` values are ignored.
    """
    service.update_user(user)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/name/{name}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_user_by_name(name: str, service: UserService = Depends(get_user_service)) -> Response:
    """Delete the user with the given name, or 404."""
    service.delete_by_name(name)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_user_by_id(user_id: int, service: UserService = Depends(get_user_service)) -> Response:
    """Delete the user with the given ID, or 404."""
    service.delete_by_id(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
