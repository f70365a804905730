"""FastAPI dependencies shared by the endpoint modules."""

from fastapi import Request

from ..services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    """Return the ``UserService`` built by ``create_app`` for this application."""
    return request.app.state.user_service
