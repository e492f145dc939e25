"""
Shared FastAPI dependencies.
"""

from fastapi import Depends, Request

from ..core.storage import UserTableGateway
from ..services.user_service import UserService


def get_gateway(request: Request) -> UserTableGateway:
    """Return the gateway built once by ``create_app``."""
    return request.app.state.gateway


def get_user_service(gateway: UserTableGateway = Depends(get_gateway)) -> UserService:
    return UserService(gateway)
