"""
User endpoints.

Each handler performs one service call.  ``RecordNotFound`` and
``ServiceError`` raised by the service are rendered as 404 and 500 by
the exception handlers installed in ``main.create_app``.  Handlers are
plain functions because the gateway makes blocking boto3 calls; FastAPI
runs them in its thread pool.
"""

from typing import Dict, List

from fastapi import APIRouter, Depends, status

from user_records_api.app.api.deps import get_user_service
from user_records_api.app.schemas.user import UserCreate, UserRead, UserUpdate
from user_records_api.app.services.user_service import UserService

router = APIRouter()


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(user: UserCreate, service: UserService = Depends(get_user_service)) -> UserRead:
    """Create a user with a server-generated id."""
    return service.create_user(user)


@router.get("", response_model=List[UserRead])
def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """List all users.  Order is whatever the store returns."""
    return service.list_users()


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> UserRead:
    return service.get_user(user_id)


@router.put("/{user_id}", response_model=UserRead)
def update_user(
    user_id: str,
    user: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Replace a user's name and email; 404 if the user does not exist."""
    return service.update_user(user_id, user)


@router.delete("/{user_id}")
def delete_user(user_id: str, service: UserService = Depends(get_user_service)) -> Dict[str, str]:
    """Delete a user.  Succeeds whether or not the user existed."""
    service.delete_user(user_id)
    return {"message": "User deleted successfully"}
