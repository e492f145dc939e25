"""
Top-level router.

Routes are served from the application root (``/users``, ...), which is
where existing frontends expect them.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
