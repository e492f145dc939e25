"""
Pydantic models for user records.

``name`` and ``email`` are free-form text: emails are neither validated
nor required to be unique.  ``id`` is generated by the service and never
accepted from a request body.  Request bodies require both fields, but
stored items are returned as they are, so ``UserRead`` tolerates items
written by other clients without one of them.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    name: str = Field(..., examples=["John Doe"])
    email: str = Field(..., examples=["john@example.com"])


class UserCreate(UserBase):
    """Body of ``POST /users``."""


class UserUpdate(UserBase):
    """Body of ``PUT /users/{id}``; both fields are replaced."""


class UserRead(BaseModel):
    """A stored user record."""

    id: str = Field(..., examples=["0b6f3c1e-3a52-4f8e-9a6d-2f1f0e7d9c44"])
    name: Optional[str] = Field(None, examples=["John Doe"])
    email: Optional[str] = Field(None, examples=["john@example.com"])

    model_config = {
        "from_attributes": True,
    }
