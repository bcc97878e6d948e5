"""
Pydantic models for user data.

Users are only kept by the storage layer; no endpoint exposes them
and there is no login flow.  The ``password`` field is opaque to the
store.
"""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    username: str = Field(..., examples=["sarah"])
    password: str


class UserRead(UserCreate):
    """Schema for a stored user."""

    id: str
