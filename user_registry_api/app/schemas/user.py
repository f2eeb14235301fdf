"""
Pydantic models for user data.

A user is ``{id, name, email}``.  ``name`` and ``email`` are usually
strings but are stored exactly as the client sent them: any JSON value
is accepted and missing fields become ``null``.  The ``id`` is always
assigned by the server, so neither the create nor the update schema
declares it and a client‑supplied ``id`` is dropped during parsing.
"""

from typing import Any

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    name: Any = Field(None, examples=["John Doe"], description="The user's name")
    email: Any = Field(None, examples=["john.doe@example.com"], description="The user's e-mail address")

    # Unknown keys (including ``id``) are silently discarded.
    model_config = {"extra": "ignore"}


class UserCreate(UserBase):
    """Schema for creating a user."""


class UserUpdate(BaseModel):
    """Schema for updating an existing user.

    All fields are optional; only values present in the request body
    are applied, everything else keeps its current value.
    """

    name: Any = None
    email: Any = None

    model_config = {"extra": "ignore"}

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: str = Field(..., examples=["354997f7-e88b-4889-b568-81a648e8eb36"], description="Server generated identifier")


class Message(BaseModel):
    message: str


class ErrorMessage(Message):
    error: str
