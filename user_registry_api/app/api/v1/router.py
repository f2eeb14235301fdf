"""
Top‑level router for version 1 of the API.

Only the users domain exists today.  The users router is mounted under
``/users``; the application itself includes this router without a
version prefix so that the public paths stay ``/users`` and
``/users/{id}``.
"""

from fastapi import APIRouter

from .endpoints import users


router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
