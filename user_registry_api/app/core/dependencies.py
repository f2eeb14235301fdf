"""
FastAPI dependencies giving handlers access to the user store.

The store and the service live on ``app.state`` (see
``main.create_app``), so every application instance, and in particular
every test client, works on its own store.
"""

from fastapi import Depends, Request

from .store import UserStore
from ..services.user_service import UserService


def get_store(request: Request) -> UserStore:
    return request.app.state.store


def get_user_service(request: Request, store: UserStore = Depends(get_store)) -> UserService:
    return UserService(store, id_factory=request.app.state.id_factory)
