"""
Application package initializer.

The project is split into small pieces: ``core`` holds configuration,
logging and the in‑memory user store, ``schemas`` the request and
response models, ``services`` the business logic and ``api`` the
versioned routers.
"""

from .main import app  # noqa: F401
