"""
Top‑level package for the User Registry API.

This file makes ``user_registry_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``user_registry_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app`` and the ``run`` entry point.
"""

__all__ = []
