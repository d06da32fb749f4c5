"""
HTTP adapter exposing the engine's create / get / action operations.
"""

from .app import app, create_app  # noqa: F401
