"""HTTP adapter exposing the task operations as JSON endpoints."""

from .server import create_app

__all__ = ["create_app"]
