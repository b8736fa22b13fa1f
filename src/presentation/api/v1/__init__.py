"""Version 1 of the public API."""

from .router import router

__all__ = ["router"]
