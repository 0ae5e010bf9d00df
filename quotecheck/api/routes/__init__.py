"""API routes package."""

from . import health, projects, quotes

__all__ = ["health", "projects", "quotes"]
