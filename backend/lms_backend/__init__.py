"""
Backend package for the LMS admin API.

Exposes the FastAPI application factory along with the database models,
services and routers behind the role-gated admin surface.
"""

from .main import create_app

__all__ = ["create_app"]
