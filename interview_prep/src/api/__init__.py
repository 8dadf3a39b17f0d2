"""API package for the backend service.

This package contains the API endpoints, middleware and response schemas
for the backend service.
"""

from .core import setup_api

__all__ = ["setup_api"]
