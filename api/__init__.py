"""Ad Copy Assistant - API Module.

This module provides the FastAPI application exposing the actions over HTTP.
"""

from .main import app, create_app

__all__ = ["app", "create_app"]
