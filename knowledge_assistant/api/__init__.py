"""
API module.

FastAPI application factory and routers for all HTTP endpoints.
"""

from knowledge_assistant.api.main import create_app

__all__ = ["create_app"]
