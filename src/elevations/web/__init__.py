"""FastAPI REST API for elevation codes and BOM matching.

This module exposes code generation, BOM matching, draft validation and the
catalog listings over HTTP.

Usage:
    uvicorn elevations.web:app --reload
"""

from elevations.web.app import app, create_app

__all__ = ["app", "create_app"]
