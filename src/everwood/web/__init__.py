"""FastAPI REST API for panel pricing, palettes and share links.

Usage:
    uvicorn everwood.web:app --reload
"""

from everwood.web.app import app, create_app

__all__ = ["app", "create_app"]
