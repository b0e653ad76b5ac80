"""FastAPI REST API for pack analysis.

This module exposes pack analysis, zone decomposition and the trailer
presets over HTTP.

Usage:
    uvicorn truckpack.web:app --reload
"""

from truckpack.web.app import app, create_app

__all__ = ["app", "create_app"]
