"""
HTTP API - FastAPI surface for the session boundary.
"""

from session_gate.api.app import build_boundary, create_app

__all__ = ["build_boundary", "create_app"]
