"""
dc-api-types CLI - inspect, validate and export the Data Connector types.
"""

from __future__ import annotations

from .main import main, app

__all__ = ["main", "app"]
