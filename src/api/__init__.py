"""
Portfolio storage API support

Configuration, payload schemas, auth helpers and FastAPI dependency
providers for the storage layer.
"""

from .config import config

__all__ = ["config"]
