"""Utility functions and configuration management."""

from rgl_api.utils.config import get_settings
from rgl_api.utils.logging import get_logger
from rgl_api.utils.rate_limit import RateLimiter
from rgl_api.utils.timestamps import parse_timestamp

__all__ = ["get_settings", "get_logger", "RateLimiter", "parse_timestamp"]
