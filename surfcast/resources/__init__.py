"""Resources - infrastructure and configuration."""

from surfcast.resources.config import Settings, get_settings
from surfcast.resources.http_client import HttpClient

__all__ = ["Settings", "get_settings", "HttpClient"]
