"""Configuration package — re-exports for convenience."""

from stencil_server.config.loader import ConfigLoader
from stencil_server.config.settings import Settings

__all__ = ["ConfigLoader", "Settings"]
