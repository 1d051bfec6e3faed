"""Settings model — pydantic-settings with env var support."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings

ENV_PREFIX = "STENCIL_"


class Settings(BaseSettings):
    """Server settings.

    Use ``ConfigLoader.load_settings()`` to build with YAML + env var layering.
    Direct construction (e.g. in tests) skips YAML loading.
    """

    content_root: Path = Path("example_site")
    template_path: str = "templates/main.html"
    marker: str = "{{content}}"
    search_roots: list[str] = ["pages", "public"]
    default_extension: str = "html"
    # Wrap css/js/etc. in the template as well instead of serving them raw.
    template_assets: bool = False
    host: str = "0.0.0.0"
    port: int = 2137
    log_level: str = "INFO"

    model_config = {"env_prefix": ENV_PREFIX}
