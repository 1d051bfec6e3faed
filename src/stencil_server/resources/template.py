"""Template loading for the page shell."""

from __future__ import annotations

import logging
from pathlib import Path

from stencil_server.config import Settings
from stencil_server.resources.content import LoadError
from stencil_server.utils.paths import SafePath, UnsafePathError

logger = logging.getLogger(__name__)


class StartupError(Exception):
    """Raised when the server cannot be built, e.g. the template is missing."""


class TemplateLoader:
    """Read the page template from beneath the content root."""

    def __init__(self, *, content_root: Path, template_path: str, marker: str) -> None:
        self._content_root = content_root
        self._template_path = template_path
        self._marker = marker

    @classmethod
    def from_settings(cls, settings: Settings) -> TemplateLoader:
        """Build a loader from server settings."""
        return cls(
            content_root=settings.content_root,
            template_path=settings.template_path,
            marker=settings.marker,
        )

    def load(self) -> str:
        """Read the template as UTF-8 text.

        A template without the marker still loads; every page rendered with
        it will drop its content, so a warning is logged.

        Raises:
            LoadError: If the file is unreadable, not UTF-8 or outside the
                content root.
        """
        logger.info("loading template %s", self._template_path)
        try:
            relative = SafePath.parse(self._template_path)
            target = SafePath.join(self._content_root, relative)
            template = target.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError, UnsafePathError) as error:
            raise LoadError(f"{self._template_path}: {error}") from error
        if self._marker not in template:
            logger.warning(
                "template %s has no %s marker; page content will be dropped",
                self._template_path, self._marker,
            )
        return template
