"""Page resource — protocol-agnostic page composition."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from anyio import to_thread

from stencil_server.resources.content import ContentResolver, LoadError
from stencil_server.resources.template import TemplateLoader
from stencil_server.utils.content_type import ContentType
from stencil_server.utils.rwlock import ReadWriteLock

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedPage:
    """Final response body and its content type."""

    content_type: str
    body: str


class PageRenderer:
    """Substitute resolved fragments into the shared template.

    Built once at startup with the template already loaded. Requests take
    shared access to the template; only ``reload_template`` takes exclusive
    access.
    """

    def __init__(
        self,
        *,
        template: str,
        resolver: ContentResolver,
        loader: TemplateLoader,
        marker: str = "{{content}}",
        template_assets: bool = False,
    ) -> None:
        self._template = template
        self._resolver = resolver
        self._loader = loader
        self._marker = marker
        self._template_assets = template_assets
        self._lock = ReadWriteLock()

    @property
    def template(self) -> str:
        """The template currently in use."""
        return self._template

    @property
    def lock(self) -> ReadWriteLock:
        """Lock guarding the template."""
        return self._lock

    def compose(self, content_type: str, body: str) -> RenderedPage:
        """Place ``body`` into the template, or pass it through for raw assets."""
        if ContentType.is_html(content_type) or self._template_assets:
            body = self._template.replace(self._marker, body)
        return RenderedPage(content_type=content_type, body=body)

    async def render(self, path: str) -> RenderedPage:
        """Resolve ``path`` and compose the response page.

        Raises:
            ContentNotFoundError: If the path cannot be resolved.
        """
        async with self._lock.read():
            fragment = await self._resolver.resolve(path)
            logger.debug("rendering %s from %s", path, fragment.source)
            return self.compose(fragment.content_type, fragment.body)

    async def reload_template(self) -> None:
        """Re-read the template from disk under exclusive access.

        Raises:
            LoadError: If the template can no longer be loaded; the previous
                template stays in place.
        """
        async with self._lock.write():
            try:
                template = await to_thread.run_sync(self._loader.load)
            except LoadError:
                logger.exception("template reload failed, keeping previous template")
                raise
            self._template = template
            logger.info("template reloaded")
