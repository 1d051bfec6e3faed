"""Page controller — thin HTTP adapter for PageRenderer."""

from __future__ import annotations

from pathlib import Path

from litestar import Controller, Request, get
from litestar.exceptions import NotFoundException
from litestar.response import Response

from stencil_server.resources.content import ContentNotFoundError
from stencil_server.resources.page import PageRenderer

INDEX_PAGE = "index"


class PageController(Controller):
    """HTTP adapter serving templated pages and static assets."""

    path = "/"

    @staticmethod
    async def _serve(pages: PageRenderer, path: str) -> Response[str]:
        """Render ``path`` or answer 404 with the resolver's message."""
        try:
            page = await pages.render(path)
        except ContentNotFoundError as error:
            return Response(
                content=f"Failed to read file: {error}",
                status_code=404,
                media_type="text/plain",
            )
        return Response(content=page.body, status_code=200, media_type=page.content_type)

    @get("/")
    async def index(self, pages: PageRenderer) -> Response[str]:
        """Serve the index page."""
        return await self._serve(pages, INDEX_PAGE)

    @get("/{page_path:path}")
    async def page(self, page_path: Path, pages: PageRenderer) -> Response[str]:
        """Serve the page or asset at ``page_path``, including nested paths."""
        return await self._serve(pages, page_path.as_posix().removeprefix("/"))


def route_not_found(
    request: Request[object, object, object], exc: NotFoundException,
) -> Response[str]:
    """Fixed 404 for requests no route matches."""
    return Response(content="404 Not Found", status_code=404, media_type="text/plain")
