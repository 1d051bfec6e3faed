"""Content type inference from file extensions."""

from __future__ import annotations

from pathlib import PurePath

HTML = "text/html"
CSS = "text/css"
JAVASCRIPT = "text/javascript"
PLAIN_TEXT = "text/plain"

_BY_SUFFIX = {
    "": HTML,
    ".html": HTML,
    ".css": CSS,
    ".js": JAVASCRIPT,
}


class ContentType:
    """Static helpers mapping file extensions to MIME types."""

    @staticmethod
    def detect(path: PurePath) -> str:
        """Return the MIME type for ``path``.

        A path without an extension counts as HTML; unknown extensions are
        plain text. Never raises.
        """
        return _BY_SUFFIX.get(path.suffix, PLAIN_TEXT)

    @staticmethod
    def is_html(content_type: str) -> bool:
        """True if the content type is the one pages are templated as."""
        return content_type == HTML
