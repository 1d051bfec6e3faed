"""Content resolver — maps request paths onto files beneath the content root."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

import anyio
from anyio import to_thread

from stencil_server.config import Settings
from stencil_server.utils.content_type import ContentType
from stencil_server.utils.paths import SafePath, UnsafePathError

logger = logging.getLogger(__name__)


class LoadError(Exception):
    """Raised when a file cannot be read or is not valid UTF-8."""


class ContentNotFoundError(Exception):
    """Raised when no candidate root holds a readable file for a path."""


@dataclass(frozen=True)
class ContentFragment:
    """A resolved file body and its inferred MIME type."""

    content_type: str
    body: str
    source: PurePosixPath


class ContentResolver:
    """Resolve request paths against the configured search roots.

    Built once at startup; holds no per-request state.
    """

    def __init__(
        self,
        *,
        content_root: Path,
        search_roots: list[str],
        default_extension: str = "html",
    ) -> None:
        self._content_root = content_root
        self._search_roots = list(search_roots)
        self._default_extension = default_extension

    @classmethod
    def from_settings(cls, settings: Settings) -> ContentResolver:
        """Build a resolver from server settings."""
        return cls(
            content_root=settings.content_root,
            search_roots=settings.search_roots,
            default_extension=settings.default_extension,
        )

    @property
    def content_root(self) -> Path:
        """Directory every read is sandboxed beneath."""
        return self._content_root

    def candidates(self, raw_path: str) -> list[PurePosixPath]:
        """Return the content-root-relative paths tried for ``raw_path``, in order.

        Raises:
            UnsafePathError: If ``raw_path`` could escape the content root.
        """
        path = SafePath.with_default_suffix(
            SafePath.parse(raw_path), self._default_extension,
        )
        return [PurePosixPath(root) / path for root in self._search_roots]

    async def read_file(self, relative: PurePosixPath) -> str:
        """Read a content-root-relative file as UTF-8 text.

        Raises:
            LoadError: On I/O failure, invalid UTF-8 or a path that escapes
                the content root.
        """
        logger.info("trying to load %s", relative)
        try:
            target = await to_thread.run_sync(SafePath.join, self._content_root, relative)
            data = await anyio.Path(target).read_bytes()
            return data.decode("utf-8")
        except (OSError, UnicodeDecodeError, UnsafePathError) as error:
            raise LoadError(str(error)) from error

    async def resolve(self, raw_path: str) -> ContentFragment:
        """Resolve ``raw_path`` to the first readable candidate.

        Raises:
            ContentNotFoundError: If the path is unsafe or every candidate
                failed to load.
        """
        try:
            candidates = self.candidates(raw_path)
        except UnsafePathError as error:
            logger.warning("refusing %r: %s", raw_path, error)
            raise ContentNotFoundError(str(error)) from error

        for candidate in candidates:
            try:
                body = await self.read_file(candidate)
            except LoadError as error:
                logger.warning("failed to load %s: %s", candidate, error)
                continue
            return ContentFragment(
                content_type=ContentType.detect(candidate),
                body=body,
                source=candidate,
            )

        tried = ", ".join(str(candidate) for candidate in candidates)
        raise ContentNotFoundError(f"failed to load any of {tried}")
