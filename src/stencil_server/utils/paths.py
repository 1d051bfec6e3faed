"""Request path sanitising and sandboxed joins."""

from __future__ import annotations

from pathlib import Path, PurePosixPath


class UnsafePathError(ValueError):
    """Raised when a requested path could escape the content root."""


class SafePath:
    """Static helpers for turning untrusted URL paths into filesystem paths."""

    @staticmethod
    def parse(raw: str) -> PurePosixPath:
        """Validate a URL path and return it as a relative path.

        Raises:
            UnsafePathError: If the path is empty, absolute, contains parent
                segments, backslashes or NUL bytes.
        """
        if not raw or "\x00" in raw or "\\" in raw:
            raise UnsafePathError(f"rejected path {raw!r}")
        path = PurePosixPath(raw)
        if path.is_absolute() or ".." in path.parts or not path.parts:
            raise UnsafePathError(f"rejected path {raw!r}")
        return path

    @staticmethod
    def with_default_suffix(path: PurePosixPath, extension: str) -> PurePosixPath:
        """Append ``.extension`` when ``path`` has none."""
        if path.suffix:
            return path
        return path.with_name(f"{path.name}.{extension}")

    @staticmethod
    def join(root: Path, relative: PurePosixPath) -> Path:
        """Join ``relative`` beneath ``root``, refusing symlink escapes.

        Raises:
            UnsafePathError: If the resolved target is outside ``root`` or
                cannot be resolved, e.g. a symlink loop.
        """
        try:
            base = root.resolve()
            target = (base / relative).resolve()
        except (OSError, RuntimeError) as error:
            raise UnsafePathError(f"cannot resolve {relative}: {error}") from error
        if not target.is_relative_to(base):
            raise UnsafePathError(f"{relative} resolves outside {root}")
        return target
