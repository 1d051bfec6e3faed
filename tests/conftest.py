"""Shared fixtures for stencil_server tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from litestar import Litestar
from litestar.testing import TestClient

from stencil_server.app import create_app
from stencil_server.config import Settings
from stencil_server.resources.content import ContentResolver

TEMPLATE = "<html><body>{{content}}</body></html>"


def write_file(root: Path, relative: str, content: str | bytes) -> Path:
    """Create ``root/relative`` with parents and return its path."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture()
def content_root(tmp_path: Path) -> Path:
    """Content root with a template, an index page and a stylesheet."""
    root = tmp_path / "site"
    write_file(root, "templates/main.html", TEMPLATE)
    write_file(root, "pages/index.html", "Hello")
    write_file(root, "public/style.css", "body { color: red; }")
    return root


@pytest.fixture()
def settings(content_root: Path) -> Settings:
    """Test settings pointing at the temporary content root."""
    return Settings(content_root=content_root, log_level="DEBUG")


@pytest.fixture()
def resolver(settings: Settings) -> ContentResolver:
    """Resolver over the temporary content root."""
    return ContentResolver.from_settings(settings)


@pytest.fixture()
def app(settings: Settings) -> Litestar:
    """Application built from the test settings."""
    return create_app(settings)


@pytest.fixture()
def client(app: Litestar) -> Iterator[TestClient]:  # type: ignore[type-arg]
    """Synchronous test client wired to the test app."""
    with TestClient(app=app) as test_client:
        yield test_client
