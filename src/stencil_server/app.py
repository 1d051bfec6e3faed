"""Litestar application factory and CLI entry point."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from litestar import Litestar
from litestar.datastructures import State
from litestar.di import Provide
from litestar.exceptions import NotFoundException
from litestar.logging import LoggingConfig

from stencil_server.config import ConfigLoader, Settings
from stencil_server.controllers.page import PageController, route_not_found
from stencil_server.resources.content import ContentResolver, LoadError
from stencil_server.resources.page import PageRenderer
from stencil_server.resources.template import StartupError, TemplateLoader


class AppFactory:
    """Builds and configures the Litestar application. All methods are static."""

    @staticmethod
    def _build(settings: Settings) -> State:
        """Construct the object graph once.

        settings → TemplateLoader ─┐
                                   ├→ PageRenderer
        settings → ContentResolver ┘

        Raises:
            StartupError: If the template cannot be loaded.
        """
        loader = TemplateLoader.from_settings(settings)
        try:
            template = loader.load()
        except LoadError as error:
            raise StartupError(f"failed to load template: {error}") from error
        pages = PageRenderer(
            template=template,
            resolver=ContentResolver.from_settings(settings),
            loader=loader,
            marker=settings.marker,
            template_assets=settings.template_assets,
        )
        return State({"pages": pages})

    @staticmethod
    def _logging_config(settings: Settings) -> LoggingConfig:
        """Route stencil_server loggers through Litestar's logging setup."""
        level = settings.log_level.upper()
        return LoggingConfig(
            root={"level": level, "handlers": ["queue_listener"]},
            loggers={"stencil_server": {"level": level, "propagate": True}},
        )

    @staticmethod
    def provide_pages(state: State) -> PageRenderer:
        """Provide the pre-built PageRenderer from app state."""
        pages: PageRenderer = state.pages
        return pages

    @staticmethod
    def create_app(settings: Settings | None = None) -> Litestar:
        """Create and configure the Litestar application.

        Raises:
            StartupError: If the template cannot be loaded.
        """
        if settings is None:
            settings = ConfigLoader.load_settings()
        return Litestar(
            route_handlers=[PageController],
            state=AppFactory._build(settings),
            dependencies={
                "pages": Provide(AppFactory.provide_pages, sync_to_thread=False),
            },
            exception_handlers={NotFoundException: route_not_found},
            logging_config=AppFactory._logging_config(settings),
        )


# Public alias so conftest / uvicorn can call create_app() without knowing AppFactory.
create_app = AppFactory.create_app


class CLI:
    """Command-line interface for stencil-server."""

    @staticmethod
    def _build_parser() -> argparse.ArgumentParser:
        """Build the CLI argument parser."""
        parser = argparse.ArgumentParser(
            prog="stencil-server", description="Stencil Server CLI",
        )
        subparsers = parser.add_subparsers(dest="command")

        run_parser = subparsers.add_parser("run", help="Start the server")
        run_parser.add_argument("--host", default=None, help="Bind address (default 0.0.0.0)")
        run_parser.add_argument("--port", type=int, default=None, help="Bind port (default 2137)")
        run_parser.add_argument(
            "--content-root", type=Path, default=None,
            help="Directory holding templates/, pages/ and public/",
        )

        return parser

    @staticmethod
    def main(argv: list[str] | None = None) -> None:
        """CLI entry point. Catches all exceptions and exits cleanly."""
        parser = CLI._build_parser()
        args = parser.parse_args(argv)

        if args.command is None:
            parser.print_help()
            sys.exit(1)

        try:
            if args.command == "run":
                import uvicorn

                settings = ConfigLoader.load_settings(
                    host=args.host, port=args.port, content_root=args.content_root,
                )
                # Built before binding so a missing template never serves.
                app = create_app(settings)
                uvicorn.run(app, host=settings.host, port=settings.port)
        except KeyboardInterrupt:
            pass
        except Exception as error:
            print(f"Error: {error}", file=sys.stderr)
            sys.exit(1)


if __name__ == "__main__":
    CLI.main()
