"""
Portfolio Server - Main Application Entry Point

Serves the portfolio page at / and files from the static directory for
every other path, over either a TCP port or a Unix domain socket.
"""

import argparse
import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import List, Optional

import structlog
from fastapi import FastAPI

from portfolio import __version__
from portfolio.api import StaticAssets, router
from portfolio.config import load_settings
from portfolio.exceptions import BindError, ConfigurationError
from portfolio.server import select_listener, serve


def setup_logging(level: str = "info"):
    """Configure structured logging."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer() if sys.stderr.isatty() else structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=log_level,
        stream=sys.stdout
    )
    logging.getLogger().setLevel(log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger = structlog.get_logger()

    logger.info("Portfolio server started", static_dir=str(app.state.static_dir))

    yield

    logger.info("Portfolio server stopped")


def create_app(static_dir: Path = Path("static")) -> FastAPI:
    """Create the FastAPI application serving the page and static_dir."""
    app = FastAPI(
        title="Portfolio",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan
    )
    app.state.static_dir = Path(static_dir)
    app.include_router(router)
    app.mount(
        "/",
        StaticAssets(directory=app.state.static_dir, html=True, check_dir=False),
        name="static",
    )
    return app


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="portfolio",
        description="Serve the portfolio page and its static assets.",
    )
    listen = parser.add_mutually_exclusive_group()
    listen.add_argument("-p", "--port", type=int, help="TCP port to bind on all interfaces")
    listen.add_argument("-u", "--uds", type=Path, help="path of a Unix domain socket to create")
    parser.add_argument("--static-dir", type=Path, help="directory of static assets (default: static)")
    parser.add_argument("--log-level", help="log level (default: info)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the server; returns a process exit code on startup failure."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level or "info")
    logger = structlog.get_logger()

    try:
        settings = load_settings(
            port=args.port,
            socket_path=args.uds,
            static_dir=args.static_dir,
            log_level=args.log_level,
        )
        listener = select_listener(settings)
    except ConfigurationError as e:
        logger.error("Invalid configuration", error=str(e))
        return 2

    setup_logging(settings.log_level)
    logger = structlog.get_logger()
    app = create_app(settings.static_dir)

    try:
        serve(app, listener, settings.log_level)
    except BindError as e:
        logger.error("Failed to bind", error=str(e))
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")

    return 0


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
