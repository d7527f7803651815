"""
Server loop: drive a bound listener with uvicorn.
"""

import asyncio
import logging

import uvicorn
from fastapi import FastAPI

from portfolio.server.transport import Listener

logger = logging.getLogger(__name__)


def build_server(app: FastAPI, listener: Listener, log_level: str = "info") -> uvicorn.Server:
    """Create a uvicorn server that will be handed the listener's socket."""
    config = uvicorn.Config(
        app,
        **listener.server_options(),
        log_level=log_level.lower(),
        proxy_headers=False,
        server_header=False,
    )
    return uvicorn.Server(config)


def serve(app: FastAPI, listener: Listener, log_level: str = "info") -> None:
    """
    Bind the listener and serve until the process is stopped.

    Raises BindError if the socket cannot be acquired; in that case nothing
    has been served.
    """
    sock = listener.bind()
    logger.info(f"Listening on {listener.describe()}")

    server = build_server(app, listener, log_level)
    try:
        asyncio.run(server.serve(sockets=[sock]))
    finally:
        sock.close()
        listener.cleanup()
