"""Server module."""

from portfolio.server.transport import Listener, TcpListener, UnixListener, select_listener
from portfolio.server.runner import build_server, serve

__all__ = [
    "Listener",
    "TcpListener",
    "UnixListener",
    "select_listener",
    "build_server",
    "serve",
]
