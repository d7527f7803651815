"""
Listening transports.

A Listener knows how to produce one bound, listening socket. The server
loop only deals with the socket, so TCP and Unix domain sockets share
the same serving path.
"""

import logging
import os
import socket
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from portfolio.config import Settings
from portfolio.exceptions import BindError, ConfigurationError

logger = logging.getLogger(__name__)

BACKLOG = 2048
ALL_INTERFACES = "0.0.0.0"


class Listener(ABC):
    """A source of accepted connections."""

    @abstractmethod
    def bind(self) -> socket.socket:
        """Return a bound socket that is already listening."""

    @abstractmethod
    def describe(self) -> str:
        """Human readable address, for logs."""

    @abstractmethod
    def server_options(self) -> Dict[str, Any]:
        """uvicorn.Config arguments describing this address."""

    def cleanup(self) -> None:
        """Release anything bind() left on disk."""


@dataclass(frozen=True)
class TcpListener(Listener):
    """TCP on all interfaces."""
    port: int

    def bind(self) -> socket.socket:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((ALL_INTERFACES, self.port))
            sock.listen(BACKLOG)
        except OSError as e:
            sock.close()
            raise BindError(f"Cannot listen on {self.describe()}: {e}") from e
        return sock

    def describe(self) -> str:
        return f"http://{ALL_INTERFACES}:{self.port}"

    def server_options(self) -> Dict[str, Any]:
        return {"host": ALL_INTERFACES, "port": self.port}


@dataclass(frozen=True)
class UnixListener(Listener):
    """Unix domain socket at a filesystem path."""
    path: Path

    def bind(self) -> socket.socket:
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._remove_stale()
            sock.bind(str(self.path))
            os.chmod(self.path, 0o666)
            sock.listen(BACKLOG)
        except OSError as e:
            sock.close()
            raise BindError(f"Cannot listen on {self.describe()}: {e}") from e
        return sock

    def describe(self) -> str:
        return f"unix:{self.path}"

    def server_options(self) -> Dict[str, Any]:
        return {"uds": str(self.path)}

    def cleanup(self) -> None:
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass

    def _remove_stale(self) -> None:
        try:
            self.path.unlink()
        except FileNotFoundError:
            return
        logger.info(f"Removed stale socket file {self.path}")


def select_listener(settings: Settings) -> Listener:
    """Pick the transport described by settings."""
    if settings.port is not None and settings.socket_path is not None:
        raise ConfigurationError("a port and a socket path are mutually exclusive")
    if settings.port is not None:
        return TcpListener(settings.port)
    if settings.socket_path is not None:
        return UnixListener(Path(settings.socket_path))
    raise ConfigurationError("either a port or a socket path is required")
