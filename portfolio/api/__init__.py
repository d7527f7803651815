"""API module."""

from portfolio.api.routes import router
from portfolio.api.static import StaticAssets

__all__ = [
    "router",
    "StaticAssets",
]
