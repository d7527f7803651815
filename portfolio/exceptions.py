"""Exceptions raised while starting the server."""


class PortfolioError(Exception):
    """Base class for startup failures."""


class ConfigurationError(PortfolioError):
    """Listening configuration is missing, contradictory or invalid."""


class BindError(PortfolioError):
    """The listening socket could not be acquired."""
