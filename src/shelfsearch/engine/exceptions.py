"""Search engine client exceptions.

Only lifecycle problems (bad configuration, unreachable cluster at startup,
use before ``initialize``) are raised. Failures of individual reads and
writes come back as invalid responses instead.
"""


class EngineError(Exception):
    """Base exception for search engine client errors."""


class ConnectionError(EngineError):
    """Raised when the client cannot reach the engine or is not initialized."""


class ConfigurationError(EngineError):
    """Raised when the engine client configuration is invalid."""
