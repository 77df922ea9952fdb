"""Exception taxonomy for arcball.

Configuration problems are raised before any frame runs and derive from
ValueError. Runtime I/O failures are not wrapped: an OSError from the output
stream propagates as-is.
"""


class ArcballError(Exception):
    """Base class for all arcball errors."""
    pass


class ConfigurationError(ArcballError, ValueError):
    """Raised when an animation configuration value is invalid."""
    pass


class ShapeError(ConfigurationError):
    """Raised when shape parameters are malformed or the curve family is unknown."""
    pass
