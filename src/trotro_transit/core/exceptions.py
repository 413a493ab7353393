"""Custom exceptions for trotro route search."""


class TransitSearchError(Exception):
    """Base exception for transit search errors."""

    pass


class StopNotFoundError(TransitSearchError):
    """Raised when a stop name cannot be found in the network."""

    pass


class RouteNotFoundError(TransitSearchError):
    """Raised when no route can be found between stops."""

    pass


class NetworkDataError(TransitSearchError):
    """Raised when a network snapshot cannot be read or validated."""

    pass


class ValidationError(TransitSearchError):
    """Raised when input validation fails."""

    pass
