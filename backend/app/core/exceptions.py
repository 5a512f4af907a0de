"""
Domain errors raised by services and translated to responses by routers.

All errors subclass ValueError so callers that only care about
"the request could not be honoured" can keep catching ValueError.
"""


class ArchiveError(ValueError):
    """Base class for all archive errors."""


class ValidationError(ArchiveError):
    """A required field is missing or blank."""


class ConflictError(ArchiveError):
    """The record clashes with an existing one (e.g. email already registered)."""


class AuthenticationError(ArchiveError):
    """Unknown email or wrong password."""


class NotFoundError(ArchiveError):
    """No record with the given id."""


class PersistenceError(ArchiveError):
    """The document store is unreachable or rejected the operation."""
