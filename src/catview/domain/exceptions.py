"""Domain-level exceptions.

Every failure the viewer can report is a subclass of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A view parameter was outside its allowed domain."""


class LoadError(DomainException):
    """The catalog could not be retrieved (network failure or bad status)."""


class DecodeError(LoadError):
    """The catalog response body could not be decoded into records."""
