"""Domain-level exceptions.

All failures raised by the layout core are subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Transport errors raised by the printer library are never wrapped.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value object was constructed with an invalid value."""


class UninitializedSession(DomainException):
    """A document was requested while no printer session is ready."""


class MissingOrderContext(DomainException):
    """A document variant that needs order data was invoked without it."""


class ConfigurationError(DomainException):
    """A configuration or order file could not be read."""
