class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ConfigurationError(DomainError):
    """Raised when static configuration cannot answer a question (e.g. no workday rule)."""


class MalformedIntervalsError(DomainError):
    """Raised when clock pairs cannot be merged into well-formed intervals."""


class RecordDecodeError(DomainError):
    """Raised when a stored day row matches none of the known schemas."""


class DocumentNotFoundError(DomainError):
    """Raised when an operation needs a document that does not exist."""
