class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class ConfigurationError(DomainError):
    """Raised when the permission table and the home-route table disagree."""


class DataSourceError(DomainError):
    """Raised when raw records cannot be loaded from the backend."""
