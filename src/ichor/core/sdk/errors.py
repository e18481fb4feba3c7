"""Business-layer error hierarchy.

Each domain subclasses these so callers can catch either the specific
``CurrencyNotFoundError`` or any ``NotFoundError``.
"""


class BusinessError(Exception):
    """Base class for errors raised by business services."""


class NotFoundError(BusinessError):
    def __init__(self, message: str = "not found"):
        super().__init__(message)


class UniqueEntryError(BusinessError):
    def __init__(self, message: str = "unique entry"):
        super().__init__(message)


class ForeignKeyViolationError(BusinessError):
    def __init__(self, message: str = "foreign key violation"):
        super().__init__(message)


class AuthenticationError(BusinessError):
    """Credentials did not match a known, enabled user."""
