class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class BroadcastClosedError(DomainError):
    """Raised when subscribing to a record stream that has been disposed."""


class StoreError(Exception):
    """Raised when the local store cannot be opened, read or written."""


class StoreNotOpenError(StoreError):
    """Raised when a box is accessed before the store is opened or after it is closed."""
