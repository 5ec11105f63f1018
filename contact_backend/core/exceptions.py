"""Error taxonomy shared by the storage layer and the HTTP endpoints."""


class ContactBackendError(Exception):
    """Base class for every error raised by the contact form backend."""


class ValidationError(ContactBackendError):
    """A submission is missing one of its required fields."""


class NotFoundError(ContactBackendError):
    """The requested entry does not exist."""


class StorageError(ContactBackendError):
    """The underlying database failed to open, read or write."""


class DatabaseNotInitializedError(StorageError):
    """The database session manager was never initialized."""


class ClearTableError(StorageError):
    """Deleting the rows of the contacts table failed."""


class SequenceResetError(StorageError):
    """Resetting the auto-increment counter of the contacts table failed."""
