"""
Errors raised by restaurant stores.

The API maps them to HTTP responses by type: NotFoundError becomes 404,
every other StoreError becomes 500.
"""


class StoreError(Exception):
    """Base class for restaurant store failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(StoreError):
    """No restaurant matches the requested name."""

    def __init__(self, name: str):
        super().__init__(f"Restaurant not found: {name}")
        self.name = name


class StorageReadError(StoreError):
    """The backing medium could not be read or holds corrupt data."""


class StorageWriteError(StoreError):
    """A change could not be persisted."""
