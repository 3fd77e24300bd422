"""Registry errors.

Validation and uniqueness errors are the caller's to fix and retry.
``StoreError`` means the persistence file could not be read, decoded or
written; its message is for logs, not for clients.
"""

from __future__ import annotations


class RegistryError(Exception):
    """Base class for every error raised by the registry."""


class InvalidEndpointError(RegistryError):
    """Raised when an endpoint is empty, unparsable, or has no host."""


class InvalidIDError(RegistryError):
    """Raised when a check id does not have the derived id shape."""


class DuplicateIDError(RegistryError):
    """Raised when a check with the same id is already registered."""


class CheckNotFoundError(RegistryError):
    """Raised when no check has the requested id."""


class StoreError(RegistryError):
    """Raised when the persistence file cannot be read, decoded or written."""
