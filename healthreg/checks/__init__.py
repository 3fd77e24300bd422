from healthreg.checks.errors import (
    CheckNotFoundError,
    DuplicateIDError,
    InvalidEndpointError,
    InvalidIDError,
    RegistryError,
    StoreError,
)
from healthreg.checks.models import Check
from healthreg.checks.service import CheckService
from healthreg.checks.store import CheckStore

__all__ = [
    "Check",
    "CheckNotFoundError",
    "CheckService",
    "CheckStore",
    "DuplicateIDError",
    "InvalidEndpointError",
    "InvalidIDError",
    "RegistryError",
    "StoreError",
]
