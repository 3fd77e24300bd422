"""Check service: validation, id derivation and paging policy over the store."""

from __future__ import annotations

import hashlib
import logging
import re
from typing import Protocol
from urllib.parse import urlsplit

from healthreg.checks.errors import InvalidEndpointError, InvalidIDError
from healthreg.checks.models import Check

logger = logging.getLogger(__name__)

PAGE_SIZE = 10
CREATED = "Created"

# Ids are the salt bytes followed by the MD5 digest of the endpoint, as hex.
ID_SALT = b"tyrael"
ID_LENGTH = 2 * (len(ID_SALT) + hashlib.md5().digest_size)
_ID_RE = re.compile(rf"[0-9a-f]{{{ID_LENGTH}}}")


class CheckRepository(Protocol):
    def create(self, check: Check) -> None: ...

    def read(self, check_id: str) -> Check: ...

    def list(self, page: int, size: int) -> tuple[int, list[Check]]: ...

    def delete(self, check_id: str) -> None: ...


def normalize_endpoint(endpoint: str) -> str:
    """Parse an absolute URL and return its normalized form.

    Raises InvalidEndpointError for empty, unparsable or host-less input.
    """
    if not endpoint:
        raise InvalidEndpointError("endpoint is required")
    try:
        parts = urlsplit(endpoint)
        parts.port  # raises ValueError on a bad port
    except ValueError as e:
        raise InvalidEndpointError(f"invalid endpoint {endpoint!r}: {e}") from e
    if not parts.scheme or not parts.hostname:
        raise InvalidEndpointError(f"invalid endpoint {endpoint!r}: missing scheme or host")
    return parts.geturl()


def derive_id(endpoint: str) -> str:
    """Derive the id of a normalized endpoint. Same endpoint, same id."""
    digest = hashlib.md5(endpoint.encode("utf-8")).digest()
    return (ID_SALT + digest).hex()


def validate_id(value: str) -> None:
    if not _ID_RE.fullmatch(value):
        raise InvalidIDError(f"invalid check id {value!r}")


class CheckService:
    """Domain API consumed by the HTTP layer."""

    def __init__(self, repo: CheckRepository, page_size: int = PAGE_SIZE) -> None:
        self._repo = repo
        self.page_size = page_size

    def create(self, endpoint: str) -> Check:
        normalized = normalize_endpoint(endpoint)
        check = Check(id=derive_id(normalized), status=CREATED, endpoint=normalized)
        self._repo.create(check)
        logger.info("Registered check %s for %s", check.id, check.endpoint)
        return check

    def read(self, check_id: str) -> Check:
        validate_id(check_id)
        return self._repo.read(check_id)

    def list(self, page: int) -> tuple[int, int, list[Check]]:
        """Return ``(total, page, items)``; pages below 1 are read as page 1."""
        if page <= 0:
            page = 1
        total, items = self._repo.list(page, self.page_size)
        return total, page, items

    def delete(self, check_id: str) -> None:
        validate_id(check_id)
        self._repo.delete(check_id)
        logger.info("Deleted check %s", check_id)
