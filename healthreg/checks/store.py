"""File-backed check store.

The collection lives in memory and the file is a write-through mirror of it.
Every mutation serializes the whole collection, writes it next to the target
and renames it into place, and only then swaps the in-memory list. A failed
write leaves both the file and memory as they were.

One lock guards everything, disk writes included, so a slow filesystem stalls
every other call. Full rewrites are O(n) per mutation, which is fine for the
collection sizes a registry sees; an append-only log with compaction is the
path if that stops being true.

The file is owned by a single process. Nothing guards against two processes
pointing at the same path.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path

from healthreg.checks.errors import CheckNotFoundError, DuplicateIDError, StoreError
from healthreg.checks.models import Check

logger = logging.getLogger(__name__)

ALL = -1  # page size meaning "no pagination"


class CheckStore:
    """Ordered, deduplicated collection of checks persisted to one JSON file."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._lock = threading.Lock()
        self._checks: list[Check] = self._load()

    @property
    def path(self) -> Path:
        return self._path

    def __len__(self) -> int:
        with self._lock:
            return len(self._checks)

    # ── Persistence ───────────────────────────────────────────────────────

    def _load(self) -> list[Check]:
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                self._path.touch()
            except OSError as e:
                raise StoreError(f"cannot create {self._path}: {e}") from e
            logger.info("Created empty check file at %s", self._path)
            return []
        except OSError as e:
            raise StoreError(f"cannot read {self._path}: {e}") from e

        if not raw.strip():
            return []

        try:
            payload = json.loads(raw)
        except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
            raise StoreError(f"corrupt check file {self._path}: {e}") from e
        if not isinstance(payload, list):
            raise StoreError(f"corrupt check file {self._path}: expected a list")

        try:
            checks = [Check.from_dict(item) for item in payload]
        except (KeyError, TypeError, ValueError) as e:
            raise StoreError(f"corrupt check in {self._path}: {e!r}") from e

        seen: set[str] = set()
        for check in checks:
            if check.id in seen:
                raise StoreError(f"corrupt check file {self._path}: duplicate id {check.id!r}")
            seen.add(check.id)

        logger.info("Loaded %d checks from %s", len(checks), self._path)
        return checks

    def _write(self, checks: list[Check]) -> None:
        data = json.dumps([c.to_dict() for c in checks], indent=2).encode("utf-8")
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp.write_bytes(data)
            tmp.replace(self._path)
        except OSError as e:
            logger.error("Failed to write %s: %s", self._path, e)
            tmp.unlink(missing_ok=True)
            raise StoreError(f"cannot write {self._path}: {e}") from e

    # ── Operations ────────────────────────────────────────────────────────

    def create(self, check: Check) -> None:
        """Append a check. Raises DuplicateIDError if its id is taken."""
        with self._lock:
            if _find(self._checks, check.id) is not None:
                raise DuplicateIDError(f"check {check.id} already exists")

            candidate = [*self._checks, check]
            self._write(candidate)
            self._checks = candidate

    def read(self, check_id: str) -> Check:
        with self._lock:
            check = _find(self._checks, check_id)
        if check is None:
            raise CheckNotFoundError(f"check {check_id} not found")
        return check

    def list(self, page: int, size: int) -> tuple[int, list[Check]]:
        """Return ``(total, items)`` for a 1-based page.

        ``size=ALL`` returns the whole collection. Pages past the end are
        empty, the last page may be short.
        """
        if size != ALL and (page < 1 or size < 1):
            raise ValueError(f"Invalid page/size: {page}/{size}")

        with self._lock:
            total = len(self._checks)
            if size == ALL:
                return total, self._checks.copy()
            start = size * (page - 1)
            return total, self._checks[start:start + size]

    def delete(self, check_id: str) -> None:
        """Remove a check. Raises CheckNotFoundError if it is not registered."""
        with self._lock:
            remaining = [c for c in self._checks if c.id != check_id]
            if len(remaining) == len(self._checks):
                raise CheckNotFoundError(f"check {check_id} not found")

            self._write(remaining)
            self._checks = remaining


def _find(checks: list[Check], check_id: str) -> Check | None:
    for check in checks:
        if check.id == check_id:
            return check
    return None
