"""Check record, the unit the registry stores and serves."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Check:
    """A registered endpoint.

    ``code``, ``checked`` and ``duration`` are carried verbatim; nothing in
    the registry computes them.
    """

    id: str
    status: str = ""
    code: int = 0
    endpoint: str = ""
    checked: int = 0  # unix seconds of the last run
    duration: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> "Check":
        """Rebuild a check, raising TypeError on any field of the wrong type."""
        if not isinstance(data, dict):
            raise TypeError(f"check must be an object, got {type(data).__name__}")
        fields = {
            "id": data["id"],
            "status": data.get("status", ""),
            "code": data.get("code", 0),
            "endpoint": data.get("endpoint", ""),
            "checked": data.get("checked", 0),
            "duration": data.get("duration", ""),
        }
        for name, value in fields.items():
            expected = _FIELD_TYPES[name]
            # bool is an int subclass but never a valid code or timestamp
            if not isinstance(value, expected) or isinstance(value, bool):
                raise TypeError(
                    f"check field {name!r} must be {expected.__name__}, got {type(value).__name__}"
                )
        return cls(**fields)


_FIELD_TYPES: dict[str, type] = {
    "id": str,
    "status": str,
    "code": int,
    "endpoint": str,
    "checked": int,
    "duration": str,
}
