"""Documents: an identifier plus a flat mapping of typed fields."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Union

Value = Union[str, int, float, bool, list]


class DocumentError(ValueError):
    """Raised when JSON text cannot be turned into a document."""


def _encode(key: str, value: Value) -> object:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return value
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    raise TypeError(f"field {key!r} has unsupported type {type(value).__name__}")


def _decode(key: str, value: object) -> Value | None:
    if isinstance(value, bool):
        return value
    if isinstance(value, (str, int, float)):
        return value
    if isinstance(value, list):
        if not all(isinstance(item, str) for item in value):
            raise DocumentError(f"field {key!r} must be an array of strings")
        return list(value)
    return None


@dataclass
class Document:
    """A stored record with an id and named fields."""

    fields: dict[str, Value] = field(default_factory=dict)
    id: str = ""

    def to_json(self) -> str:
        """Serialise to compact JSON with sorted keys; booleans become strings."""
        data: dict[str, object] = {"id": self.id}
        for key, value in self.fields.items():
            data[key] = _encode(key, value)
        return json.dumps(data, sort_keys=True, separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> Document:
        """Build a document from JSON text, keeping only supported field types."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DocumentError(f"invalid JSON: {exc}") from exc

        if data is None or data == []:
            return cls()
        if not isinstance(data, dict):
            raise DocumentError("a document must be a JSON object")

        doc = cls()
        if "id" in data:
            if not isinstance(data["id"], str):
                raise DocumentError("the id of a document must be a string")
            doc.id = data["id"]

        for key, raw in data.items():
            if key == "id":
                continue
            value = _decode(key, raw)
            if value is not None:
                doc.fields[key] = value
        return doc