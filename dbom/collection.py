"""A named collection of documents persisted as a JSON file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterator

from dbom.document import Document
from dbom.ids import generate_uuid_v4


class Collection:
    """Documents keyed by id, kept in memory and written to ``<data_dir>/<name>.json``."""

    def __init__(self, name: str, data_dir: str | Path = "data") -> None:
        self.name = name
        self.path = Path(data_dir) / f"{name}.json"
        self._documents: dict[str, Document] = {}
        self.load()

    def insert(self, doc: Document) -> str:
        """Give the document a fresh id, store it and save; return the id."""
        doc.id = generate_uuid_v4()
        self._documents[doc.id] = doc
        self.save()
        return doc.id

    def get(self, doc_id: str) -> Document | None:
        """Return the document with this id, or None."""
        return self._documents.get(doc_id)

    def remove(self, doc_id: str) -> bool:
        """Remove the document with this id and save; report whether it existed."""
        removed = self._documents.pop(doc_id, None) is not None
        self.save()
        return removed

    def load(self) -> None:
        """Replace the in-memory documents with the contents of the file, if any."""
        self._documents.clear()
        try:
            with self.path.open(encoding="utf-8") as handle:
                entries = json.load(handle)
        except FileNotFoundError:
            return
        for entry in entries:
            doc = Document.from_json(json.dumps(entry))
            self._documents[doc.id] = doc

    def save(self) -> None:
        """Write every document to the collection file as a JSON array."""
        entries = [json.loads(doc.to_json()) for doc in self._documents.values()]
        with self.path.open("w", encoding="utf-8") as handle:
            handle.write(json.dumps(entries, indent=4, ensure_ascii=False))

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents.values())

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._documents

    def list(self) -> list[Document]:
        """Return all documents in the collection."""
        return [*self._documents.values()]