"""
JSON document store.

Every collection lives in a single JSON document of the form
``{"books": [...], "movies": [...], ...}``.  Stores expose a small set
of primitives modelled after a query chain: ``get`` and ``find`` read,
``push``, ``assign`` and ``remove`` mutate.  Each mutating primitive
reads the whole document, changes it in memory and writes the whole
document back through ``write``.

Nothing serialises the read-modify-write sequence across callers.  Two
requests mutating the store at the same time can lose an update; the
last write wins.  ``JsonFileStore`` only guarantees that a single file
read or write is never interleaved with another one.

Two implementations are provided: ``JsonFileStore`` persists to disk
and ``MemoryStore`` keeps the serialised document in memory, which is
what the tests use.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import settings


logger = logging.getLogger(__name__)

Record = Dict[str, Any]
Document = Dict[str, List[Record]]

# Collections present in a freshly initialised document.
COLLECTIONS = ("books", "users", "movies", "systemTheaters", "groupTheaters")


class PersistenceError(RuntimeError):
    """The backing store could not read or write the document.

    The original exception is chained as ``__cause__`` and also kept in
    ``cause`` so that API handlers can report it.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


def default_document() -> Document:
    return {name: [] for name in COLLECTIONS}


def _matches(record: Record, criteria: Dict[str, Any]) -> bool:
    return all(key in record and record[key] == value for key, value in criteria.items())


class DocumentStore(ABC):
    """Base class for document stores.

    Subclasses implement ``read`` and ``write``.  ``read`` must return a
    document the caller is free to mutate; nothing is committed until it
    is handed back to ``write``.
    """

    @abstractmethod
    def read(self) -> Document:
        """Return the full document."""

    @abstractmethod
    def write(self, document: Document) -> None:
        """Persist the full document, raising ``PersistenceError`` on failure."""

    def get(self, collection: str) -> List[Record]:
        """Return every record of ``collection`` in insertion order."""
        return list(self.read().get(collection) or [])

    def find(self, collection: str, **criteria: Any) -> Optional[Record]:
        """Return the first record matching all ``criteria`` or ``None``."""
        for record in self.get(collection):
            if _matches(record, criteria):
                return record
        return None

    def push(self, collection: str, record: Record) -> Record:
        """Append ``record`` to ``collection`` and write the document."""
        document = self.read()
        document.setdefault(collection, []).append(record)
        self.write(document)
        return record

    def assign(self, collection: str, fields: Record, **criteria: Any) -> Optional[Record]:
        """Shallow-merge ``fields`` into the first matching record.

        Returns the merged record, or ``None`` when nothing matched.  The
        document is written in both cases.
        """
        document = self.read()
        target = None
        for record in document.get(collection) or []:
            if _matches(record, criteria):
                target = record
                break
        if target is not None:
            target.update(fields)
        self.write(document)
        return dict(target) if target is not None else None

    def remove(self, collection: str, **criteria: Any) -> List[Record]:
        """Remove every matching record and return the removed ones."""
        document = self.read()
        records = document.get(collection) or []
        removed = [record for record in records if _matches(record, criteria)]
        document[collection] = [record for record in records if not _matches(record, criteria)]
        self.write(document)
        return removed


class MemoryStore(DocumentStore):
    """Store keeping the serialised document in memory.

    The document is kept as a JSON string so that reads never share
    state with previous writes and unserialisable values fail the same
    way they would on disk.
    """

    def __init__(self, document: Optional[Document] = None) -> None:
        self._data = json.dumps(document if document is not None else default_document())

    def read(self) -> Document:
        return json.loads(self._data)

    def write(self, document: Document) -> None:
        try:
            self._data = json.dumps(document, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise PersistenceError(f"Could not serialise document: {exc}", exc) from exc


class JsonFileStore(DocumentStore):
    """Store persisting the document to a JSON file.

    A missing file reads as an empty document with every known
    collection present.  Writes go to a temporary file in the same
    directory which then replaces the target, so readers see either the
    old or the new document.
    """

    def __init__(self, path: os.PathLike | str) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def init(self) -> None:
        """Create the file with empty collections if it does not exist."""
        if self.path.exists():
            return
        logger.info("Creating document store at %s", self.path)
        self.write(default_document())

    def read(self) -> Document:
        with self._lock:
            if not self.path.exists():
                return default_document()
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, ValueError) as exc:
                raise PersistenceError(f"Could not read {self.path}: {exc}", exc) from exc
        if not isinstance(data, dict):
            raise PersistenceError(f"{self.path} does not contain a JSON object")
        for name in COLLECTIONS:
            data.setdefault(name, [])
        return data

    def write(self, document: Document) -> None:
        try:
            payload = json.dumps(document, ensure_ascii=False, indent=2)
        except (TypeError, ValueError) as exc:
            raise PersistenceError(f"Could not serialise document: {exc}", exc) from exc
        with self._lock:
            tmp_name = None
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".db-", suffix=".tmp")
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                os.replace(tmp_name, self.path)
                tmp_name = None
            except OSError as exc:
                raise PersistenceError(f"Could not write {self.path}: {exc}", exc) from exc
            finally:
                if tmp_name is not None and os.path.exists(tmp_name):
                    os.unlink(tmp_name)


def get_database_path() -> str:
    """Compute the path of the JSON document.

    An absolute ``settings.database_path`` is used as is; a relative one
    is resolved against the project root.
    """
    db_path = settings.database_path
    if os.path.isabs(db_path):
        return db_path
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_path).resolve())


@lru_cache(maxsize=1)
def get_document_store() -> DocumentStore:
    """FastAPI dependency returning the application-wide store.

    Tests replace it through ``app.dependency_overrides``.
    """
    return JsonFileStore(get_database_path())

