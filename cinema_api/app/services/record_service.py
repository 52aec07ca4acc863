"""
Service layer for record collections.

``RecordService`` exposes list/get/create/update/delete over a single
named collection of a ``DocumentStore``.  Records are plain
dictionaries; apart from the generated ``id`` nothing about their shape
is checked.

Behaviour worth knowing about:

* ``create_record`` builds ``{"id": <generated>, **fields}``, so an
  ``id`` supplied by the caller replaces the generated one.
* ``update_record`` on an unknown id creates nothing and returns
  ``None`` instead of raising.
* ``delete_record`` succeeds whether or not the record existed.
* Mutations read and rewrite the whole collection without any locking,
  so concurrent writers can overwrite each other's changes.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from cinema_api.app.core.db import DocumentStore, PersistenceError, Record
from cinema_api.app.core.ids import generate_id


logger = logging.getLogger(__name__)


class RecordNotFoundError(ValueError):
    """No record with the requested id exists in the collection."""

    def __init__(self, collection: str, record_id: str) -> None:
        super().__init__(f"{collection} record {record_id!r} not found")
        self.collection = collection
        self.record_id = record_id


class RecordService:
    """CRUD operations over one collection of a document store."""

    def __init__(
        self,
        store: DocumentStore,
        collection: str,
        id_factory: Callable[[], str] = generate_id,
    ) -> None:
        self.store = store
        self.collection = collection
        self.id_factory = id_factory

    async def list_records(self) -> List[Record]:
        """Return every record in insertion order."""
        return self.store.get(self.collection)

    async def get_record(self, record_id: str) -> Record:
        """Return the record with ``record_id``.

        Raises ``RecordNotFoundError`` when no record matches.
        """
        record = self.store.find(self.collection, id=record_id)
        if record is None:
            logger.debug("%s record %s not found", self.collection, record_id)
            raise RecordNotFoundError(self.collection, record_id)
        return record

    async def list_records_by(self, field: str, value: Any) -> List[Record]:
        """Return the records whose ``field`` equals ``value``.

        Both sides are compared as strings because path parameters always
        arrive as text while stored values may be numbers.
        """
        return [
            record
            for record in self.store.get(self.collection)
            if field in record and str(record[field]) == str(value)
        ]

    async def create_record(self, fields: Dict[str, Any]) -> Record:
        """Append a new record and return it.

        The generated id is placed first and the caller's fields are
        merged on top of it.
        """
        record = {"id": self.id_factory(), **fields}
        try:
            self.store.push(self.collection, record)
        except PersistenceError:
            logger.exception("Failed to create %s record", self.collection)
            raise
        logger.info("Created %s record %s", self.collection, record["id"])
        return record

    async def update_record(self, record_id: str, fields: Dict[str, Any]) -> Optional[Record]:
        """Shallow-merge ``fields`` into the record with ``record_id``.

        Returns the merged record, or ``None`` if no record has that id.
        """
        try:
            record = self.store.assign(self.collection, fields, id=record_id)
        except PersistenceError:
            logger.exception("Failed to update %s record %s", self.collection, record_id)
            raise
        if record is None:
            logger.info("Update of unknown %s record %s ignored", self.collection, record_id)
        else:
            logger.info("Updated %s record %s", self.collection, record_id)
        return record

    async def delete_record(self, record_id: str) -> None:
        """Remove the record with ``record_id`` if present."""
        try:
            removed = self.store.remove(self.collection, id=record_id)
        except PersistenceError:
            logger.exception("Failed to delete %s record %s", self.collection, record_id)
            raise
        if removed:
            logger.info("Deleted %s record %s", self.collection, record_id)
