"""
Shared behaviour for the service and booking stores.

A ``CollectionStore`` owns an ordered list of records that carry a
``UUID`` ``id``.  The list is loaded from the key-value store when the
store is created, and every mutating method writes the whole list back
before returning, so a fresh load always matches memory.  Storage
order is insertion order; sorting for display happens in ``views``.
"""

import logging
from typing import ClassVar, Generic, Iterable, List, Optional, TypeVar
from uuid import UUID

from pydantic import BaseModel, TypeAdapter

from studio_manager.app.core.storage import KeyValueStore, decode, encode

RecordT = TypeVar("RecordT", bound=BaseModel)


class CollectionStore(Generic[RecordT]):
    """In-memory list of records bound to one storage key."""

    key: ClassVar[str]
    adapter: ClassVar[TypeAdapter]
    label: ClassVar[str] = "record"

    def __init__(self, storage: KeyValueStore) -> None:
        self.storage = storage
        self.logger = logging.getLogger(type(self).__module__)
        self._items: List[RecordT] = self._load()

    def _load(self) -> List[RecordT]:
        items = decode(self.adapter, self.storage.load(self.key))
        if items is None:
            return []
        self.logger.info("Loaded %d %ss from storage", len(items), self.label)
        return list(items)

    def persist(self) -> None:
        """Write the full collection under ``key``."""
        self.storage.save(self.key, encode(self.adapter, self._items))

    @property
    def items(self) -> List[RecordT]:
        """A copy of the collection in storage order."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def get(self, record_id: UUID) -> Optional[RecordT]:
        """Return the record with ``record_id`` or ``None``."""
        index = self._index_of(record_id)
        return None if index is None else self._items[index]

    def _index_of(self, record_id: UUID) -> Optional[int]:
        for index, item in enumerate(self._items):
            if item.id == record_id:
                return index
        return None

    def add(self, record: RecordT) -> RecordT:
        """Append ``record``; its id must not already be present.

        Raises
        ------
        ValueError
            If a record with the same id is already stored.
        """
        if self._index_of(record.id) is not None:
            raise ValueError(f"{self.label.capitalize()} {record.id} already exists")
        self._items.append(record)
        self.persist()
        self.logger.info("Added %s %s", self.label, record.id)
        return record

    def update(self, record: RecordT) -> bool:
        """Replace the stored record that has the same id.

        The whole record is swapped, not merged field by field.  If no
        record matches, nothing is changed or written and ``False`` is
        returned.
        """
        index = self._index_of(record.id)
        if index is None:
            self.logger.warning("Cannot update %s %s: not found", self.label, record.id)
            return False
        self._items[index] = record
        self.persist()
        self.logger.info("Updated %s %s", self.label, record.id)
        return True

    def delete_at(self, positions: Iterable[int]) -> None:
        """Remove records at ``positions`` in the current storage order.

        Positions index the live collection, not a sorted or filtered
        view; callers holding a view should use ``delete`` instead.

        Raises
        ------
        IndexError
            If any position is out of range.  Nothing is removed then.
        """
        targets = set(positions)
        invalid = [p for p in targets if not 0 <= p < len(self._items)]
        if invalid:
            raise IndexError(f"{self.label.capitalize()} positions out of range: {sorted(invalid)}")
        self._items = [item for i, item in enumerate(self._items) if i not in targets]
        self.persist()
        self.logger.info("Deleted %d %s(s) by position", len(targets), self.label)

    def delete(self, record_ids: Iterable[UUID]) -> int:
        """Remove records by id and return how many were removed."""
        ids = set(record_ids)
        kept = [item for item in self._items if item.id not in ids]
        removed = len(self._items) - len(kept)
        self._items = kept
        self.persist()
        self.logger.info("Deleted %d %s(s) by id", removed, self.label)
        return removed

    def reset(self) -> None:
        """Empty the in-memory collection without writing to storage.

        Used after the persisted key has been removed by
        ``SettingsStore.reset_all``.
        """
        self._items = []
