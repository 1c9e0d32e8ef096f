# chequetrack/data_access/base_repository.py

import logging
import uuid
from typing import Generic, TypeVar, Type, List, Optional, Dict, Any, TYPE_CHECKING

from chequetrack.data_access.local_store import LocalStore
from chequetrack.utils.json_codec import dataclass_from_json, dataclass_to_json

if TYPE_CHECKING:
    from ..business_logic.entities.base_entity import BaseEntity

logger = logging.getLogger(__name__)

T = TypeVar('T', bound='BaseEntity')


def record_id(record: Any) -> Optional[str]:
    """Id of a stored record as a string, or None when it has none."""
    if not isinstance(record, dict) or record.get("id") is None:
        return None
    return str(record["id"])


class BaseRepository(Generic[T]):
    """
    A collection of entities persisted as one JSON array under a single storage key.
    The first read of an absent (or unreadable) key seeds `_default_records()` and persists it.

    Writes work on the stored records, not on the decoded entities, so a record that
    cannot be decoded is hidden from reads but kept in storage untouched.
    """
    def __init__(self, local_store: LocalStore, model_type: Type[T], storage_key: str):
        self.local_store = local_store
        self.model_type = model_type
        self._storage_key = storage_key
        logger.debug(f"Repository for {self.model_type.__name__} initialized on key '{self._storage_key}'.")

    def _default_records(self) -> List[Dict[str, Any]]:
        return []

    @staticmethod
    def new_id() -> str:
        return str(uuid.uuid4())

    def _load_records(self) -> List[Any]:
        records = self.local_store.load(self._storage_key)
        if isinstance(records, list):
            return records
        if records is not None:
            logger.warning(f"Key '{self._storage_key}' does not hold a list, re-seeding defaults.")
        defaults = self._default_records()
        self.local_store.store(self._storage_key, defaults)
        logger.info(f"Seeded {len(defaults)} default record(s) under '{self._storage_key}'.")
        return defaults

    def _store_records(self, records: List[Any]) -> None:
        self.local_store.store(self._storage_key, records)

    def _entity_to_dict(self, entity: T) -> Dict[str, Any]:
        return dataclass_to_json(entity)

    def _entity_from_dict(self, record: Dict[str, Any]) -> T:
        return dataclass_from_json(self.model_type, record)

    def _decode(self, record: Any) -> Optional[T]:
        if not isinstance(record, dict):
            logger.warning(f"Skipping non-object record in '{self._storage_key}': {record!r}")
            return None
        try:
            return self._entity_from_dict(record)
        except (ValueError, TypeError) as e:
            logger.error(f"Unreadable record {record_id(record)} in '{self._storage_key}' skipped: {e}")
            return None

    def get_all(self) -> List[T]:
        entities = []
        for record in self._load_records():
            entity = self._decode(record)
            if entity is not None:
                entities.append(entity)
        return entities

    def get_by_id(self, entity_id: str) -> Optional[T]:
        for record in self._load_records():
            if record_id(record) == entity_id:
                return self._decode(record)
        return None

    def save(self, entity: T) -> bool:
        """Upserts by id. Returns True when the entity was inserted, False when it replaced an existing one."""
        if entity.id is None:
            entity.id = self.new_id()
        records = self._load_records()
        encoded = self._entity_to_dict(entity)
        for index, record in enumerate(records):
            if record_id(record) == entity.id:
                records[index] = encoded
                self._store_records(records)
                logger.debug(f"{self.model_type.__name__} {entity.id} updated.")
                return False
        records.append(encoded)
        self._store_records(records)
        logger.debug(f"{self.model_type.__name__} {entity.id} added.")
        return True

    def save_many(self, new_entities: List[T]) -> None:
        """Appends without checking for existing ids (bulk import)."""
        for entity in new_entities:
            if entity.id is None:
                entity.id = self.new_id()
        self._store_records(self._load_records() + [self._entity_to_dict(e) for e in new_entities])

    def prepend(self, entity: T, limit: Optional[int] = None) -> T:
        """Adds the entity at the head of the collection, keeping at most `limit` records."""
        if entity.id is None:
            entity.id = self.new_id()
        records = [self._entity_to_dict(entity)] + self._load_records()
        self._store_records(records[:limit] if limit is not None else records)
        return entity

    def delete(self, entity_id: str) -> Optional[T]:
        """Removes every record with `entity_id` and returns the removed entity, if it could be decoded."""
        records = self._load_records()
        removed = [r for r in records if record_id(r) == entity_id]
        if not removed:
            logger.debug(f"{self.model_type.__name__} {entity_id} not found for delete.")
            return None
        self._store_records([r for r in records if record_id(r) != entity_id])
        return self._decode(removed[0])

    def replace_all(self, records: List[Dict[str, Any]]) -> None:
        """Overwrites the whole collection with raw records, verbatim."""
        self._store_records(records)
        logger.info(f"Replaced '{self._storage_key}' with {len(records)} record(s).")
