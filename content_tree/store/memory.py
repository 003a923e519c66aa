"""In-process document store for local development and tests"""

import threading
from typing import Dict, List, Optional, Type

from content_tree.core.errors import StorageError
from content_tree.models.category import Category
from content_tree.models.content import Content
from content_tree.store.base import Collection, DocumentStore, R


class MemoryCollection(Collection[R]):
    """Thread-safe dictionary of records keyed by id.

    Records are copied on the way in and out so callers never share state
    with the store.
    """

    def __init__(self, record_type: Type[R]):
        self.record_type = record_type
        self._records: Dict[str, R] = {}
        self._lock = threading.RLock()

    @staticmethod
    def _matches(record: R, filters: dict) -> bool:
        return all(getattr(record, field) == value for field, value in filters.items())

    def _check_fields(self, filters: dict):
        unknown = [field for field in filters if field not in self.record_type.model_fields]
        if unknown:
            raise StorageError(f"Unknown filter fields: {', '.join(unknown)}")

    async def find(self, **filters) -> List[R]:
        self._check_fields(filters)
        with self._lock:
            return [
                record.model_copy(deep=True)
                for record in self._records.values()
                if self._matches(record, filters)
            ]

    async def find_by_id(self, record_id: str) -> Optional[R]:
        with self._lock:
            record = self._records.get(record_id)
            return record.model_copy(deep=True) if record else None

    async def insert(self, record: R) -> R:
        with self._lock:
            if record.id in self._records:
                raise StorageError(f"Record {record.id} already exists")
            self._records[record.id] = record.model_copy(deep=True)
        return record

    async def save(self, record: R) -> R:
        with self._lock:
            self._records[record.id] = record.model_copy(deep=True)
        return record

    async def delete_one(self, record: R) -> bool:
        with self._lock:
            return self._records.pop(record.id, None) is not None

    async def scan(self) -> List[R]:
        return await self.find()


class MemoryDocumentStore(DocumentStore):
    def __init__(self):
        self.categories = MemoryCollection(Category)
        self.contents = MemoryCollection(Content)

    async def ping(self) -> bool:
        return True
