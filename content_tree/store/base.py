"""Document store interface consumed by the services.

A store exposes one collection per entity kind. Filters passed to ``find``,
``find_one`` and ``count`` are equality matches on record fields, and a
``None`` value matches records where the field is unset.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from content_tree.models.category import Category
from content_tree.models.content import Content

R = TypeVar("R", bound=BaseModel)


class Collection(ABC, Generic[R]):
    """Async CRUD access to one kind of record"""

    record_type: Type[R]

    @abstractmethod
    async def find(self, **filters) -> List[R]:
        ...

    @abstractmethod
    async def find_by_id(self, record_id: str) -> Optional[R]:
        ...

    @abstractmethod
    async def insert(self, record: R) -> R:
        ...

    @abstractmethod
    async def save(self, record: R) -> R:
        ...

    @abstractmethod
    async def delete_one(self, record: R) -> bool:
        """Remove the record; False when it was already gone"""

    @abstractmethod
    async def scan(self) -> List[R]:
        ...

    async def find_one(self, **filters) -> Optional[R]:
        results = await self.find(**filters)
        return results[0] if results else None

    async def count(self, **filters) -> int:
        return len(await self.find(**filters))


class DocumentStore(ABC):
    """Category and content collections behind one connection"""

    categories: Collection[Category]
    contents: Collection[Content]

    # No backend offers multi-document transactions to the services
    supports_transactions = False

    @abstractmethod
    async def ping(self) -> bool:
        """True when the backing store is reachable"""
