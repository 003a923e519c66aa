"""DynamoDB document store backed by the PynamoDB models"""

import asyncio
import logging
from functools import partial
from typing import List, Optional, Type

from pynamodb.exceptions import DeleteError, DoesNotExist, PynamoDBException
from pynamodb.models import Model

from content_tree.core.errors import StorageError
from content_tree.models.category import Category
from content_tree.models.content import Content
from content_tree.models.dynamodb_models import CategoryModel, ContentModel
from content_tree.store.base import Collection, DocumentStore, R

logger = logging.getLogger(__name__)


def build_condition(model_cls: Type[Model], filters: dict):
    """Translate equality filters into a PynamoDB condition (None if empty)"""
    condition = None
    for field, value in filters.items():
        attribute = getattr(model_cls, field, None)
        if attribute is None:
            raise StorageError(f"Unknown filter field: {field}")
        # Null attributes are never written, so "is None" means "missing"
        clause = attribute.does_not_exist() if value is None else attribute == value
        condition = clause if condition is None else condition & clause
    return condition


class DynamoCollection(Collection[R]):
    """Collection over one PynamoDB model.

    Lookups on ``index_field`` with a concrete value go through the global
    secondary index; everything else is a filtered scan.
    """

    def __init__(
        self,
        model_cls: Type[Model],
        record_type: Type[R],
        index_field: Optional[str] = None,
        index_name: Optional[str] = None,
    ):
        self.model_cls = model_cls
        self.record_type = record_type
        self.index_field = index_field
        self.index = getattr(model_cls, index_name) if index_name else None

    async def _run(self, func, *args, **kwargs):
        """Run a blocking PynamoDB call off the event loop"""
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(None, partial(func, *args, **kwargs))
        except PynamoDBException as e:
            logger.error("DynamoDB call on %s failed: %s", self.model_cls.Meta.table_name, e)
            raise StorageError(f"Storage operation failed: {str(e)}") from e

    def _to_record(self, item: Model) -> R:
        return self.record_type.model_validate(
            {name: getattr(item, name) for name in self.model_cls.get_attributes()}
        )

    def _to_item(self, record: R) -> Model:
        return self.model_cls(**record.model_dump())

    def _find_sync(self, filters: dict) -> List[R]:
        index_value = filters.get(self.index_field) if self.index_field else None
        if self.index is not None and index_value is not None:
            rest = {k: v for k, v in filters.items() if k != self.index_field}
            items = self.index.query(
                index_value, filter_condition=build_condition(self.model_cls, rest)
            )
        else:
            items = self.model_cls.scan(build_condition(self.model_cls, filters))
        return [self._to_record(item) for item in items]

    def _get_sync(self, record_id: str) -> Optional[R]:
        try:
            return self._to_record(self.model_cls.get(record_id, consistent_read=True))
        except DoesNotExist:
            return None

    def _delete_sync(self, record_id: str) -> bool:
        try:
            self.model_cls(record_id).delete(condition=self.model_cls.id.exists())
            return True
        except DeleteError as e:
            if e.cause_response_code == "ConditionalCheckFailedException":
                return False
            raise

    async def find(self, **filters) -> List[R]:
        return await self._run(self._find_sync, filters)

    async def find_by_id(self, record_id: str) -> Optional[R]:
        return await self._run(self._get_sync, record_id)

    async def insert(self, record: R) -> R:
        item = self._to_item(record)
        await self._run(item.save, condition=self.model_cls.id.does_not_exist())
        return record

    async def save(self, record: R) -> R:
        await self._run(self._to_item(record).save)
        return record

    async def delete_one(self, record: R) -> bool:
        return await self._run(self._delete_sync, record.id)

    async def scan(self) -> List[R]:
        return await self.find()


class DynamoDocumentStore(DocumentStore):
    def __init__(self):
        self.categories = DynamoCollection(
            CategoryModel, Category, "parent_id", "parent_id_index"
        )
        self.contents = DynamoCollection(
            ContentModel, Content, "category_id", "category_id_index"
        )

    async def ping(self) -> bool:
        try:
            for model in (CategoryModel, ContentModel):
                if not await self.categories._run(model.exists):
                    return False
            return True
        except Exception as e:
            logger.warning("DynamoDB health check failed: %s", e)
            return False
