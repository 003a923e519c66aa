"""Category service: CRUD and cascading deletion over the document store"""

import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from content_tree.core.errors import Conflict, NotFound, StorageError
from content_tree.core.security import Principal, require_editor
from content_tree.models.category import (
    Category,
    CategoryCreate,
    CategoryUpdate,
)
from content_tree.store.base import DocumentStore

logger = logging.getLogger(__name__)


class CategoryService:
    """Service class for category operations"""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def list_categories(
        self, parent_id: Optional[str] = None, authenticated: bool = False
    ) -> List[Category]:
        """Direct children of parent_id (root level when None)"""
        categories = await self.store.categories.find(parent_id=parent_id)
        visible = [c for c in categories if c.enabled or authenticated]
        return sorted(visible, key=lambda c: (c.name, c.id))

    async def get_category(
        self, category_id: str, authenticated: bool = False
    ) -> Category:
        category = await self.store.categories.find_by_id(category_id)
        if category is None or not (category.enabled or authenticated):
            raise NotFound("Category not found")
        return category

    async def create_category(
        self, category_data: CategoryCreate, principal: Optional[Principal]
    ) -> Category:
        """Create a new category under an existing parent (or at the root)"""
        require_editor(principal)

        if category_data.parent_id is not None:
            parent = await self.store.categories.find_by_id(category_data.parent_id)
            if parent is None:
                raise NotFound("ParentId was not found")

        existing = await self.store.categories.find_one(
            parent_id=category_data.parent_id, name=category_data.name
        )
        if existing is not None:
            raise Conflict("Name with parentId already in use")

        now = datetime.now(timezone.utc)
        category = Category(
            id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
            **category_data.model_dump(),
        )
        await self.store.categories.insert(category)

        logger.info(
            "Category %s (%r) created under %s by %s",
            category.id, category.name, category.parent_id, principal.user_id,
        )
        return category

    async def update_category(
        self,
        category_id: str,
        update_data: CategoryUpdate,
        principal: Optional[Principal],
    ) -> Category:
        """Apply the provided fields; everything else keeps its value"""
        require_editor(principal)

        category = await self.store.categories.find_by_id(category_id)
        if category is None:
            raise NotFound("Id was not found")

        changes = update_data.changes()
        if "name" in changes:
            siblings = await self.store.categories.find(
                parent_id=category.parent_id, name=changes["name"]
            )
            if any(sibling.id != category.id for sibling in siblings):
                raise Conflict("Name already in use")

        category = category.model_copy(
            update={**changes, "updated_at": datetime.now(timezone.utc)}
        )
        await self.store.categories.save(category)

        logger.info(
            "Category %s updated (%s) by %s",
            category.id, ", ".join(sorted(changes)) or "no fields", principal.user_id,
        )
        return category

    async def delete_category(
        self, category_id: str, principal: Optional[Principal]
    ) -> Category:
        """Delete a category, its descendants and every content item they hold.

        The subtree is collected first and removed deepest-first, so a
        category always outlives its descendants and its own content. If a
        storage failure interrupts the cascade, whatever remains is still
        reachable from ``category_id`` and calling this again finishes the
        job. Nothing is rolled back.
        """
        require_editor(principal)

        category = await self.store.categories.find_by_id(category_id)
        if category is None:
            raise NotFound("Id was not found")

        subtree = await self._collect_subtree(category)
        removed_contents = 0
        for node in reversed(subtree):
            removed_contents += await self._delete_contents_of(node.id)
            await self.store.categories.delete_one(node)

        logger.info(
            "Category %s deleted with %d descendant categories and %d content items by %s",
            category.id, len(subtree) - 1, removed_contents, principal.user_id,
        )
        return category

    async def _collect_subtree(self, root: Category) -> List[Category]:
        """Root plus all descendants; every node comes after its parent"""
        subtree = [root]
        seen = {root.id}
        pending = [root.id]
        while pending:
            current_id = pending.pop()
            for child in await self.store.categories.find(parent_id=current_id):
                if child.id in seen:
                    continue
                seen.add(child.id)
                subtree.append(child)
                pending.append(child.id)
        return subtree

    async def _delete_contents_of(self, category_id: str) -> int:
        """Delete the content filed directly under a category.

        Failures here are logged and skipped so the category walk keeps going.
        """
        try:
            contents = await self.store.contents.find(category_id=category_id)
        except StorageError:
            logger.exception("Could not list content of category %s", category_id)
            return 0

        removed = 0
        for content in contents:
            try:
                if await self.store.contents.delete_one(content):
                    removed += 1
            except StorageError:
                logger.exception(
                    "Could not delete content %s of category %s", content.id, category_id
                )
        return removed
