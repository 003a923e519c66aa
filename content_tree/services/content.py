"""Content item service"""

import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from content_tree.core.errors import NotFound
from content_tree.core.security import (
    Principal,
    require_authenticated,
    require_editor,
)
from content_tree.models.content import Content, ContentCreate, ContentUpdate
from content_tree.store.base import DocumentStore

logger = logging.getLogger(__name__)


class ContentService:
    """Service class for content item operations"""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def list_contents(
        self, category_id: Optional[str] = None, authenticated: bool = False
    ) -> List[Content]:
        """Items filed directly under category_id (unfiled items when None)"""
        contents = await self.store.contents.find(category_id=category_id)
        visible = [c for c in contents if c.enabled or authenticated]
        return sorted(visible, key=lambda c: (c.name, c.id))

    async def get_content(self, content_id: str, authenticated: bool = False) -> Content:
        content = await self.store.contents.find_by_id(content_id)
        if content is None or not (content.enabled or authenticated):
            raise NotFound("Content not found")
        return content

    async def create_content(
        self, content_data: ContentCreate, principal: Optional[Principal]
    ) -> Content:
        """Create a new content item; names need not be unique"""
        require_editor(principal)

        if content_data.category_id is not None:
            category = await self.store.categories.find_by_id(content_data.category_id)
            if category is None:
                raise NotFound("CategoryId was not found")

        now = datetime.now(timezone.utc)
        content = Content(
            id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
            **content_data.model_dump(),
        )
        await self.store.contents.insert(content)

        logger.info(
            "Content %s (%r) created in %s by %s",
            content.id, content.name, content.category_id, principal.user_id,
        )
        return content

    async def update_content(
        self,
        content_id: str,
        update_data: ContentUpdate,
        principal: Optional[Principal],
    ) -> Content:
        """Apply the provided fields.

        Any authenticated caller may update content; unlike categories there
        is no ADMIN/EDITOR requirement.
        """
        principal = require_authenticated(principal)

        content = await self.store.contents.find_by_id(content_id)
        if content is None:
            raise NotFound("Id was not found")

        changes = update_data.changes()
        content = content.model_copy(
            update={**changes, "updated_at": datetime.now(timezone.utc)}
        )
        await self.store.contents.save(content)

        logger.info(
            "Content %s updated (%s) by %s",
            content.id, ", ".join(sorted(changes)) or "no fields", principal.user_id,
        )
        return content

    async def delete_content(
        self, content_id: str, principal: Optional[Principal]
    ) -> Content:
        principal = require_authenticated(principal)

        content = await self.store.contents.find_by_id(content_id)
        if content is None:
            raise NotFound("Id was not found")

        await self.store.contents.delete_one(content)
        logger.info("Content %s deleted by %s", content.id, principal.user_id)
        return content
