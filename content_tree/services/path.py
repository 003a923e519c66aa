"""Translation between readable category paths and id chains"""

import logging
from typing import List, Optional, Sequence
from urllib.parse import unquote

from content_tree.core.errors import InvalidInput, NotFound
from content_tree.models.path import AncestorEntry, PathResolution
from content_tree.store.base import DocumentStore

logger = logging.getLogger(__name__)


class PathResolver:
    def __init__(self, store: DocumentStore):
        self.store = store

    async def resolve_path(
        self, segments: Sequence[str], authenticated: bool = False
    ) -> PathResolution:
        """Walk the tree from the root, one segment name per level.

        A segment that names no category is looked up as a content item
        under the current parent; a match ends the walk there. Disabled
        records look exactly like missing ones to anonymous callers.
        """
        if not segments:
            raise InvalidInput("path: Path content is empty")

        ids: List[str] = []
        parent_id: Optional[str] = None

        for raw_segment in segments:
            name = unquote(raw_segment)
            category = await self.store.categories.find_one(
                parent_id=parent_id, name=name
            )

            if category is None:
                element = await self.store.contents.find_one(
                    category_id=parent_id, name=name
                )
                if element is not None and (element.enabled or authenticated):
                    return PathResolution(ids=ids, element=element)
                logger.debug("Path segment %r not found under %s", name, parent_id)
                raise NotFound("No category was found")

            if not category.enabled and not authenticated:
                raise NotFound("No category was found")

            parent_id = category.id
            ids.append(parent_id)

        return PathResolution(ids=ids)

    async def resolve_ancestor_chain(
        self, category_id: str, authenticated: bool = False
    ) -> List[AncestorEntry]:
        """Category and its ancestors, nearest first. Never raises NotFound."""
        chain: List[AncestorEntry] = []
        seen = set()
        current_id: Optional[str] = category_id

        while current_id is not None and current_id not in seen:
            seen.add(current_id)
            category = await self.store.categories.find_by_id(current_id)
            if category is None or not (category.enabled or authenticated):
                break
            chain.append(
                AncestorEntry(
                    id=category.id, parent_id=category.parent_id, name=category.name
                )
            )
            current_id = category.parent_id

        return chain
