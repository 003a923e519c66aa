"""Free-text search over categories and content items"""

import logging
from typing import Iterable, List, Optional

from content_tree.core.config import settings
from content_tree.core.errors import InvalidInput
from content_tree.models.category import Category
from content_tree.models.content import Content
from content_tree.models.search import EntityKind, SearchResult
from content_tree.store.base import Collection, DocumentStore

logger = logging.getLogger(__name__)


def _contains(needle: str, values: Iterable[str]) -> bool:
    return any(needle in (value or "").lower() for value in values)


def category_matches(category: Category, needle: str) -> bool:
    return _contains(needle, [category.name, *category.keywords])


def content_matches(content: Content, needle: str) -> bool:
    return _contains(needle, [content.name, content.description, *content.keywords])


class SearchService:
    """Case-insensitive substring search with category-first pagination.

    A page holds at most ``limit`` records. Categories take
    ``limit * page`` to ``limit * (page + 1)``; whatever room is left on the
    page goes to content items, which are paginated with that smaller
    page size.
    """

    def __init__(self, store: DocumentStore):
        self.store = store

    async def _matching(
        self, collection: Collection, predicate, needle: str, authenticated: bool
    ) -> List:
        filters = {} if authenticated else {"enabled": True}
        records = await collection.find(**filters)
        matched = [record for record in records if predicate(record, needle)]
        return sorted(matched, key=lambda r: (r.name, r.id))

    async def search(
        self,
        query_text: str,
        type_filter: Optional[EntityKind] = None,
        page: int = 0,
        limit: Optional[int] = None,
        authenticated: bool = False,
    ) -> SearchResult:
        limit = settings.DEFAULT_SEARCH_LIMIT if limit is None else limit
        errors = []
        if page < 0:
            errors.append("page: Must be a number and not lower than zero")
        if not 1 <= limit <= settings.MAX_SEARCH_LIMIT:
            errors.append(
                f"limit: Must be a number between 1 and {settings.MAX_SEARCH_LIMIT}"
            )
        if errors:
            raise InvalidInput(*errors)

        needle = query_text.lower()

        categories: List[Category] = []
        if type_filter in (None, EntityKind.CATEGORY):
            matched = await self._matching(
                self.store.categories, category_matches, needle, authenticated
            )
            start = limit * page
            categories = matched[start:start + limit]

        contents: List[Content] = []
        content_limit = limit - len(categories)
        if type_filter in (None, EntityKind.CONTENT) and content_limit > 0:
            matched = await self._matching(
                self.store.contents, content_matches, needle, authenticated
            )
            start = content_limit * page
            contents = matched[start:start + content_limit]

        logger.debug(
            "Search %r page=%d limit=%d returned %d categories, %d contents",
            query_text, page, limit, len(categories), len(contents),
        )
        return SearchResult(categories=categories, contents=contents)
