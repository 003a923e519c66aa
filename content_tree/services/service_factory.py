"""Service factory wiring the services to the configured document store"""

from typing import Optional

from fastapi import Depends

from content_tree.core.config import settings
from content_tree.services.category import CategoryService
from content_tree.services.content import ContentService
from content_tree.services.path import PathResolver
from content_tree.services.search import SearchService
from content_tree.store.base import DocumentStore

_document_store: Optional[DocumentStore] = None


def build_document_store(backend: str) -> DocumentStore:
    if backend == "memory":
        from content_tree.store.memory import MemoryDocumentStore

        return MemoryDocumentStore()

    from content_tree.store.dynamodb import DynamoDocumentStore

    return DynamoDocumentStore()


def get_document_store() -> DocumentStore:
    """Process-wide store shared by every request"""
    global _document_store
    if _document_store is None:
        _document_store = build_document_store(settings.STORAGE_BACKEND)
    return _document_store


# Convenience functions, usable as FastAPI dependencies
def get_category_service(
    store: DocumentStore = Depends(get_document_store),
) -> CategoryService:
    """Get the category service"""
    return CategoryService(store)


def get_content_service(
    store: DocumentStore = Depends(get_document_store),
) -> ContentService:
    """Get the content service"""
    return ContentService(store)


def get_path_resolver(store: DocumentStore = Depends(get_document_store)) -> PathResolver:
    return PathResolver(store)


def get_search_service(store: DocumentStore = Depends(get_document_store)) -> SearchService:
    return SearchService(store)
