"""
DynamoDB collection routing and record conversion (no AWS calls)
"""

from datetime import datetime, timezone

import pytest

from content_tree.core.errors import StorageError
from content_tree.models.category import Category
from content_tree.models.dynamodb_models import CategoryModel
from content_tree.store.dynamodb import DynamoDocumentStore, build_condition


def _item(**overrides):
    now = datetime.now(timezone.utc)
    values = {
        "id": "cat-1",
        "name": "Tools",
        "parent_id": "shop",
        "image": "tools.png",
        "keywords": ["hardware"],
        "enabled": True,
        "created_at": now,
        "updated_at": now,
    }
    values.update(overrides)
    return CategoryModel(**values)


class FakeIndex:
    def __init__(self, items):
        self.items = items
        self.calls = []

    def query(self, hash_key, filter_condition=None):
        self.calls.append((hash_key, filter_condition))
        return iter(self.items)


class TestBuildCondition:
    def test_no_filters(self):
        assert build_condition(CategoryModel, {}) is None

    def test_unknown_field(self):
        with pytest.raises(StorageError):
            build_condition(CategoryModel, {"colour": "red"})

    def test_combines_clauses(self):
        condition = build_condition(CategoryModel, {"parent_id": None, "name": "Tools"})
        assert condition is not None


class TestDynamoCollection:
    def test_index_used_for_concrete_parent(self, run, monkeypatch):
        collection = DynamoDocumentStore().categories
        index = FakeIndex([_item()])
        monkeypatch.setattr(collection, "index", index)
        monkeypatch.setattr(
            CategoryModel, "scan", lambda *a, **k: pytest.fail("scan not expected")
        )

        records = run(collection.find(parent_id="shop", name="Tools"))

        assert index.calls[0][0] == "shop"
        assert index.calls[0][1] is not None
        assert len(records) == 1
        assert isinstance(records[0], Category)
        assert records[0].keywords == ["hardware"]
        assert records[0].parent_id == "shop"

    def test_scan_used_for_root_lookup(self, run, monkeypatch):
        collection = DynamoDocumentStore().categories
        scanned = []

        def fake_scan(condition=None, *args, **kwargs):
            scanned.append(condition)
            return iter([_item(parent_id=None)])

        monkeypatch.setattr(CategoryModel, "scan", fake_scan)
        monkeypatch.setattr(collection, "index", FakeIndex([]))

        records = run(collection.find(parent_id=None, name="Tools"))

        assert len(scanned) == 1
        assert scanned[0] is not None
        assert records[0].parent_id is None
        assert collection.index.calls == []
