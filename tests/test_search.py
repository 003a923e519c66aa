"""
Search tests
"""

import pytest

from content_tree.core.errors import InvalidInput
from content_tree.models.search import EntityKind
from content_tree.services.search import SearchService


class TestSearch:
    def test_matches_name_and_keywords_case_insensitively(
        self, store, run, make_category, make_content
    ):
        make_category("Foo Tools")
        make_category("Garden", keywords=["outdoor", "FOOTPATH"])
        make_category("Paint")
        make_content("Foobar")
        make_content("Manual", description="All about food")

        result = run(SearchService(store).search("foo"))

        assert [c.name for c in result.categories] == ["Foo Tools", "Garden"]
        assert [c.name for c in result.contents] == ["Foobar", "Manual"]

    def test_disabled_records_only_for_authenticated(
        self, store, run, make_category, make_content
    ):
        make_category("Foo", enabled=False)
        make_content("Foo item", enabled=False)
        service = SearchService(store)

        anonymous = run(service.search("foo"))
        assert anonymous.categories == []
        assert anonymous.contents == []

        authenticated = run(service.search("foo", authenticated=True))
        assert len(authenticated.categories) == 1
        assert len(authenticated.contents) == 1

    def test_page_holds_at_most_limit_categories_first(
        self, store, run, make_category, make_content
    ):
        for i in range(7):
            make_category(f"foo-cat-{i}")
        for i in range(8):
            make_content(f"foo-item-{i}")

        result = run(SearchService(store).search("foo", page=0, limit=10))

        assert len(result.categories) == 7
        assert len(result.contents) == 3
        assert len(result.categories) + len(result.contents) <= 10

    def test_content_budget_paginates_with_remaining_room(
        self, store, run, make_category, make_content
    ):
        for i in range(3):
            make_category(f"foo-cat-{i}")
        for i in range(6):
            make_content(f"foo-item-{i}")
        service = SearchService(store)

        # page 1: no categories left, budget of 4 items from offset 4
        result = run(service.search("foo", page=1, limit=4))
        assert result.categories == []
        assert [c.name for c in result.contents] == ["foo-item-4", "foo-item-5"]

        # page 0: 3 categories leave room for 1 item
        first = run(service.search("foo", page=0, limit=4))
        assert len(first.categories) == 3
        assert [c.name for c in first.contents] == ["foo-item-0"]

    def test_full_category_page_leaves_no_room(self, store, run, make_category, make_content):
        for i in range(5):
            make_category(f"foo-{i}")
        make_content("foo-item")

        result = run(SearchService(store).search("foo", limit=5))

        assert len(result.categories) == 5
        assert result.contents == []

    def test_type_filter_restricts_kind(self, store, run, make_category, make_content):
        make_category("foo-cat")
        make_content("foo-item")
        service = SearchService(store)

        only_categories = run(service.search("foo", type_filter=EntityKind.CATEGORY))
        assert len(only_categories.categories) == 1
        assert only_categories.contents == []

        only_contents = run(service.search("foo", type_filter=EntityKind.CONTENT))
        assert only_contents.categories == []
        assert len(only_contents.contents) == 1

    @pytest.mark.parametrize("page, limit", [(-1, 10), (0, 0), (0, 101)])
    def test_invalid_paging(self, store, run, page, limit):
        with pytest.raises(InvalidInput):
            run(SearchService(store).search("foo", page=page, limit=limit))


class TestSearchApi:
    def test_search_over_http(self, client, make_category, make_content):
        make_category("Foo")
        make_content("Food")

        response = client.post("/api/v1/content/search", json={"input": "FOO"})

        assert response.status_code == 200
        data = response.json()["data"]
        assert [c["name"] for c in data["categories"]] == ["Foo"]
        assert [c["name"] for c in data["contents"]] == ["Food"]

    def test_unknown_type_rejected(self, client):
        response = client.post(
            "/api/v1/content/search", json={"input": "foo", "type": "Hammer"}
        )
        assert response.status_code == 400

    def test_missing_input_rejected(self, client):
        response = client.post("/api/v1/content/search", json={"page": 1})
        assert response.status_code == 400
