"""Unit tests for Twitter REST endpoint specs and adapters."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from socialgraph.lookup.connectors.twitter.config import get_id_list_path
from socialgraph.lookup.connectors.twitter.rest.endpoints import (
    get_endpoint_adapter,
    get_endpoint_spec,
    list_endpoints,
)
from socialgraph.lookup.core import ValidationError

USER_ROW = {
    "id": 783214,
    "id_str": "783214",
    "name": "Twitter",
    "screen_name": "Twitter",
    "location": "everywhere",
    "description": "What's happening?!",
    "protected": False,
    "verified": True,
    "followers_count": 62000000,
    "friends_count": 14,
    "listed_count": 90000,
    "favourites_count": 6000,
    "statuses_count": 15000,
    "created_at": "Tue Feb 20 14:35:54 +0000 2007",
}


class TestRegistry:
    def test_list_endpoints(self):
        assert set(list_endpoints()) == {"users_lookup", "followers_ids", "friends_ids"}

    def test_unknown_endpoint(self):
        assert get_endpoint_spec("nope") is None
        assert get_endpoint_adapter("nope") is None


class TestUsersLookupEndpoint:
    def test_build_query_joins_ids(self):
        spec = get_endpoint_spec("users_lookup")
        query = spec.build_query({"user_ids": (1, 22, 333)})

        assert spec.build_path({}) == "/1.1/users/lookup.json"
        assert query["user_id"] == "1,22,333"

    def test_build_query_enforces_limit(self):
        spec = get_endpoint_spec("users_lookup")
        with pytest.raises(ValueError, match="at most 100"):
            spec.build_query({"user_ids": range(101)})

    def test_build_query_rejects_empty(self):
        spec = get_endpoint_spec("users_lookup")
        with pytest.raises(ValueError):
            spec.build_query({"user_ids": ()})

    def test_spec_declares_batch_policy(self):
        spec = get_endpoint_spec("users_lookup")
        assert spec.batch_policy.max_batch_size == 100

    def test_parse_user_row(self):
        adapter = get_endpoint_adapter("users_lookup")()
        [user] = adapter.parse([USER_ROW], {"user_ids": (783214,)})

        assert user.id == 783214
        assert user.screen_name == "Twitter"
        assert user.followers_count == 62000000
        assert user.statuses_count == 15000
        assert user.verified is True
        assert user.created_at == datetime(2007, 2, 20, 14, 35, 54, tzinfo=UTC)

    def test_parse_minimal_row_uses_defaults(self):
        adapter = get_endpoint_adapter("users_lookup")()
        [user] = adapter.parse([{"id": 5, "screen_name": "five"}], {})

        assert user.name == ""
        assert user.followers_count == 0
        assert user.created_at is None

    def test_parse_rejects_error_envelope(self):
        adapter = get_endpoint_adapter("users_lookup")()
        with pytest.raises(ValidationError):
            adapter.parse({"errors": [{"code": 17, "message": "No user matches"}]}, {})

    def test_parse_skips_non_object_rows(self):
        adapter = get_endpoint_adapter("users_lookup")()
        users = adapter.parse([1, {"id": 5, "screen_name": "five"}, "x"], {})

        assert [u.id for u in users] == [5]

    def test_parse_skips_row_missing_screen_name(self, caplog):
        adapter = get_endpoint_adapter("users_lookup")()
        rows = [{"id": 1, "screen_name": "one"}, {"id": 2, "name": "No Handle"}, USER_ROW]

        with caplog.at_level("WARNING"):
            users = adapter.parse(rows, {})

        assert [u.id for u in users] == [1, 783214]
        [skipped] = [r for r in caplog.records if r.getMessage() == "user_row_skipped"]
        assert skipped.user_id == 2
        assert skipped.error_type == "KeyError"

    def test_parse_skips_rows_failing_validation(self):
        adapter = get_endpoint_adapter("users_lookup")()
        rows = [
            {"id": "abc", "screen_name": "bad_id"},
            {"id": 3, "screen_name": "   "},
            {"id": 4, "screen_name": "four", "friends_count": -5},
            {"id": 6, "screen_name": "six"},
        ]

        assert [u.id for u in adapter.parse(rows, {})] == [6]


class TestIdListEndpoints:
    @pytest.mark.parametrize(
        ("endpoint_id", "path"),
        [
            ("followers_ids", "/1.1/followers/ids.json"),
            ("friends_ids", "/1.1/friends/ids.json"),
        ],
    )
    def test_paths(self, endpoint_id, path):
        assert get_endpoint_spec(endpoint_id).build_path({}) == path

    def test_build_query_strips_at_sign(self):
        spec = get_endpoint_spec("followers_ids")
        query = spec.build_query({"screen_name": "@jack"})
        assert query == {"screen_name": "jack", "stringify_ids": "false"}

    def test_build_query_rejects_blank(self):
        spec = get_endpoint_spec("friends_ids")
        with pytest.raises(ValueError):
            spec.build_query({"screen_name": " @ "})

    def test_parse_envelope(self):
        adapter = get_endpoint_adapter("followers_ids")()
        payload = {"ids": [3, 2, 1], "next_cursor": 0, "previous_cursor": 0}
        assert adapter.parse(payload, {}) == [3, 2, 1]

    def test_parse_bare_list(self):
        adapter = get_endpoint_adapter("friends_ids")()
        assert adapter.parse(["10", 11], {}) == [10, 11]

    def test_parse_missing_ids(self):
        adapter = get_endpoint_adapter("friends_ids")()
        with pytest.raises(ValidationError):
            adapter.parse({"errors": []}, {})

    def test_unknown_relation(self):
        with pytest.raises(ValueError, match="Unknown relation"):
            get_id_list_path("mutuals")
