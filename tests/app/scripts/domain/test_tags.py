from __future__ import annotations

import pytest

from dispatcher.app.customers.domain import Customer
from dispatcher.app.scripts.domain import OwnershipTagSet, ResourcePolicy, Script


class TestOwnershipTagSet:
    def test_drops_duplicates_and_empty_tags(self):
        tags = OwnershipTagSet(["abc", "", "basic", "abc"])
        assert tags.as_list() == ["abc", "basic"]
        assert len(tags) == 2

    def test_equality_ignores_order(self):
        assert OwnershipTagSet(["a", "b"]) == OwnershipTagSet(["b", "a"])
        assert hash(OwnershipTagSet(["a", "b"])) == hash(OwnershipTagSet(["b", "a"]))
        assert OwnershipTagSet(["a"]) != OwnershipTagSet(["a", "b"])

    def test_for_customer(self, customer: Customer):
        tags = OwnershipTagSet.for_customer(customer)
        assert tags.as_list() == [customer.id, customer.plan_tier]
        assert tags.is_owned_by(customer.id)

    def test_repr(self):
        assert repr(OwnershipTagSet(["a"])) == "OwnershipTagSet(['a'])"

    @pytest.mark.parametrize(["tags", "customer_id", "expected"], [
        ([], "abc", True),
        (["abc", "basic"], "abc", True),
        (["xyz", "basic"], "abc", False),
        (["basic"], "abc", False),
    ])
    def test_allows(self, tags: list[str], customer_id: str, expected: bool):
        assert OwnershipTagSet(tags).allows(customer_id) is expected


class TestScript:
    @pytest.mark.parametrize("name", ["foo", "my-script_2", "a" * 63])
    def test_is_valid_name(self, name: str):
        assert Script.is_valid_name(name)

    @pytest.mark.parametrize("name", [
        "",
        "Foo",
        "victim?x=1",
        "victim#",
        "victim/tags",
        "..",
        "a" * 64,
    ])
    def test_is_valid_name_when_name_is_invalid(self, name: str):
        assert not Script.is_valid_name(name)

    def test_upload_rejected(self):
        exc = Script.UploadRejected(400, {"errors": []})
        assert exc.status_code == 400
        assert exc.body == {"errors": []}


class TestResourcePolicy:
    @pytest.mark.parametrize(["cpu_ms", "memory", "expected"], [
        (None, None, True),
        (50, None, False),
        (None, 128, False),
        (50, 128, False),
    ])
    def test_is_empty(self, cpu_ms, memory, expected):
        policy = ResourcePolicy(script_name="foo", cpu_ms=cpu_ms, memory=memory)
        assert policy.is_empty() is expected
