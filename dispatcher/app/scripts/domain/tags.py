from __future__ import annotations

from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from dispatcher.app.customers.domain import Customer

__all__ = ["OwnershipTagSet"]


class OwnershipTagSet:
    """
    Tags attached to a script in the namespace registry.

    The registry has no notion of an owner, so the owning customer ID is stored as
    one of the tags. A script without tags is unclaimed.
    """

    __slots__ = ("_tags", )

    def __init__(self, tags: Iterable[str] = ()) -> None:
        self._tags = tuple(dict.fromkeys(tag for tag in tags if tag))

    def __contains__(self, tag: object) -> bool:
        return tag in self._tags

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OwnershipTagSet):
            return NotImplemented
        return set(self._tags) == set(other._tags)

    def __hash__(self) -> int:
        return hash(frozenset(self._tags))

    def __iter__(self) -> Iterator[str]:
        return iter(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._tags)!r})"

    @classmethod
    def for_customer(cls, customer: Customer) -> Self:
        """Returns tags that mark a script as owned by the customer."""
        return cls([customer.id, customer.plan_tier])

    def allows(self, customer_id: str) -> bool:
        """True if the customer may create or update a script with these tags."""
        return not self.is_claimed() or self.is_owned_by(customer_id)

    def as_list(self) -> list[str]:
        return list(self._tags)

    def is_claimed(self) -> bool:
        return bool(self._tags)

    def is_owned_by(self, customer_id: str) -> bool:
        return customer_id in self._tags
