"""Storage boundary protocols.

faultlog has no storage logic. These protocols only name the contract that
storage adapters in host applications implement so that their failures can be
mapped onto the fault taxonomy (NotFoundError, ConflictError, ...).
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

IdT_co = TypeVar("IdT_co", covariant=True)
StorableT = TypeVar("StorableT", bound="StorableItem[object]")


@runtime_checkable
class StorableItem(Protocol[IdT_co]):
    """An item identified by an id."""

    @property
    def id(self) -> IdT_co: ...


@runtime_checkable
class OptimisticConcurrencyControlled(Protocol):
    """An item carrying an opaque version token (ETag)."""

    @property
    def etag(self) -> str | None: ...


class CreateProtocol(Protocol[StorableT]):
    """Can create items in persistent storage."""

    async def create(self, item: StorableT) -> StorableT:
        """Create a new item and return it as it was saved.

        Args:
            item: The item to store.

        Returns:
            The stored item, including an updated ``etag`` when the item
            type implements OptimisticConcurrencyControlled.

        Raises:
            ConflictError: If an item with the same id already exists.
        """
        ...
