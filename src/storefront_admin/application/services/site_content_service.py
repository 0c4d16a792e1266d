"""Application service for storefront content blocks managed by admins."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import fields, replace
from typing import Any, ClassVar, Generic, Protocol, TypeVar

logger = logging.getLogger(__name__)


class DataclassWrite(Protocol):
    """Any dataclass type; repositories accept frozen dataclass payloads."""

    __dataclass_fields__: ClassVar[dict[str, Any]]


RecordT = TypeVar("RecordT")
WriteT = TypeVar("WriteT", bound=DataclassWrite)


class ContentItemNotFoundError(LookupError):
    """Raised when a content block id does not resolve to a persisted row."""

    def __init__(self, *, resource: str, item_id: int) -> None:
        super().__init__(f"{resource} not found")
        self.resource = resource
        self.item_id = item_id


class InvalidContentChangeError(ValueError):
    """Raised when an update names fields the block does not have."""


class ContentRepository(Protocol[RecordT, WriteT]):
    """Shape shared by social media, delivery info and contact info repositories."""

    async def list_items(self, *, active_only: bool) -> list[RecordT]: ...

    async def get_by_id(self, *, item_id: int) -> RecordT | None: ...

    async def create_item(self, payload: WriteT) -> RecordT: ...

    async def update_item(self, *, item_id: int, payload: WriteT) -> RecordT | None: ...

    async def delete_item(self, *, item_id: int) -> RecordT | None: ...


class SiteContentService(Generic[RecordT, WriteT]):
    """CRUD use-cases for one kind of storefront content block.

    `resource` is the human label used in not-found errors, for example
    "Social media". `write_type` is the frozen dataclass accepted by the
    repository; partial updates are merged onto the current row through it.
    """

    def __init__(
        self,
        *,
        resource: str,
        repository: ContentRepository[RecordT, WriteT],
        write_type: type[WriteT],
    ) -> None:
        self._resource = resource
        self._repository = repository
        self._write_type = write_type
        self._write_fields = tuple(item.name for item in fields(write_type))

    async def list_items(self, *, active_only: bool = False) -> list[RecordT]:
        return await self._repository.list_items(active_only=active_only)

    async def get_item(self, *, item_id: int) -> RecordT:
        item = await self._repository.get_by_id(item_id=item_id)
        if item is None:
            raise ContentItemNotFoundError(resource=self._resource, item_id=item_id)
        return item

    async def create_item(self, payload: WriteT) -> RecordT:
        created = await self._repository.create_item(payload)
        logger.info("site_content_created resource=%s", self._resource)
        return created

    async def update_item(self, *, item_id: int, changes: Mapping[str, Any]) -> RecordT:
        """Merge provided fields onto the current block and persist it."""

        unknown = set(changes) - set(self._write_fields)
        if unknown:
            raise InvalidContentChangeError(f"unknown fields: {', '.join(sorted(unknown))}")

        current = await self.get_item(item_id=item_id)
        merged = replace(
            self._write_type(**{name: getattr(current, name) for name in self._write_fields}),
            **changes,
        )
        updated = await self._repository.update_item(item_id=item_id, payload=merged)
        if updated is None:
            raise ContentItemNotFoundError(resource=self._resource, item_id=item_id)
        logger.info("site_content_updated resource=%s item_id=%s", self._resource, item_id)
        return updated

    async def delete_item(self, *, item_id: int) -> RecordT:
        deleted = await self._repository.delete_item(item_id=item_id)
        if deleted is None:
            raise ContentItemNotFoundError(resource=self._resource, item_id=item_id)
        logger.info("site_content_deleted resource=%s item_id=%s", self._resource, item_id)
        return deleted
