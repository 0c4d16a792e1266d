"""Ports for storefront content blocks: social links, delivery and contact info."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from storefront_admin.domain.site.delivery_type import DeliveryType


@dataclass(frozen=True)
class SocialMediaRecord:
    """Social network link shown in the storefront footer."""

    id: int
    platform: str
    url: str
    icon: str
    display_order: int
    is_active: bool
    custom_name: str
    custom_logo: str


@dataclass(frozen=True)
class SocialMediaWriteInput:
    """Full social link state to insert or overwrite."""

    platform: str
    url: str
    icon: str
    display_order: int
    is_active: bool
    custom_name: str
    custom_logo: str


@dataclass(frozen=True)
class DeliveryInfoRecord:
    """Delivery, meetup, hours, or notice block."""

    id: int
    title: str
    description: str
    type: DeliveryType
    is_active: bool
    custom_name: str


@dataclass(frozen=True)
class DeliveryInfoWriteInput:
    """Full delivery block state to insert or overwrite."""

    title: str
    description: str
    type: DeliveryType
    is_active: bool
    custom_name: str


@dataclass(frozen=True)
class ContactInfoRecord:
    """Shop contact details block."""

    id: int
    email: str
    phone: str
    address: str
    hours: str
    is_active: bool


@dataclass(frozen=True)
class ContactInfoWriteInput:
    """Full contact block state to insert or overwrite."""

    email: str
    phone: str
    address: str
    hours: str
    is_active: bool


class SocialMediaRepositoryPort(Protocol):
    """Social media link repository contract."""

    async def list_items(self, *, active_only: bool) -> list[SocialMediaRecord]:
        """Return links ordered by display order then id."""

    async def get_by_id(self, *, item_id: int) -> SocialMediaRecord | None:
        """Return one link or None."""

    async def create_item(self, payload: SocialMediaWriteInput) -> SocialMediaRecord:
        """Insert one link."""

    async def update_item(
        self,
        *,
        item_id: int,
        payload: SocialMediaWriteInput,
    ) -> SocialMediaRecord | None:
        """Overwrite one link."""

    async def delete_item(self, *, item_id: int) -> SocialMediaRecord | None:
        """Delete one link and return the removed row."""


class DeliveryInfoRepositoryPort(Protocol):
    """Delivery info repository contract."""

    async def list_items(self, *, active_only: bool) -> list[DeliveryInfoRecord]:
        """Return delivery blocks ordered by id."""

    async def get_by_id(self, *, item_id: int) -> DeliveryInfoRecord | None:
        """Return one block or None."""

    async def create_item(self, payload: DeliveryInfoWriteInput) -> DeliveryInfoRecord:
        """Insert one block."""

    async def update_item(
        self,
        *,
        item_id: int,
        payload: DeliveryInfoWriteInput,
    ) -> DeliveryInfoRecord | None:
        """Overwrite one block."""

    async def delete_item(self, *, item_id: int) -> DeliveryInfoRecord | None:
        """Delete one block and return the removed row."""


class ContactInfoRepositoryPort(Protocol):
    """Contact info repository contract."""

    async def list_items(self, *, active_only: bool) -> list[ContactInfoRecord]:
        """Return contact blocks ordered by id."""

    async def get_by_id(self, *, item_id: int) -> ContactInfoRecord | None:
        """Return one block or None."""

    async def create_item(self, payload: ContactInfoWriteInput) -> ContactInfoRecord:
        """Insert one block."""

    async def update_item(
        self,
        *,
        item_id: int,
        payload: ContactInfoWriteInput,
    ) -> ContactInfoRecord | None:
        """Overwrite one block."""

    async def delete_item(self, *, item_id: int) -> ContactInfoRecord | None:
        """Delete one block and return the removed row."""
