"""Delivery information block types."""

from __future__ import annotations

from enum import StrEnum


class DeliveryType(StrEnum):
    """Kinds of delivery/pickup information shown on the storefront."""

    DELIVERY = "delivery"
    MEETUP = "meetup"
    HOURS = "hours"
    NOTICE = "notice"
