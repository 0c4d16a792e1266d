"""Port for append-only authentication audit events."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True)
class AuthEventCreateInput:
    """Input payload for one auth audit event."""

    user_id: int | None
    event_type: str
    ip_address: str | None
    user_agent: str | None
    payload: dict[str, Any] = field(default_factory=dict)


class AuthEventRepositoryPort(Protocol):
    """Auth event persistence contract."""

    async def append_event(self, payload: AuthEventCreateInput) -> int:
        """Append one auth event and return its id."""
