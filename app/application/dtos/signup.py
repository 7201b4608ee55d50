"""DTOs for early-access signups (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class SignupCreate:
    """Input for a public early-access signup."""

    email: str
    name: str
    company: str | None = None
    interests: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class SignupResult:
    """Early-access signup read-model."""

    id: str
    app_id: str
    email: str
    name: str
    company: str | None
    interests: list[Any]
    status: str
    created_at: datetime


@dataclass(frozen=True)
class SignupPage:
    """One page of signups with pagination flags."""

    items: list[SignupResult]
    page: int
    limit: int
    total_items: int

    @property
    def total_pages(self) -> int:
        return -(-self.total_items // self.limit) if self.limit else 0

    @property
    def has_next(self) -> bool:
        return (self.page - 1) * self.limit + len(self.items) < self.total_items

    @property
    def has_prev(self) -> bool:
        return self.page > 1
