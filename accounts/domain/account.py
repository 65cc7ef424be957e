from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Authority:
    """Catalog-defined role grant, e.g. ``ROLE_USER``."""

    name: str


@dataclass
class Account:
    """Aggregate root for a user account and its role grants."""

    login: str
    password_hash: str = field(default="", repr=False)
    user_no: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    lang_key: Optional[str] = None
    phone: Optional[str] = None
    gender: Optional[int] = None
    age: Optional[int] = None
    classes: Optional[str] = None
    description: Optional[str] = None
    avatar_url: Optional[str] = None
    activated: bool = False
    activation_key: Optional[str] = field(default=None, repr=False)
    created_date: Optional[datetime] = None
    deleted: bool = False
    authorities: set[Authority] = field(default_factory=set)
    id: Optional[int] = None

    @property
    def pending(self) -> bool:
        return not self.activated and self.activation_key is not None

    @property
    def authority_names(self) -> set[str]:
        return {authority.name for authority in self.authorities}
