"""Domain-level request contracts shared by multiple layers."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Optional

from .account import Account


@dataclass
class ProfileUpdate:
    """
    Field set written by a profile update. Every field is copied onto the
    account as given, ``None`` included; only ``login=None`` keeps the
    current login.
    """

    login: Optional[str] = None
    phone: Optional[str] = None
    gender: Optional[int] = None
    age: Optional[int] = None
    classes: Optional[str] = None
    description: Optional[str] = None
    avatar_url: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None

    def apply_to(self, account: Account) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            if item.name == "login" and not value:
                continue
            setattr(account, item.name, value)
