"""
Registration of pending accounts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Optional, Sequence

from accounts.core.security import ActivationKeyGenerator, CredentialHasher
from accounts.core.utils import utc_now
from accounts.domain.account import Account
from accounts.domain.contracts import ProfileUpdate
from accounts.domain.errors import RegistrationError, RoleNotFoundError
from accounts.repositories.sql_repository import AccountRepository, AuthorityRepository

logger = logging.getLogger(__name__)


@dataclass
class RegistrationService:
    """Creates accounts in the pending state, each carrying a fresh activation key."""

    store: AccountRepository = field(default_factory=AccountRepository)
    authorities: AuthorityRepository = field(default_factory=AuthorityRepository)
    hasher: CredentialHasher = field(default_factory=CredentialHasher)
    keys: ActivationKeyGenerator = field(default_factory=ActivationKeyGenerator)
    clock: Callable[[], datetime] = utc_now

    def register(
        self,
        login: str,
        user_no: Optional[str],
        password: str,
        *,
        role_ids: Sequence[str],
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        email: Optional[str] = None,
        lang_key: Optional[str] = None,
        deleted: bool = False,
        profile: Optional[ProfileUpdate] = None,
    ) -> Account:
        """
        Persist a new pending account and return it.

        Only the first entry of ``role_ids`` is granted; the rest are ignored.
        Raises ``RoleNotFoundError`` when that role is not in the catalog.
        ``profile`` carries the optional attributes (phone, age, ...); its
        login, name and email fields are ignored here.
        """
        raw_login = (login or "").strip()
        if not raw_login:
            raise RegistrationError("Login is required")
        if not password:
            raise RegistrationError("Password is required")
        if not role_ids:
            raise RegistrationError("At least one role id is required")

        logger.debug("Creating account %s with requested roles %s", raw_login, list(role_ids))
        authority = self.authorities.get_authority(role_ids[0])
        if authority is None:
            raise RoleNotFoundError(role_ids[0])

        extra = profile or ProfileUpdate()
        account = Account(
            login=raw_login,
            user_no=user_no,
            password_hash=self.hasher.hash(password),
            first_name=first_name,
            last_name=last_name,
            email=email,
            lang_key=lang_key,
            phone=extra.phone,
            gender=extra.gender,
            age=extra.age,
            classes=extra.classes,
            description=extra.description,
            avatar_url=extra.avatar_url,
            activated=False,
            activation_key=self.keys.generate(),
            created_date=self.clock(),
            deleted=deleted,
            authorities={authority},
        )
        saved = self.store.save(account)
        logger.debug("Created account: %s", saved)
        return saved
