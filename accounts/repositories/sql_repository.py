"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Iterable, Iterator, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from accounts.core.utils import as_utc, utc_now
from accounts.db.models import Authority as AuthorityRow, User, user_authorities
from accounts.db.session import get_session
from accounts.domain.account import Account, Authority
from accounts.domain.errors import LoginAlreadyUsedError, RoleNotFoundError, StoreUnavailableError

logger = logging.getLogger(__name__)

# written as given on every save; lifecycle columns and the password hash are not
_PROFILE_COLUMNS = (
    "login",
    "user_no",
    "first_name",
    "last_name",
    "email",
    "lang_key",
    "phone",
    "gender",
    "age",
    "classes",
    "description",
    "avatar_url",
)


@contextmanager
def _transaction() -> Iterator[Session]:
    """Session scope that rolls back and translates SQLAlchemy failures."""
    with get_session() as session:
        try:
            yield session
        except IntegrityError as exc:
            session.rollback()
            raise LoginAlreadyUsedError("Login already in use") from exc
        except SQLAlchemyError as exc:
            session.rollback()
            raise StoreUnavailableError(str(exc)) from exc


def _to_domain(row: User) -> Account:
    return Account(
        id=row.id,
        login=row.login,
        user_no=row.user_no,
        password_hash=row.password_hash,
        first_name=row.first_name,
        last_name=row.last_name,
        email=row.email,
        lang_key=row.lang_key,
        phone=row.phone,
        gender=row.gender,
        age=row.age,
        classes=row.classes,
        description=row.description,
        avatar_url=row.avatar_url,
        activated=bool(row.activated),
        activation_key=row.activation_key,
        created_date=as_utc(row.created_date),
        deleted=bool(row.deleted),
        authorities={Authority(name=a.name) for a in row.authorities},
    )


class AccountRepository:
    """Account store: lookups, full-record saves, conditional and soft deletes."""

    # -------------------------- lookups --------------------------
    def find_by_login(self, login: str) -> Optional[Account]:
        with _transaction() as session:
            stmt = select(User).where(User.login == login, User.deleted.is_(False))
            row = session.execute(stmt).scalar_one_or_none()
            return _to_domain(row) if row else None

    def find_by_id(self, account_id: int) -> Optional[Account]:
        with _transaction() as session:
            row = session.get(User, account_id)
            return _to_domain(row) if row else None

    def find_by_activation_key(self, key: str) -> Optional[Account]:
        with _transaction() as session:
            stmt = select(User).where(
                User.activation_key == key,
                User.activated.is_(False),
                User.deleted.is_(False),
            )
            row = session.execute(stmt).scalar_one_or_none()
            return _to_domain(row) if row else None

    def find_pending_created_before(self, cutoff: datetime) -> list[Account]:
        with _transaction() as session:
            stmt = (
                select(User)
                .where(
                    User.activated.is_(False),
                    User.deleted.is_(False),
                    User.created_date < as_utc(cutoff),
                )
                .order_by(User.created_date)
            )
            return [_to_domain(row) for row in session.execute(stmt).scalars().all()]

    # -------------------------- writes --------------------------
    def save(self, account: Account) -> Optional[Account]:
        """
        Insert a new account or write the field set of an existing one.

        For existing rows, ``activated`` and ``deleted`` only move forward and
        the password hash is left alone. Returns ``None`` if the row is gone.
        """
        with _transaction() as session:
            if account.id is None:
                row = User(
                    password_hash=account.password_hash,
                    activated=account.activated,
                    activation_key=None if account.activated else account.activation_key,
                    created_date=as_utc(account.created_date) or utc_now(),
                    deleted=account.deleted,
                )
                session.add(row)
            else:
                row = session.get(User, account.id, with_for_update=True)
                if row is None:
                    return None
                if row.deleted and not account.deleted:
                    # soft-deleted since the caller read it
                    return None
                if account.activated and not row.activated:
                    row.activated = True
                    row.activation_key = None
                if account.deleted:
                    row.deleted = True
            for column in _PROFILE_COLUMNS:
                setattr(row, column, getattr(account, column))
            row.authorities = self._authority_rows(session, account.authorities)
            try:
                session.flush()
                saved = _to_domain(row)
                session.commit()
            except StaleDataError:
                # deleted between the locked read and the update
                session.rollback()
                return None
            return saved

    def activate(self, key: str) -> Optional[Account]:
        """
        Flip the pending account holding ``key`` to active and clear the key.

        Only the lifecycle columns are written. Returns ``None`` when no
        pending, non-deleted account holds the key.
        """
        with _transaction() as session:
            account_id = session.execute(
                select(User.id)
                .where(User.activation_key == key)
                .with_for_update()
            ).scalar_one_or_none()
            if account_id is None:
                return None
            result = session.execute(
                update(User)
                .where(
                    User.id == account_id,
                    User.activation_key == key,
                    User.activated.is_(False),
                    User.deleted.is_(False),
                )
                .values(activated=True, activation_key=None)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != 1:
                session.rollback()
                return None
            row = session.get(User, account_id, populate_existing=True)
            activated = _to_domain(row)
            session.commit()
            return activated

    def conditional_delete(self, account_id: int, expected_activated: bool = False) -> bool:
        """Delete the account only if its stored ``activated`` flag still matches."""
        with _transaction() as session:
            result = session.execute(
                delete(User)
                .where(
                    User.id == account_id,
                    User.activated == expected_activated,
                    User.deleted.is_(False),
                )
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != 1:
                session.rollback()
                return False
            session.execute(delete(user_authorities).where(user_authorities.c.user_id == account_id))
            session.commit()
            return True

    def soft_delete(self, account_id: int) -> bool:
        with _transaction() as session:
            result = session.execute(
                update(User)
                .where(User.id == account_id)
                .values(deleted=True)
                .execution_options(synchronize_session=False)
            )
            session.commit()
            return result.rowcount == 1

    def update_password_hash(self, account_id: int, password_hash: str) -> bool:
        with _transaction() as session:
            result = session.execute(
                update(User)
                .where(User.id == account_id, User.deleted.is_(False))
                .values(password_hash=password_hash)
                .execution_options(synchronize_session=False)
            )
            session.commit()
            return result.rowcount == 1

    def _authority_rows(self, session: Session, authorities: Iterable[Authority]) -> list[AuthorityRow]:
        rows = []
        for authority in authorities:
            row = session.get(AuthorityRow, authority.name)
            if row is None:
                raise RoleNotFoundError(authority.name)
            rows.append(row)
        return rows


class AuthorityRepository:
    """Read access to the authority catalog plus seeding for fresh databases."""

    def get_authority(self, name: str) -> Optional[Authority]:
        with _transaction() as session:
            row = session.get(AuthorityRow, name)
            return Authority(name=row.name) if row else None

    def list_authorities(self) -> list[Authority]:
        with _transaction() as session:
            rows = session.execute(select(AuthorityRow).order_by(AuthorityRow.name)).scalars().all()
            return [Authority(name=row.name) for row in rows]

    def ensure_authorities(self, names: Iterable[str]) -> None:
        with _transaction() as session:
            for name in names:
                if session.get(AuthorityRow, name) is None:
                    logger.debug("Seeding authority %s", name)
                    session.add(AuthorityRow(name=name))
            session.commit()
