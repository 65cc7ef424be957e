"""SQLAlchemy models for accounts and the authority catalog."""
from __future__ import annotations

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
)
from sqlalchemy.orm import relationship

from accounts.core.config import ACTIVATION_KEY_MAX_LENGTH

from .session import Base


user_authorities = Table(
    "user_authorities",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("authority_name", String(50), ForeignKey("authorities.name"), primary_key=True),
)


class Authority(Base):
    __tablename__ = "authorities"

    name = Column(String(50), primary_key=True)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    login = Column(String(50), unique=True, nullable=False)
    user_no = Column(String(50), nullable=True)
    password_hash = Column(Text, nullable=False)
    first_name = Column(String(50), nullable=True)
    last_name = Column(String(50), nullable=True)
    email = Column(String(100), nullable=True)
    lang_key = Column(String(5), nullable=True)
    phone = Column(String(20), nullable=True)
    gender = Column(Integer, nullable=True)
    age = Column(Integer, nullable=True)
    classes = Column(String(100), nullable=True)
    description = Column(Text, nullable=True)
    avatar_url = Column(String(255), nullable=True)
    activated = Column(Boolean, default=False, nullable=False)
    activation_key = Column(String(ACTIVATION_KEY_MAX_LENGTH), index=True, nullable=True)
    created_date = Column(DateTime(timezone=True), index=True, nullable=False)
    deleted = Column(Boolean, default=False, nullable=False)

    authorities = relationship("Authority", secondary=user_authorities, lazy="selectin")
