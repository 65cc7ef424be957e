"""Domain types shared by repositories and services."""

from .account import Account, Authority
from .contracts import ProfileUpdate
from .errors import (
    AccountError,
    AccountNotFoundError,
    ActivationNotFoundError,
    LoginAlreadyUsedError,
    RegistrationError,
    RoleNotFoundError,
    StoreUnavailableError,
)

__all__ = [
    "Account",
    "Authority",
    "ProfileUpdate",
    "AccountError",
    "AccountNotFoundError",
    "ActivationNotFoundError",
    "LoginAlreadyUsedError",
    "RegistrationError",
    "RoleNotFoundError",
    "StoreUnavailableError",
]
