"""Security helpers (password hashing and activation keys)."""

from __future__ import annotations

import secrets

from argon2 import PasswordHasher, exceptions as argon_exc

from .config import clamp_key_length, get_settings

_PREFIX = "argon2$"


class CredentialHasher:
    """One-way password hashing backed by Argon2; every hash gets a fresh salt."""

    def __init__(self, hasher: PasswordHasher | None = None) -> None:
        self._ph = hasher or PasswordHasher()

    def hash(self, password: str) -> str:
        """Create an Argon2 hash with a prefix for detection."""
        return f"{_PREFIX}{self._ph.hash(password)}"

    def verify(self, password: str, stored_hash: str | None) -> bool:
        stored = stored_hash or ""
        if not stored.startswith(_PREFIX):
            return False
        try:
            return self._ph.verify(stored[len(_PREFIX) :], password)
        except (argon_exc.VerifyMismatchError, argon_exc.VerificationError, argon_exc.InvalidHashError):
            return False


class ActivationKeyGenerator:
    """Unguessable activation keys drawn from ``secrets``."""

    def __init__(self, length: int | None = None) -> None:
        self.length = clamp_key_length(length or get_settings().activation_key_length)

    def generate(self) -> str:
        # token_urlsafe yields ~1.3 chars per byte; trim to the requested length
        return secrets.token_urlsafe(self.length)[: self.length]
