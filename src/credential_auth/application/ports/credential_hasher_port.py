"""Port for salted credential creation and verification."""

from __future__ import annotations

from typing import Protocol

from credential_auth.domain.auth.credentials import Credential


class CredentialHasherPort(Protocol):
    """Credential hashing/verification contract."""

    async def create(self, password: str) -> Credential:
        """Validate password strength and derive a fresh salted credential."""

    async def verify(self, password: str, password_hash: str, salt: str) -> bool:
        """Re-derive key from password and salt and compare with stored hash."""
