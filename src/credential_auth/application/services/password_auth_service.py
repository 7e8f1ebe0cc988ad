"""Application authentication service for password credentials."""

from __future__ import annotations

import logging
from typing import TypeVar

from credential_auth.application.ports.credential_hasher_port import CredentialHasherPort
from credential_auth.domain.auth.credentials import (
    CANONICAL_FIELDS,
    Credential,
    CredentialFields,
    read_credential,
    write_credential,
)
from credential_auth.domain.auth.errors import InvalidInputError

logger = logging.getLogger(__name__)

UserT = TypeVar("UserT")


class PasswordAuthService:
    """Authenticate passwords against stored credentials and issue new ones."""

    def __init__(
        self,
        *,
        hasher: CredentialHasherPort,
        fields: CredentialFields = CANONICAL_FIELDS,
    ) -> None:
        self._hasher = hasher
        self._fields = fields

    @property
    def fields(self) -> CredentialFields:
        return self._fields

    async def authenticate(self, password: str | None, credential: object | None) -> bool:
        """Verify password against a `Credential` or a user record carrying one.

        A mismatch returns False; only missing inputs or crypto failures raise.
        """

        if not (password and credential is not None):
            raise InvalidInputError("invalid password or user")

        stored = read_credential(credential, fields=self._fields)
        is_valid = await self._hasher.verify(password, stored.hash, stored.salt)
        if is_valid:
            logger.info("password_authenticate_success")
        else:
            logger.info("password_authenticate_failed reason=mismatch")
        return is_valid

    async def generate(self, password: str | None) -> Credential:
        """Return a fresh credential for a password that passes the strength policy."""

        if not password:
            raise InvalidInputError("invalid password")

        return await self._hasher.create(password)

    async def update(self, password: str | None, user: UserT | None) -> UserT:
        """Replace hash and salt on `user` in place and return the same object.

        This mutates the caller's record; use `generate` for a side-effect-free
        alternative.
        """

        if not password or user is None:
            raise InvalidInputError("invalid password or user")

        credential = await self._hasher.create(password)
        write_credential(user, credential, fields=self._fields)
        logger.info(
            "password_credential_updated hash_field=%s salt_field=%s",
            self._fields.hash_field,
            self._fields.salt_field,
        )
        return user
