"""PBKDF2 credential hasher adapter."""

from __future__ import annotations

import asyncio
import base64
import hashlib
import hmac
import logging
import secrets
from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

from credential_auth.application.ports.credential_hasher_port import CredentialHasherPort
from credential_auth.domain.auth.credentials import Credential
from credential_auth.domain.auth.errors import (
    InternalCryptoFailureError,
    InvalidInputError,
    WeakPasswordError,
)
from credential_auth.domain.auth.strength_policy import PasswordStrengthPolicy

logger = logging.getLogger(__name__)

SALT_BYTES: Final = 128


@dataclass(frozen=True)
class KdfParameters:
    """Key-derivation parameters baked into every stored credential."""

    iterations: int
    key_length: int
    digest: str


# Changing these invalidates every stored credential; treat it as a migration.
PBKDF2_SHA1_PARAMETERS: Final = KdfParameters(iterations=10_000, key_length=512, digest="sha1")

DeriveKey = Callable[[str, bytes, bytes, int, int], bytes]


class Pbkdf2CredentialHasher(CredentialHasherPort):
    """Credential hashing adapter using PBKDF2-HMAC with fixed parameters."""

    def __init__(
        self,
        *,
        policy: PasswordStrengthPolicy | None = None,
        derive_key: DeriveKey = hashlib.pbkdf2_hmac,
        random_bytes: Callable[[int], bytes] = secrets.token_bytes,
    ) -> None:
        self._policy = policy or PasswordStrengthPolicy()
        self._derive_key = derive_key
        self._random_bytes = random_bytes

    async def create(self, password: str) -> Credential:
        if not password:
            raise InvalidInputError("password is required")
        if not isinstance(password, str):
            raise InvalidInputError("password must be text")

        report = self._policy.evaluate(password)
        if not report.accepted:
            logger.info(
                "credential_create_rejected_weak long_enough=%s classes=%s",
                report.long_enough,
                len(report.matched_classes),
            )
            raise WeakPasswordError(report=report)

        try:
            raw_salt = self._random_bytes(SALT_BYTES)
        except Exception as exc:
            raise InternalCryptoFailureError("could not generate salt") from exc
        salt = base64.b64encode(raw_salt).decode("ascii")

        password_hash = await self._derive_hex(password, salt)
        logger.info("credential_created salt_bytes=%s", SALT_BYTES)
        return Credential(hash=password_hash, salt=salt)

    async def verify(self, password: str, password_hash: str, salt: str) -> bool:
        if not password:
            raise InvalidInputError("password is required")
        if not (password_hash and salt):
            raise InvalidInputError("hash and salt are required")
        if not all(isinstance(value, str) for value in (password, password_hash, salt)):
            raise InvalidInputError("password, hash and salt must be text")

        candidate = await self._derive_hex(password, salt)
        return hmac.compare_digest(candidate.encode("ascii"), password_hash.encode("utf-8", "surrogatepass"))

    async def _derive_hex(self, password: str, salt: str) -> str:
        """Derive the key in a worker thread and return it hex-encoded."""

        try:
            encoded_password = password.encode("utf-8")
            # The KDF consumes the stored base64 text, not the decoded bytes.
            encoded_salt = salt.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise InvalidInputError("password and salt must be valid text") from exc

        return await asyncio.to_thread(self._derive_hex_sync, encoded_password, encoded_salt)

    def _derive_hex_sync(self, password: bytes, salt: bytes) -> str:
        params = PBKDF2_SHA1_PARAMETERS
        try:
            derived = self._derive_key(
                params.digest,
                password,
                salt,
                params.iterations,
                params.key_length,
            )
        except Exception as exc:
            logger.warning("credential_derive_failed digest=%s error=%s", params.digest, exc)
            raise InternalCryptoFailureError() from exc
        return derived.hex()
