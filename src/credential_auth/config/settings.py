"""Runtime settings loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from credential_auth.domain.auth.credentials import (
    CANONICAL_FIELDS,
    LEGACY_FIELDS,
    CredentialFields,
)

CredentialFieldConvention = Literal["canonical", "legacy"]


class Settings(BaseSettings):
    """Environment-driven application settings.

    KDF parameters are intentionally not configurable here.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    credential_field_convention: CredentialFieldConvention = Field(
        default="canonical",
        validation_alias="CREDENTIAL_FIELD_CONVENTION",
    )

    @property
    def credential_fields(self) -> CredentialFields:
        """Return user-record field names for the configured convention."""

        if self.credential_field_convention == "legacy":
            return LEGACY_FIELDS
        return CANONICAL_FIELDS


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache application settings."""

    return Settings()
