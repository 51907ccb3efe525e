"""Environment configuration for secret store providers."""
from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore", populate_by_name=True
    )

    provider: str = Field(
        "aws",
        alias="SECRET_STORE_PROVIDER",
        description="Name of the secret store backend to use",
    )
    region: str | None = Field(
        None,
        validation_alias=AliasChoices("AWS_REGION", "AWS_DEFAULT_REGION"),
        description="AWS region hosting the secrets",
    )
    access_key_id: str | None = Field(None, alias="AWS_ACCESS_KEY_ID", repr=False)
    secret_access_key: str | None = Field(None, alias="AWS_SECRET_ACCESS_KEY", repr=False)
    role_arn: str | None = Field(
        None,
        alias="AWS_ROLE_ARN",
        description="Role assumed through STS before calling Secrets Manager",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
