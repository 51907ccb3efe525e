"""Select and build the configured secret store provider."""
from __future__ import annotations

import logging
from functools import lru_cache

from external_secrets.config import Settings, get_settings

from .aws import SecretsManager, new_session
from .base import SecretStoreProvider

logger = logging.getLogger(__name__)

_AWS_SECRETS_MANAGER_NAMES = {"aws", "aws-secrets-manager", "secretsmanager"}


def _build_aws_secrets_manager(settings: Settings) -> SecretsManager:
    if not settings.region:
        raise RuntimeError("AWS_REGION or AWS_DEFAULT_REGION must be set for AWS Secrets Manager")
    session = new_session(
        settings.access_key_id,
        settings.secret_access_key,
        settings.region,
        settings.role_arn,
    )
    return SecretsManager.from_session(session)


def build_provider(settings: Settings) -> SecretStoreProvider:
    provider = settings.provider.strip().lower()
    if provider in _AWS_SECRETS_MANAGER_NAMES:
        built = _build_aws_secrets_manager(settings)
        logger.info(
            "secret store provider configured",
            extra={"provider": built.name, "region": settings.region},
        )
        return built

    raise RuntimeError(f"Unknown secret store provider: {provider}")


@lru_cache(maxsize=1)
def get_provider() -> SecretStoreProvider:
    return build_provider(get_settings())


__all__ = ["SecretStoreProvider", "build_provider", "get_provider"]
