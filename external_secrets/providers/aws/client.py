"""Subset of the AWS Secrets Manager API used by the provider."""
from __future__ import annotations

from typing import Any, Mapping, Protocol


class SecretsManagerClient(Protocol):
    """Anything exposing boto3's ``get_secret_value`` call.

    ``boto3.client("secretsmanager")`` satisfies this directly. The response
    mapping may carry ``SecretString`` (str) and/or ``SecretBinary`` (bytes).
    """

    def get_secret_value(self, *, SecretId: str, VersionStage: str) -> Mapping[str, Any]:
        ...


__all__ = ["SecretsManagerClient"]
