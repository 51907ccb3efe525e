"""Secret store provider backed by AWS Secrets Manager."""
from __future__ import annotations

import json
import logging
from typing import Any, Mapping

import boto3

from external_secrets import jsonpath
from external_secrets.apis import ExternalSecretDataRemoteRef
from external_secrets.errors import (
    MapDeserializationError,
    PayloadMissingError,
    PropertyNotFoundError,
    RemoteCallError,
)

from .client import SecretsManagerClient

logger = logging.getLogger(__name__)


class SecretsManager:
    """Fetch secrets from AWS Secrets Manager.

    Each call issues exactly one ``GetSecretValue`` request. Nothing is cached
    or retried, and the instance holds no state besides the client.
    """

    name = "aws-secrets-manager"

    def __init__(self, client: SecretsManagerClient) -> None:
        self._client = client

    @classmethod
    def from_session(cls, session: boto3.session.Session) -> "SecretsManager":
        return cls(session.client("secretsmanager"))

    @property
    def client(self) -> SecretsManagerClient:
        return self._client

    def _fetch(self, ref: ExternalSecretDataRemoteRef) -> Mapping[str, Any]:
        stage = ref.version_stage()
        logger.debug(
            "fetching secret", extra={"secret_key": ref.key, "version_stage": stage}
        )
        try:
            return self._client.get_secret_value(SecretId=ref.key, VersionStage=stage)
        except Exception as exc:
            logger.warning(
                "secret fetch failed",
                extra={"secret_key": ref.key, "error": str(exc)},
            )
            raise RemoteCallError(exc, key=ref.key) from exc

    @staticmethod
    def _payload(response: Mapping[str, Any], key: str) -> bytes:
        secret_string = response.get("SecretString")
        if secret_string:
            return secret_string.encode("utf-8")
        secret_binary = response.get("SecretBinary")
        if secret_binary:
            return bytes(secret_binary)
        raise PayloadMissingError(key=key)

    def get_secret(self, ref: ExternalSecretDataRemoteRef) -> bytes:
        payload = self._payload(self._fetch(ref), ref.key)
        if not ref.property:
            return payload
        try:
            value = jsonpath.get(payload, ref.property)
        except jsonpath.PathNotFound as exc:
            raise PropertyNotFoundError(key=ref.key, property=ref.property) from exc
        return value.encode("utf-8")

    def get_secret_map(self, ref: ExternalSecretDataRemoteRef) -> dict[str, str]:
        payload = self._payload(self._fetch(ref), ref.key)
        try:
            return decode_secret_map(payload)
        except ValueError as exc:
            raise MapDeserializationError(key=ref.key, reason=str(exc)) from exc


def decode_secret_map(payload: bytes | str) -> dict[str, str]:
    """Decode ``payload`` as a flat JSON object of string values.

    Numbers and booleans are kept in their JSON spelling and null becomes an
    empty string. Invalid JSON, nested objects or arrays raise :class:`ValueError`.
    """

    data = jsonpath.loads(payload)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")

    result: dict[str, str] = {}
    for key, value in data.items():
        if isinstance(value, str):
            result[key] = value
        elif value is None:
            result[key] = ""
        elif isinstance(value, (dict, list)):
            raise ValueError(f"value of {key!r} is not a scalar")
        else:
            result[key] = json.dumps(value)
    return result


def new(session: boto3.session.Session) -> SecretsManager:
    """Create a provider using a ``secretsmanager`` client from ``session``."""

    return SecretsManager.from_session(session)


__all__ = ["SecretsManager", "decode_secret_map", "new"]
