"""Common types for secret store providers."""
from __future__ import annotations

from typing import Protocol

from external_secrets.apis import ExternalSecretDataRemoteRef


class SecretStoreProvider(Protocol):
    """Interface implemented by all secret store providers."""

    name: str

    def get_secret(self, ref: ExternalSecretDataRemoteRef) -> bytes:
        """Return the value referenced by ``ref``.

        When ``ref.property`` is set only that field of the JSON encoded secret
        is returned. Failures raise :class:`~external_secrets.errors.SecretStoreError`.
        """

    def get_secret_map(self, ref: ExternalSecretDataRemoteRef) -> dict[str, str]:
        """Return the secret referenced by ``ref`` decoded as key/value pairs."""


__all__ = ["SecretStoreProvider"]
