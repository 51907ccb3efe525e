"""Secret store provider adapters for the external secrets controller.

Usage::

    from external_secrets import ExternalSecretDataRemoteRef, get_provider

    provider = get_provider()
    password = provider.get_secret(
        ExternalSecretDataRemoteRef(key="prod/db", property="password")
    )
    env = provider.get_secret_map(ExternalSecretDataRemoteRef(key="prod/app-env"))
"""
from __future__ import annotations

from .apis import DEFAULT_VERSION_STAGE, ExternalSecretDataRemoteRef
from .errors import (
    ErrorKind,
    MapDeserializationError,
    PayloadMissingError,
    PropertyNotFoundError,
    RemoteCallError,
    SecretStoreError,
    SessionError,
)
from .providers import SecretStoreProvider, build_provider, get_provider

__all__ = [
    "DEFAULT_VERSION_STAGE",
    "ErrorKind",
    "ExternalSecretDataRemoteRef",
    "MapDeserializationError",
    "PayloadMissingError",
    "PropertyNotFoundError",
    "RemoteCallError",
    "SecretStoreError",
    "SecretStoreProvider",
    "SessionError",
    "build_provider",
    "get_provider",
]
