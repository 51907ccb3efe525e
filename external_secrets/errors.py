"""Errors raised by secret store providers.

Every failure carries an :class:`ErrorKind` together with the key and property
that were requested, so callers can branch on ``error.kind`` instead of
matching on message text. The rendered messages stay stable because the
controller surfaces them verbatim in resource status conditions.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    REMOTE_CALL_FAILED = "remote_call_failed"
    PAYLOAD_MISSING = "payload_missing"
    PROPERTY_NOT_FOUND = "property_not_found"
    MAP_DESERIALIZATION_FAILED = "map_deserialization_failed"


class SecretStoreError(RuntimeError):
    """Base class for errors returned by :class:`SecretStoreProvider` calls."""

    kind: ErrorKind

    def __init__(self, message: str, *, key: str, property: str = "") -> None:
        super().__init__(message)
        self.key = key
        self.property = property


class RemoteCallError(SecretStoreError):
    """The remote store rejected the request or could not be reached.

    The message is the underlying client error's message, unchanged. The
    original exception is available as ``__cause__``.
    """

    kind = ErrorKind.REMOTE_CALL_FAILED

    def __init__(self, cause: BaseException, *, key: str) -> None:
        super().__init__(str(cause), key=key)


class PayloadMissingError(SecretStoreError):
    kind = ErrorKind.PAYLOAD_MISSING

    def __init__(self, *, key: str) -> None:
        super().__init__(f"no secret string nor binary for key: {key}", key=key)


class PropertyNotFoundError(SecretStoreError):
    """Raised for both malformed JSON payloads and missing property paths."""

    kind = ErrorKind.PROPERTY_NOT_FOUND

    def __init__(self, *, key: str, property: str) -> None:
        super().__init__(
            f"key {property} does not exist in secret {key}", key=key, property=property
        )


class MapDeserializationError(SecretStoreError):
    kind = ErrorKind.MAP_DESERIALIZATION_FAILED

    def __init__(self, *, key: str, reason: str) -> None:
        super().__init__(f"unable to unmarshal secret {key}: {reason}", key=key)


class SessionError(RuntimeError):
    """Raised when an AWS session cannot be configured."""


__all__ = [
    "ErrorKind",
    "MapDeserializationError",
    "PayloadMissingError",
    "PropertyNotFoundError",
    "RemoteCallError",
    "SecretStoreError",
    "SessionError",
]
