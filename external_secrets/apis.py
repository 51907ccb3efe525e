"""Request types shared by secret store providers."""
from __future__ import annotations

from dataclasses import dataclass

DEFAULT_VERSION_STAGE = "AWSCURRENT"


@dataclass(slots=True, frozen=True)
class ExternalSecretDataRemoteRef:
    """Reference to a value held by the remote secret store.

    ``key`` identifies the secret. ``property`` optionally selects a field
    inside a JSON encoded secret using a dot separated path, and ``version``
    pins a specific version instead of the current one.
    """

    key: str
    property: str = ""
    version: str = ""

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("remote ref key must not be empty")

    def version_stage(self) -> str:
        """Return the version selector sent to the store."""

        return self.version or DEFAULT_VERSION_STAGE


__all__ = ["DEFAULT_VERSION_STAGE", "ExternalSecretDataRemoteRef"]
