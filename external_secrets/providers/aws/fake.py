"""In-memory stand-in for the Secrets Manager client."""
from __future__ import annotations

from typing import Any, Mapping


class FakeSecretsManagerClient:
    """Programmable fake returning a canned response for an expected request.

    ``with_value`` replaces the current programming. A request that differs
    from the expected input raises :class:`AssertionError` so tests notice
    wrong ``SecretId`` or ``VersionStage`` values.
    """

    def __init__(self) -> None:
        self._expected: dict[str, Any] | None = None
        self._output: Mapping[str, Any] = {}
        self._error: BaseException | None = None
        self.calls: list[dict[str, Any]] = []

    def with_value(
        self,
        expected_input: Mapping[str, Any] | None,
        output: Mapping[str, Any] | None,
        error: BaseException | None = None,
    ) -> "FakeSecretsManagerClient":
        self._expected = dict(expected_input) if expected_input is not None else None
        self._output = dict(output or {})
        self._error = error
        return self

    def get_secret_value(self, **kwargs: Any) -> Mapping[str, Any]:
        self.calls.append(kwargs)
        if self._error is not None:
            raise self._error
        if self._expected is not None and kwargs != self._expected:
            raise AssertionError(
                f"unexpected get_secret_value input: {kwargs!r}, expected {self._expected!r}"
            )
        return self._output


__all__ = ["FakeSecretsManagerClient"]
