"""Minimal dot-path lookups into JSON documents."""
from __future__ import annotations

import json
from typing import Any


class PathNotFound(LookupError):
    """Raised when a path does not resolve inside a JSON document."""

    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.path = path


def split_path(path: str) -> list[str]:
    """Split ``path`` on unescaped dots.

    A backslash escapes the following character, so ``a\\.b`` is the single
    segment ``a.b``.
    """

    segments: list[str] = []
    current: list[str] = []
    escaped = False
    for char in path:
        if escaped:
            current.append(char)
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == ".":
            segments.append("".join(current))
            current = []
        else:
            current.append(char)
    if escaped:
        current.append("\\")
    segments.append("".join(current))
    return segments


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name}")


def loads(data: bytes | str) -> Any:
    """Parse strict JSON.

    ``NaN`` and the infinities are rejected, and documents nested too deeply
    for the decoder raise :class:`ValueError` instead of :class:`RecursionError`.
    """

    try:
        return json.loads(data, parse_constant=_reject_constant)
    except RecursionError as exc:
        raise ValueError("JSON document is nested too deeply") from exc


def _render(value: Any) -> str:
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def get(data: bytes | str, path: str) -> str:
    """Return the value at ``path`` inside the JSON document ``data``.

    Strings are returned verbatim, null as an empty string and any other value
    as compact JSON text. Raises :class:`PathNotFound` if ``data`` is not valid
    JSON or any segment of ``path`` is missing.
    """

    try:
        current: Any = loads(data)
    except (TypeError, ValueError) as exc:
        raise PathNotFound(path) from exc

    for segment in split_path(path):
        if not isinstance(current, dict) or segment not in current:
            raise PathNotFound(path)
        current = current[segment]
    return _render(current)


__all__ = ["PathNotFound", "get", "loads", "split_path"]
