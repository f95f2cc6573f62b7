"""Settings store protocol and the in-process implementation."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Protocol


class SettingsStore(Protocol):
    def get(self, key: str, default: str = "") -> str: ...

    def set(self, key: str, value: str) -> None: ...


class InMemorySettingsStore:
    """
    Dict-backed settings store.

    Used directly by embedded hosts and tests, and by the HTTP service as the
    options cache primed from the database before each query hook runs.
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str, default: str = "") -> str:
        return self._values.get(key, default)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def update(self, values: Mapping[str, str]) -> None:
        self._values.update(values)

    def forget(self, keys: Iterable[str]) -> None:
        for key in keys:
            self._values.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def as_dict(self) -> dict[str, str]:
        return dict(self._values)
