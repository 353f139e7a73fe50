from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStorage(Protocol):
    """Storage interface behind every store.

    Note (DIP): stores depend on this interface, not on a concrete backend.
    Values are JSON text; a missing key reads as ``None``.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError
