"""Port interface for string key/value storage (browser-storage style)."""

from abc import ABC, abstractmethod


class KeyValueStorage(ABC):
    """Same shape as Web Storage: string keys, string values.

    Implementations raise StoreUnavailable when the backing medium fails.
    """

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def remove_item(self, key: str) -> None:
        ...
