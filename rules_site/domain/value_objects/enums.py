"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class LikeAction(str, Enum):
    ADD = "add"
    REMOVE = "remove"


class StoreBackend(str, Enum):
    MEMORY = "memory"
    SQL = "sql"


class DocType(str, Enum):
    FRONTEND = "frontend"
    BACKEND = "backend"

    @property
    def label(self) -> str:
        return DOC_LABELS[self]

    @property
    def description(self) -> str:
        return DOC_DESCRIPTIONS[self]


DOC_LABELS: dict[DocType, str] = {
    DocType.FRONTEND: "Frontend",
    DocType.BACKEND: "Backend",
}

DOC_DESCRIPTIONS: dict[DocType, str] = {
    DocType.FRONTEND: "Правила разработки Frontend",
    DocType.BACKEND: "Правила разработки Backend",
}
