"""
Порт хранилища для use cases и запросов.

Реальная реализация - infrastructure.store.DocumentStore; в тестах можно
подставить любой объект с теми же методами.
"""

from __future__ import annotations

from typing import Any, Iterable, Protocol

from .dto import UpdateResult


class IDocumentStore(Protocol):
    def insert(self, collection: str, document: dict[str, Any]) -> int: ...

    def find_one(self, collection: str, filter: dict[str, Any]) -> Any: ...

    def find_many(self, collection: str, filter: dict[str, Any] | None = None) -> list[Any]: ...

    def search(self, collection: str, term: str, fields: Iterable[str]) -> list[Any]: ...

    def update_one(self, collection: str, filter: dict[str, Any], patch: dict[str, Any]) -> UpdateResult: ...

    def increment_field(self, collection: str, filter: dict[str, Any], field: str, delta: int = 1) -> int: ...

    def delete_one(self, collection: str, filter: dict[str, Any]) -> bool: ...


__all__ = ["IDocumentStore"]
