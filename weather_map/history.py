from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from config.settings import app_settings


logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    @abstractmethod
    def get_item(self, key: str) -> str | None:
        pass  # pragma: no cover

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        pass  # pragma: no cover


class InMemoryStore(KeyValueStore):
    def __init__(self, items: dict[str, str] | None = None) -> None:
        self._items = dict(items or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value


class JSONFileStore(KeyValueStore):
    def __init__(self, file_path: str | Path) -> None:
        self.file_path = Path(file_path)

    def _load(self) -> dict[str, str]:
        if not self.file_path.exists():
            return {}
        try:
            with open(self.file_path, 'r', encoding='utf-8') as file:
                data = json.load(file)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning(
                'Ignoring unreadable store %s: %s', self.file_path, exc
            )
            return {}
        if not isinstance(data, dict):
            logger.warning('Ignoring malformed store %s', self.file_path)
            return {}
        return data

    def get_item(self, key: str) -> str | None:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.file_path, 'w', encoding='utf-8') as file:
            json.dump(data, file, ensure_ascii=False, indent=2)


class SearchLog:
    def __init__(
        self, store: KeyValueStore, key: str = app_settings.history_key
    ) -> None:
        self._store = store
        self.key = key

    def list(self) -> list[str]:
        raw = self._store.get_item(self.key)
        if raw is None:
            return []
        try:
            searches = json.loads(raw)
        except (TypeError, ValueError):
            logger.debug('Stored history under %r is not JSON', self.key)
            return []
        if not isinstance(searches, list) or not all(
            isinstance(search, str) for search in searches
        ):
            logger.debug('Stored history under %r is not a string list', self.key)
            return []
        return searches

    def append(self, query: str) -> None:
        searches = self.list()
        searches.append(query)
        self._store.set_item(self.key, json.dumps(searches))
