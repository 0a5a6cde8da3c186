from __future__ import annotations

import json
import logging
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ValidationError

log = logging.getLogger("client.session")

RECENT_SEARCHES_KEY = "culinary-recent-searches"
PREFERENCES_KEY = "culinary-preferences"
MAX_RECENT_SEARCHES = 10
MAX_BLANK_SUGGESTIONS = 5


class SessionStore:
    """In-memory key/value store of JSON strings that lives as long as the session object."""

    def __init__(self) -> None:
        self._items: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove(self, key: str) -> None:
        self._items.pop(key, None)


class RecentSearches:
    def __init__(self, store: SessionStore) -> None:
        self.store = store
        self.items: List[str] = self._load()

    def _load(self) -> List[str]:
        raw = self.store.get(RECENT_SEARCHES_KEY)
        if not raw:
            return []
        try:
            parsed = json.loads(raw)
        except ValueError as e:
            log.error("Error loading recent searches: %s", e)
            return []
        if not isinstance(parsed, list):
            return []
        return [str(s) for s in parsed][:MAX_RECENT_SEARCHES]

    def save(self, search: str) -> None:
        search = (search or "").strip()
        if not search:
            return
        rest = [s for s in self.items if s.lower() != search.lower()]
        self.items = ([search] + rest)[:MAX_RECENT_SEARCHES]
        self.store.set(RECENT_SEARCHES_KEY, json.dumps(self.items, ensure_ascii=False))

    def suggestions(self, value: str) -> List[str]:
        needle = (value or "").strip().lower()
        if not needle:
            return self.items[:MAX_BLANK_SUGGESTIONS]
        return [s for s in self.items if needle in s.lower() and s.lower() != needle]


class Preferences(BaseModel):
    input_language: str = "en"
    output_language: str = "en"
    preferred_mode: Literal["text", "audio", "both"] = "both"

    @classmethod
    def load(cls, store: SessionStore) -> Optional["Preferences"]:
        raw = store.get(PREFERENCES_KEY)
        if not raw:
            return None
        try:
            return cls.model_validate_json(raw)
        except ValidationError as e:
            log.error("Error loading preferences: %s", e)
            return None

    def save(self, store: SessionStore) -> None:
        store.set(PREFERENCES_KEY, self.model_dump_json())
