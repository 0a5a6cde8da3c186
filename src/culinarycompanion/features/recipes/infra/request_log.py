from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict, List

from pymongo import DESCENDING

from culinarycompanion.shared.persistence.mongo import get_db, next_sequence

COLLECTION = "recipe_requests"
COUNTER = "recipe_requests"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class RequestLog:
    """
    Append-only log of generation requests in the `recipe_requests` collection.
    Rows are never updated or deleted.
    """

    def __init__(self, db=None) -> None:
        self._db = db

    @property
    def db(self):
        if self._db is None:
            self._db = get_db()
        return self._db

    def append(
        self,
        *,
        input_text: str,
        input_type: str,
        response_data: Dict[str, Any],
        language: str,
    ) -> Dict[str, Any]:
        now = _now_iso()
        doc = {
            "id": next_sequence(COUNTER, db=self.db),
            "input_text": input_text,
            "input_type": input_type,
            "response_data": json.dumps(response_data, ensure_ascii=False),
            "language": language,
            "created_at": now,
            "updated_at": now,
        }
        self.db[COLLECTION].insert_one(dict(doc))
        return doc

    def recent(self, limit: int = 10) -> List[Dict[str, Any]]:
        cur = (
            self.db[COLLECTION]
            .find({}, {"_id": 0})
            .sort([("created_at", DESCENDING), ("id", DESCENDING)])
            .limit(int(max(1, limit)))
        )
        return list(cur)


def get_request_log() -> RequestLog:
    return RequestLog()
