from __future__ import annotations

import logging
from typing import Optional

from pymongo import MongoClient, ASCENDING, DESCENDING, ReturnDocument
from pymongo.errors import OperationFailure
from culinarycompanion.shared.config.settings import settings

log = logging.getLogger("persistence.mongo")

_client: Optional[MongoClient] = None
_db = None


def get_client() -> MongoClient:
    global _client
    if _client is None:
        _client = MongoClient(
            settings.MONGODB_URI,
            serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS,
        )
    return _client


def get_db():
    global _db
    if _db is None:
        _db = get_client()[settings.MONGODB_DB]
    return _db


def ensure_indexes() -> None:
    """Create indexes for collections if they do not exist."""
    db = get_db()
    requests = db.get_collection("recipe_requests")
    try:
        info = requests.index_information()
        if "id_unique" not in info:
            requests.create_index([("id", ASCENDING)], name="id_unique", unique=True)
        if "created_at" not in info:
            requests.create_index([("created_at", DESCENDING)], name="created_at")
    except OperationFailure as e:
        log.warning("Index creation on recipe_requests failed: %s", e)


def next_sequence(name: str, db=None) -> int:
    """Generate the next auto-increment value for the named counter."""
    db = db if db is not None else get_db()
    doc = db.counters.find_one_and_update(
        {"_id": name},
        {"$inc": {"seq": 1}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return int(doc.get("seq", 1))
