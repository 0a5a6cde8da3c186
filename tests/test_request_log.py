"""Unit tests for the Mongo-backed request log."""

import json
from unittest.mock import MagicMock

import pytest
from pymongo import DESCENDING

from culinarycompanion.features.recipes.infra.request_log import RequestLog


def _db(seq: int = 7) -> MagicMock:
    db = MagicMock()
    db.counters.find_one_and_update.return_value = {"_id": "recipe_requests", "seq": seq}
    return db


class TestAppend:
    """Tests for RequestLog.append()."""

    def test_inserts_one_row_with_generated_fields(self) -> None:
        db = _db(seq=3)
        row = RequestLog(db).append(
            input_text="Chicken, Rice!!",
            input_type="text",
            response_data={"recipes": [{"title": "x"}]},
            language="en",
        )

        coll = db.__getitem__.return_value
        db.__getitem__.assert_called_with("recipe_requests")
        coll.insert_one.assert_called_once()
        inserted = coll.insert_one.call_args.args[0]
        assert inserted["id"] == 3
        assert inserted["input_text"] == "Chicken, Rice!!"
        assert json.loads(inserted["response_data"]) == {"recipes": [{"title": "x"}]}
        assert inserted["created_at"] == inserted["updated_at"]
        assert row == inserted
        coll.update_one.assert_not_called()
        coll.delete_one.assert_not_called()

    def test_store_failure_propagates(self) -> None:
        db = _db()
        db.__getitem__.return_value.insert_one.side_effect = ConnectionError("down")
        with pytest.raises(ConnectionError):
            RequestLog(db).append(input_text="rice", input_type="text", response_data={}, language="en")


class TestRecent:
    """Tests for RequestLog.recent()."""

    def test_newest_first_without_object_ids(self) -> None:
        db = _db()
        coll = db.__getitem__.return_value
        coll.find.return_value.sort.return_value.limit.return_value = [{"id": 2}, {"id": 1}]

        rows = RequestLog(db).recent(10)

        assert rows == [{"id": 2}, {"id": 1}]
        coll.find.assert_called_once_with({}, {"_id": 0})
        coll.find.return_value.sort.assert_called_once_with([("created_at", DESCENDING), ("id", DESCENDING)])
        coll.find.return_value.sort.return_value.limit.assert_called_once_with(10)
