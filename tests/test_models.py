from __future__ import annotations

from datetime import datetime

import pytest

from sinabro import db
from sinabro.model import BookMark, HeadCount, Label, Place, Reward, User


def test_schema_contains_all_tables(app_ctx):
    tables = set(db.metadata.tables)

    assert {"places", "users", "labels", "bookmarks", "headcounts", "rewards"} <= tables


def test_place_columns():
    columns = Place.__table__.columns

    assert [c.name for c in columns] == ["place_id", "place_name", "address", "latitude", "longitude", "detail"]
    assert columns["place_id"].primary_key
    assert columns["place_id"].autoincrement is True
    assert not columns["place_name"].nullable
    assert columns["detail"].nullable


def test_place_from_dict_drops_identifier():
    place = Place.from_dict(
        {"place_id": 5, "place_name": "X", "address": "Y", "latitude": 1.5, "longitude": 2.5, "extra": "ignored"}
    )

    assert place.place_id is None
    assert place.to_dict() == {
        "place_id": None,
        "place_name": "X",
        "address": "Y",
        "latitude": 1.5,
        "longitude": 2.5,
        "detail": None,
    }


def test_schema_only_entities_persist_with_relationships(app_ctx):
    user = User(uid="firebase-uid", uname="sinabro", email="user@example.com").save()
    label = Label(user=user, label_name="Favorites").save()
    place = Place(place_name="Library", address="Campus", latitude=36.6, longitude=127.4).save()
    bookmark = BookMark(place=place, label=label).save()
    headcount = HeadCount(place=place, count=12, time_stamp=datetime(2024, 5, 1, 12, 0), writer="firebase-uid").save()
    reward = Reward(point=10.5).save()

    assert user.point_score == 0
    assert user.labels == [label]
    assert bookmark.place_id == place.place_id
    assert bookmark.label_id == label.lid
    assert headcount.place_id == place.place_id
    assert headcount.as_dict()["time_stamp"] == "2024-05-01T12:00:00"
    assert reward.bid is not None


def test_repr_uses_primary_key(app_ctx):
    reward = Reward(point=1.0).save()

    assert repr(reward) == f"<Reward bid={reward.bid}>"


def test_place_rejects_unknown_keyword():
    with pytest.raises(TypeError):
        Place(place_name="X", address="Y", latitude=1.0, longitude=2.0, marker_id=3)
