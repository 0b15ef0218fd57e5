"""
Model tests for the traffic_info table

Run with: pytest tests/test_models.py
"""

import pytest
from sqlalchemy.exc import IntegrityError

from src.models import ROUTES_PARTITION_KEY, TrafficRoute, utc_now


def make_route(row_key="row-1", **overrides):
    fields = dict(
        row_key=row_key,
        summary="I-5 N",
        distance_text="10.0 km",
        distance_value=10000,
        duration_text="12 mins",
        duration_value=720,
        duration_in_traffic_text="15 mins",
        duration_in_traffic_value=900,
    )
    fields.update(overrides)
    return TrafficRoute(**fields)


def test_route_creation_defaults(db_session):
    db_session.add(make_route())
    db_session.commit()

    queried = db_session.query(TrafficRoute).filter_by(row_key="row-1").first()
    assert queried is not None
    assert queried.partition_key == ROUTES_PARTITION_KEY == "Routes"
    assert queried.created_at is not None
    assert queried.id is not None


def test_row_key_is_unique(db_session):
    db_session.add(make_route())
    db_session.commit()

    db_session.add(make_route())
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()


def test_numeric_values_are_required(db_session):
    db_session.add(make_route(duration_in_traffic_value=None))
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()


def test_repr(db_session):
    assert "I-5 N" in repr(make_route())


def test_created_at_is_naive_utc(db_session):
    before = utc_now()
    db_session.add(make_route())
    db_session.commit()
    after = utc_now()

    created_at = db_session.query(TrafficRoute).one().created_at
    assert created_at.tzinfo is None
    assert before <= created_at <= after
