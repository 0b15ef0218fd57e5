"""
Shared pytest fixtures for Commute Traffic tests

Provides fixtures for:
- Database setup/teardown with in-memory SQLite
- FastAPI test client
- Sample Directions API payloads
- Environment variable mocking
"""

import copy
import json
from datetime import timedelta
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from api.main import app
from src.config import TrafficConfig
from src.database import get_db
from src.models import Base, TrafficRoute, utc_now


def make_leg(distance, duration, in_traffic, start="A", end="B"):
    """Build one leg in Directions API shape"""
    return {
        "distance": {"text": f"{distance / 1000:.1f} km", "value": distance},
        "duration": {"text": f"{duration // 60} mins", "value": duration},
        "duration_in_traffic": {"text": f"{in_traffic // 60} mins", "value": in_traffic},
        "start_address": start,
        "start_location": {"lat": 47.6101, "lng": -122.2015},
        "end_address": end,
        "end_location": {"lat": 47.6205, "lng": -122.3493},
        "steps": [],
    }


SAMPLE_DIRECTIONS = {
    "geocoded_waypoints": [],
    "routes": [
        {
            "summary": "I-90 W",
            "legs": [make_leg(16400, 1080, 1500)],
            "overview_polyline": {"points": "abc"},
            "warnings": [],
        },
        {
            "summary": "WA-520 W",
            "legs": [make_leg(18100, 1200, 1740)],
            "overview_polyline": {"points": "def"},
            "warnings": [],
        },
    ],
    "status": "OK",
}


@pytest.fixture
def directions_payload() -> dict:
    """A Directions API response with two alternative routes"""
    return copy.deepcopy(SAMPLE_DIRECTIONS)


@pytest.fixture
def directions_json(directions_payload) -> str:
    return json.dumps(directions_payload)


@pytest.fixture
def traffic_config() -> TrafficConfig:
    return TrafficConfig(
        home_location="A",
        work_location="B",
        api_key="test_api_key_do_not_use",
        database_url="sqlite:///:memory:",
    )


@pytest.fixture(scope="function")
def test_engine():
    """
    Create an in-memory SQLite engine for testing

    StaticPool keeps the single in-memory connection shared with the
    TestClient's worker threads.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(test_engine) -> Generator[Session, None, None]:
    """Create a new database session on a fresh database for each test"""
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = SessionLocal()

    yield session

    session.close()


@pytest.fixture(scope="function")
def client(db_session):
    """
    FastAPI TestClient with database dependency override

    All API requests will use the test database session
    """
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_traffic_routes(db_session) -> list[TrafficRoute]:
    """Create stored routes: three I-90 observations and one WA-520, plus one stale row"""
    now = utc_now()
    rows = [
        TrafficRoute(
            row_key=f"row-{i}",
            summary="I-90 W",
            distance_text="16.4 km",
            distance_value=16400,
            duration_text="18 mins",
            duration_value=1080,
            duration_in_traffic_text=f"{20 + i * 5} mins",
            duration_in_traffic_value=(20 + i * 5) * 60,
            start_address="A",
            start_lat=47.6101,
            start_lng=-122.2015,
            end_address="B",
            end_lat=47.6205,
            end_lng=-122.3493,
            created_at=now - timedelta(hours=3 - i),
        )
        for i in range(3)
    ]
    rows.append(
        TrafficRoute(
            row_key="row-520",
            summary="WA-520 W",
            distance_text="18.1 km",
            distance_value=18100,
            duration_text="20 mins",
            duration_value=1200,
            duration_in_traffic_text="29 mins",
            duration_in_traffic_value=1740,
            start_address="A",
            end_address="B",
            created_at=now - timedelta(minutes=30),
        )
    )
    rows.append(
        TrafficRoute(
            row_key="row-stale",
            summary="WA-520 W",
            distance_text="18.1 km",
            distance_value=18100,
            duration_text="20 mins",
            duration_value=1200,
            duration_in_traffic_text="1 hour 5 mins",
            duration_in_traffic_value=3900,
            start_address="A",
            end_address="B",
            created_at=now - timedelta(days=30),
        )
    )
    db_session.add_all(rows)
    db_session.commit()
    return rows


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """
    Mock environment variables for tests

    autouse=True means this runs for every test automatically
    """
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    # Mock API key to prevent accidental real API calls
    monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "test_api_key_do_not_use")
    monkeypatch.setenv("HOME_LOCATION", "A")
    monkeypatch.setenv("WORK_LOCATION", "B")
    monkeypatch.delenv("COMMUTE_TIMEZONE", raising=False)
    monkeypatch.delenv("DIRECTIONS_URL", raising=False)
    monkeypatch.delenv("DIRECTIONS_TIMEOUT", raising=False)
