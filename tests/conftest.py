"""
pytest configuration - shared fixtures
"""
import sys
import os
import json
from typing import Generator

# Add backend directory to sys.path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../backend"))

# Keep the app away from the real data directory and rate limits
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from restaurant_api.database import Base
from restaurant_api.dependencies import get_restaurant_store
from restaurant_api.main import app
from restaurant_api.models.restaurant import Restaurant
from restaurant_api.services.json_store import JsonRestaurantStore
from restaurant_api.services.sql_store import SqlRestaurantStore


SAMPLE_RESTAURANTS = [
    {
        "name": "봉수육",
        "address": "경기 수원시 장안구 율전로108번길 11 1층",
        "phone": "0507-1460-0903",
    },
    {
        "name": "생각나는 순대",
        "address": "경기 수원시 쪽문쪽 어쩌고",
        "phone": "1111-1111-1111",
        "rating": 3.5,
    },
    {
        "name": "A",
        "address": "1 Main Street",
        "phone": "010-0000-0000",
    },
]


@pytest.fixture
def sample_restaurants():
    """Sample restaurant payloads"""
    return [dict(r) for r in SAMPLE_RESTAURANTS]


@pytest.fixture
def test_db() -> Generator[Session, None, None]:
    """Create in-memory SQLite database for testing"""
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(engine)


@pytest.fixture
def restaurants_file(tmp_path, sample_restaurants):
    """JSON document pre-filled with the sample restaurants"""
    path = tmp_path / "data" / "restaurants.json"
    path.parent.mkdir(parents=True)
    path.write_text(
        json.dumps({"restaurants": sample_restaurants}, ensure_ascii=False, indent=2),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def json_store(restaurants_file):
    return JsonRestaurantStore(restaurants_file)


@pytest.fixture
def sql_store(test_db, sample_restaurants):
    """SQL store over the in-memory database with the sample restaurants"""
    for data in sample_restaurants:
        test_db.add(Restaurant(**data))
    test_db.commit()
    return SqlRestaurantStore(test_db)


@pytest.fixture(params=["json", "database"])
def store(request):
    """Runs a test once per store backend"""
    if request.param == "json":
        return request.getfixturevalue("json_store")
    return request.getfixturevalue("sql_store")


@pytest.fixture
def client(store):
    """TestClient wired to the parametrized store"""
    app.dependency_overrides[get_restaurant_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
