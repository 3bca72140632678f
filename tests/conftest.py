import pytest

from app import create_app
from config import TestConfig
from models import db
from utils.seed import seed_event

TEST_ROOMS = [
    {"room_name": "Zimmer 1", "floor": "EG", "beds_count": 3, "sort_order": 1},
    {"room_name": "Zimmer 2", "floor": "OG", "beds_count": 4, "sort_order": 2},
]

ROOM_1 = ["room1-bed1", "room1-bed2", "room1-bed3"]
ROOM_2 = ["room2-bed1", "room2-bed2", "room2-bed3", "room2-bed4"]


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def event_id(app):
    event, _ = seed_event("testtreffen", event_data={"name": "Testtreffen 2026"}, rooms=TEST_ROOMS)
    return event.id


@pytest.fixture
def other_event_id(app):
    event, _ = seed_event("herbsttreffen", event_data={"name": "Herbsttreffen 2026"}, rooms=TEST_ROOMS)
    return event.id
