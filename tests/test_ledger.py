import pytest

from models.bed_slot import BedSlot
from services import ledger
from services.errors import ValidationError
from tests.conftest import ROOM_1, ROOM_2


def test_reserve_books_free_bed(event_id):
    result = ledger.reserve(event_id, "room1-bed1", "  Alice  ")

    assert result == {"bed_id": "room1-bed1", "name": "Alice", "restriction": "none", "restricted": []}
    slots = ledger.list_slots(event_id)
    assert list(slots) == ["room1-bed1"]
    assert slots["room1-bed1"]["status"] == "booked"
    assert slots["room1-bed1"]["name"] == "Alice"
    assert slots["room1-bed1"]["blocked_by"] is None
    assert slots["room1-bed1"]["booked_at"] is not None


@pytest.mark.parametrize("name", [None, "", "   "])
def test_reserve_requires_name(event_id, name):
    with pytest.raises(ValidationError) as exc:
        ledger.reserve(event_id, "room1-bed1", name)

    assert "name" in exc.value.message
    assert ledger.list_slots(event_id) == {}


def test_reserve_rejects_unknown_restriction(event_id):
    with pytest.raises(ValidationError):
        ledger.reserve(event_id, "room1-bed1", "Alice", restriction="kids", room_bed_ids=ROOM_1)

    assert ledger.list_slots(event_id) == {}


def test_rebooking_overwrites_logistics_completely(event_id):
    ledger.reserve(event_id, "room1-bed1", "Alice", logistics={
        "arrival_date": "2026-05-13",
        "arrival_time": "16:30",
        "transport": "train",
        "needs_pickup": True,
        "offers_ride_seats": 2,
        "train_station": "Halbe",
        "train_number": "RE 2",
    })
    first = ledger.list_slots(event_id)["room1-bed1"]
    assert first["arrival_date"] == "2026-05-13"
    assert first["needs_pickup"] is True
    assert first["offers_ride_seats"] == 2

    ledger.reserve(event_id, "room1-bed1", "Bob", logistics={"departure_city": "Leipzig"})

    slot = ledger.list_slots(event_id)["room1-bed1"]
    assert slot["name"] == "Bob"
    assert slot["departure_city"] == "Leipzig"
    assert slot["arrival_date"] is None
    assert slot["arrival_time"] is None
    assert slot["transport"] is None
    assert slot["needs_pickup"] is False
    assert slot["offers_ride_seats"] == 0
    assert slot["train_station"] is None
    assert slot["train_number"] is None
    assert BedSlot.query.filter_by(event_id=event_id, bed_id="room1-bed1").count() == 1


def test_malformed_logistics_write_nothing(event_id):
    with pytest.raises(ValidationError) as exc:
        ledger.reserve(event_id, "room1-bed1", "Alice", logistics={"arrival_time": "half past four"})

    assert "arrival_time" in exc.value.message
    assert ledger.list_slots(event_id) == {}


def test_reserve_over_restricted_bed_is_organizer_override(event_id):
    ledger.reserve(event_id, "room1-bed1", "Alice", restriction="women", room_bed_ids=ROOM_1)

    ledger.reserve(event_id, "room1-bed2", "Carl")

    slot = ledger.list_slots(event_id)["room1-bed2"]
    assert slot["status"] == "booked"
    assert slot["name"] == "Carl"
    assert slot["blocked_by"] is None

    # no longer tied to the anchor
    ledger.release(event_id, "room1-bed1")
    assert list(ledger.list_slots(event_id)) == ["room1-bed2"]


def test_release_removes_anchor_and_dependents(event_id):
    ledger.reserve(event_id, "room1-bed1", "Alice", restriction="blocked", room_bed_ids=ROOM_1)
    ledger.reserve(event_id, "room2-bed1", "Zoe")

    removed = ledger.release(event_id, "room1-bed1")

    assert removed == 3
    assert list(ledger.list_slots(event_id)) == ["room2-bed1"]


def test_release_is_idempotent(event_id):
    ledger.reserve(event_id, "room1-bed1", "Alice")

    assert ledger.release(event_id, "room2-bed4") == 0
    assert ledger.release(event_id, "room1-bed1") == 1
    assert ledger.release(event_id, "room1-bed1") == 0
    assert ledger.list_slots(event_id) == {}


def test_unblock_only_removes_restricted_slots(event_id):
    ledger.reserve(event_id, "room1-bed1", "Alice", restriction="blocked", room_bed_ids=ROOM_1)

    assert ledger.unblock(event_id, "room1-bed1") is False
    assert ledger.unblock(event_id, "room1-bed2") is True

    slots = ledger.list_slots(event_id)
    assert slots["room1-bed1"]["status"] == "booked"
    assert "room1-bed2" not in slots
    # unblocking one placeholder leaves its siblings alone
    assert slots["room1-bed3"]["status"] == "blocked"


def test_unblock_gender_restrictions_and_missing_beds(event_id):
    ledger.reserve(event_id, "room2-bed1", "Max", restriction="men", room_bed_ids=ROOM_2)

    assert ledger.unblock(event_id, "room2-bed2") is True
    assert ledger.unblock(event_id, "room2-bed2") is False
    assert ledger.unblock(event_id, "room1-bed1") is False
    assert sorted(ledger.list_slots(event_id)) == ["room2-bed1", "room2-bed3", "room2-bed4"]


def test_claim_converts_restricted_bed(event_id):
    ledger.reserve(event_id, "room1-bed1", "Alice", restriction="women", room_bed_ids=ROOM_1)

    claimed = ledger.claim(event_id, "room1-bed2", "Dana", logistics={"transport": "car", "offers_ride_seats": "3"})

    assert claimed is True
    slot = ledger.list_slots(event_id)["room1-bed2"]
    assert slot["status"] == "booked"
    assert slot["name"] == "Dana"
    assert slot["transport"] == "car"
    assert slot["offers_ride_seats"] == 3
    assert slot["blocked_by"] == "room1-bed1"


def test_claim_does_not_touch_booked_blocked_or_free_beds(event_id):
    ledger.reserve(event_id, "room1-bed1", "Alice", restriction="blocked", room_bed_ids=ROOM_1)
    before = ledger.list_slots(event_id)

    assert ledger.claim(event_id, "room1-bed1", "Mallory") is False
    assert ledger.claim(event_id, "room1-bed2", "Mallory") is False
    assert ledger.claim(event_id, "room2-bed1", "Mallory") is False

    assert ledger.list_slots(event_id) == before


def test_claim_requires_name(event_id):
    ledger.reserve(event_id, "room1-bed1", "Alice", restriction="women", room_bed_ids=ROOM_1)

    with pytest.raises(ValidationError):
        ledger.claim(event_id, "room1-bed2", " ")

    assert ledger.list_slots(event_id)["room1-bed2"]["status"] == "women_only"


def test_women_room_lifecycle(event_id, app):
    beds = ["B1", "B2", "B3"]
    ledger.reserve(event_id, "B1", "Alice", restriction="women", room_bed_ids=beds)

    slots = ledger.list_slots(event_id)
    assert slots["B1"]["status"] == "booked"
    assert slots["B1"]["name"] == "Alice"
    for bed in ("B2", "B3"):
        assert slots[bed]["status"] == "women_only"
        assert slots[bed]["name"] == app.config["WOMEN_ROOM_LABEL"]
        assert slots[bed]["blocked_by"] == "B1"

    assert ledger.claim(event_id, "B2", "Dana") is True
    slots = ledger.list_slots(event_id)
    assert slots["B2"]["status"] == "booked"
    assert slots["B2"]["name"] == "Dana"
    assert slots["B3"]["status"] == "women_only"

    # B2 still points at B1, so it goes together with the anchor
    assert ledger.release(event_id, "B1") == 3
    assert ledger.list_slots(event_id) == {}


def test_beds_are_scoped_per_event(event_id, other_event_id):
    ledger.reserve(event_id, "room1-bed1", "Alice", restriction="blocked", room_bed_ids=ROOM_1)
    ledger.reserve(other_event_id, "room1-bed1", "Olga")

    ledger.release(other_event_id, "room1-bed1")

    assert ledger.list_slots(other_event_id) == {}
    assert sorted(ledger.list_slots(event_id)) == ROOM_1


def test_bed_slot_key_is_unique_in_storage():
    names = {c.name for c in BedSlot.__table__.constraints}
    assert "uq_bookings_event_bed" in names
