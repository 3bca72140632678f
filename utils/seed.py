from datetime import date

from models import db
from models.event import Event
from models.event_room import EventRoom

DEFAULT_EVENT = {
    "name": "Maitreffen 2026",
    "description": "Das jährliche Brettspieltreffen der Brettspielfamilie",
    "start_date": date(2026, 5, 13),
    "end_date": date(2026, 5, 17),
    "location_name": "Evangelisches Freizeitheim Halbe",
    "location_address": "Kirchstraße 7, 15757 Halbe",
    "location_url": "https://www.freizeitheim-halbe.de",
    "check_in_time": "16:00",
    "check_out_time": "11:00",
}

# Rooms of the Halbe house; sort_order doubles as the room number in bed ids
DEFAULT_ROOMS = [
    {"room_name": "Zimmer 1", "floor": "EG", "beds_count": 3, "has_private_bath": True, "sort_order": 1},
    {"room_name": "Zimmer 2", "floor": "EG", "beds_count": 2, "has_private_bath": True, "is_accessible": True,
     "notes": "Barrierefrei", "sort_order": 2},
    {"room_name": "Zimmer 3", "floor": "EG", "beds_count": 2, "has_private_bath": True, "sort_order": 3},
    {"room_name": "Zimmer 4", "floor": "OG", "beds_count": 3, "sort_order": 4},
    {"room_name": "Zimmer 5", "floor": "OG", "beds_count": 4, "sort_order": 5},
    {"room_name": "Zimmer 6", "floor": "OG", "beds_count": 3, "sort_order": 6},
    {"room_name": "Zimmer 7", "floor": "OG", "beds_count": 3, "sort_order": 7},
    {"room_name": "Zimmer 8", "floor": "OG", "beds_count": 2, "sort_order": 8},
    {"room_name": "Zimmer 9", "floor": "OG", "beds_count": 3, "sort_order": 9},
]

def seed_event(slug: str, event_data=None, rooms=None):
    """
    Create the event and its rooms if missing. Returns (event, rooms_created).
    Rooms are only added to an event that has none yet.
    """
    event = Event.query.filter_by(slug=slug).first()
    if not event:
        event = Event(slug=slug, is_active=True, **(event_data or DEFAULT_EVENT))
        db.session.add(event)
        db.session.flush()

    created = 0
    if EventRoom.query.filter_by(event_id=event.id).count() == 0:
        for room in rooms if rooms is not None else DEFAULT_ROOMS:
            db.session.add(EventRoom(event_id=event.id, **room))
            created += 1

    db.session.commit()
    return event, created
