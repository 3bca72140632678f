from flask import Blueprint, jsonify, g

from models.event import Event
from utils.tenant import event_required

events_bp = Blueprint("events", __name__, url_prefix="/api/events")


def _event_json(e: Event) -> dict:
    return {
        "slug": e.slug,
        "name": e.name,
        "description": e.description,
        "start_date": e.start_date.isoformat() if e.start_date else None,
        "end_date": e.end_date.isoformat() if e.end_date else None,
        "location_name": e.location_name,
        "location_address": e.location_address,
        "location_url": e.location_url,
        "check_in_time": e.check_in_time,
        "check_out_time": e.check_out_time,
    }


@events_bp.get("")
def list_events():
    events = Event.query.filter_by(is_active=True).order_by(Event.start_date.asc()).all()
    return jsonify([_event_json(e) for e in events]), 200


@events_bp.get("/<slug>")
@event_required
def get_event():
    return jsonify(_event_json(g.event)), 200


# ---------- Bed registry: rooms and their bed ids ----------
@events_bp.get("/<slug>/rooms")
@event_required
def list_rooms():
    return jsonify([
        {
            "id": r.id,
            "room_name": r.room_name,
            "floor": r.floor,
            "beds_count": r.beds_count,
            "has_private_bath": r.has_private_bath,
            "is_accessible": r.is_accessible,
            "notes": r.notes,
            "sort_order": r.sort_order,
            "bed_ids": r.bed_ids,
        }
        for r in g.event.rooms
    ]), 200
