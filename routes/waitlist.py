from flask import Blueprint, jsonify, g

from services import waitlist
from utils.audit import log_event
from utils.payload import json_body
from utils.tenant import event_required

waitlist_bp = Blueprint("waitlist", __name__, url_prefix="/api/events/<slug>/waitlist")


@waitlist_bp.get("")
@event_required
def list_waitlist():
    return jsonify([e.to_dict() for e in waitlist.list_entries(g.event.id)]), 200


@waitlist_bp.post("")
@event_required
def join_waitlist():
    data = json_body()

    entry = waitlist.append(g.event.id, data.get("name"), data.get("comment"))

    log_event("WAITLIST_ADD", event_id=g.event.id, entity="waitlist", entity_id=entry.id)
    return jsonify(entry.to_dict()), 201


@waitlist_bp.delete("/<int:entry_id>")
@event_required
def leave_waitlist(entry_id: int):
    removed = waitlist.remove(g.event.id, entry_id)

    log_event("WAITLIST_REMOVE", event_id=g.event.id, entity="waitlist", entity_id=entry_id, metadata={"removed": removed})
    return jsonify(success=True, id=entry_id), 200
