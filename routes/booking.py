from flask import Blueprint, jsonify, g

from services import ledger
from services.errors import ValidationError
from utils.audit import log_event
from utils.payload import json_body
from utils.tenant import event_required

booking_bp = Blueprint("booking", __name__, url_prefix="/api/events/<slug>/bookings")


def _room_bed_ids(data: dict):
    ids = data.get("room_bed_ids")
    if ids is None:
        return []
    if not isinstance(ids, list):
        raise ValidationError("room_bed_ids must be a list of bed ids")
    return [str(i) for i in ids]


# ---------- everyone: bed overview ----------
@booking_bp.get("")
@event_required
def list_bookings():
    return jsonify(ledger.list_slots(g.event.id)), 200


# ---------- book a bed (optionally restricting the rest of the room) ----------
@booking_bp.post("/<bed_id>")
@event_required
def reserve_bed(bed_id: str):
    data = json_body()

    result = ledger.reserve(
        g.event.id,
        bed_id,
        data.get("name"),
        logistics=data,
        restriction=data.get("restriction"),
        room_bed_ids=_room_bed_ids(data),
    )

    log_event(
        "BOOKING_RESERVE",
        event_id=g.event.id,
        entity="bed",
        entity_id=result["bed_id"],
        metadata={"restriction": result["restriction"], "restricted": result["restricted"]},
    )
    return jsonify(
        success=True,
        bed_id=result["bed_id"],
        name=result["name"],
        restricted=result["restricted"],
    ), 200


# ---------- release a bed and everything it restricted ----------
@booking_bp.delete("/<bed_id>")
@event_required
def release_bed(bed_id: str):
    removed = ledger.release(g.event.id, bed_id)

    log_event("BOOKING_RELEASE", event_id=g.event.id, entity="bed", entity_id=bed_id, metadata={"removed": removed})
    return jsonify(success=True, bed_id=bed_id), 200


# ---------- lift a block / gender restriction ----------
@booking_bp.post("/<bed_id>/unblock")
@event_required
def unblock_bed(bed_id: str):
    removed = ledger.unblock(g.event.id, bed_id)

    log_event("BOOKING_UNBLOCK", event_id=g.event.id, entity="bed", entity_id=bed_id, metadata={"removed": removed})
    return jsonify(success=True, bed_id=bed_id), 200


# ---------- take a women-only / men-only bed ----------
@booking_bp.post("/<bed_id>/claim")
@event_required
def claim_bed(bed_id: str):
    data = json_body()
    name = str(data.get("name") or "").strip()

    claimed = ledger.claim(g.event.id, bed_id, name, logistics=data)

    log_event("BOOKING_CLAIM", event_id=g.event.id, entity="bed", entity_id=bed_id, metadata={"claimed": claimed})
    return jsonify(success=True, bed_id=bed_id, name=name, claimed=claimed), 200
