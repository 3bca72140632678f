"""
Room restriction cascade.

When a booking declares a room-level restriction, every free sibling bed in
the same room gets a placeholder slot pointing back at the anchor bed. Beds
that already hold any slot are left alone, so partial application is normal.
"""
from datetime import datetime

from flask import current_app

from models import db
from models.bed_slot import BedSlot, Restriction
from utils.upsert import insert_for


def restriction_label(restriction: Restriction, anchor_name: str) -> str:
    cfg = current_app.config
    if restriction is Restriction.BLOCKED:
        return (cfg.get("BLOCK_MARKER", "🔒 ") + anchor_name)[:100]
    if restriction is Restriction.WOMEN:
        return cfg.get("WOMEN_ROOM_LABEL", "Frauenzimmer")
    if restriction is Restriction.MEN:
        return cfg.get("MEN_ROOM_LABEL", "Männerzimmer")
    raise ValueError(f"Restriction '{restriction.value}' does not cascade")


def sibling_beds(anchor_bed_id: str, room_bed_ids) -> list:
    seen = set()
    out = []
    for bed_id in room_bed_ids or []:
        bed_id = str(bed_id).strip()
        if not bed_id or bed_id == anchor_bed_id or bed_id in seen:
            continue
        seen.add(bed_id)
        out.append(bed_id)
    return out


def apply_restriction(event_id: int, anchor_bed_id: str, anchor_name: str,
                      restriction: Restriction, room_bed_ids) -> list:
    """
    Write placeholder slots for the free siblings of ``anchor_bed_id``.

    Runs inside the caller's unit of work and does not commit. Each sibling is
    an independent ``INSERT ... ON CONFLICT DO NOTHING`` on the
    (event_id, bed_id) key, so an occupied or concurrently booked bed is
    skipped instead of overwritten. Returns the bed ids actually written.
    """
    if restriction is Restriction.NONE:
        return []

    status = restriction.status.value
    name = restriction_label(restriction, anchor_name)
    now = datetime.utcnow()

    written = []
    for bed_id in sibling_beds(anchor_bed_id, room_bed_ids):
        stmt = (
            insert_for(BedSlot.__table__)
            .values(
                event_id=event_id,
                bed_id=bed_id,
                name=name,
                status=status,
                blocked_by=anchor_bed_id,
                booked_at=now,
                needs_pickup=False,
                offers_ride_seats=0,
            )
            .on_conflict_do_nothing(index_elements=["event_id", "bed_id"])
        )
        result = db.session.execute(stmt)
        if result.rowcount:
            written.append(bed_id)
    return written
