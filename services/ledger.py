"""
Booking ledger: the authoritative bed occupancy table of an event.

All writes go through a single unit of work per operation. The primary slot
write is a native upsert on the (event_id, bed_id) unique key, so concurrent
reservations of the same bed resolve as last-writer-wins without a
read-modify-write race.
"""
from datetime import datetime

from flask import current_app
from sqlalchemy import delete, or_, select, update

from models import db
from models.bed_slot import BedSlot, BedStatus, Restriction, RESTRICTED_STATUSES, CLAIMABLE_STATUSES
from services.cascade import apply_restriction
from services.errors import ValidationError
from services.logistics import parse_logistics
from services.uow import unit_of_work
from utils.upsert import insert_for


def clean_name(name) -> str:
    name = str(name or "").strip()
    if not name:
        raise ValidationError("name is required")
    limit = current_app.config.get("NAME_MAX_LENGTH", 100)
    if len(name) > limit:
        raise ValidationError(f"name must be at most {limit} characters")
    return name


def parse_restriction(value) -> Restriction:
    if value is None or (isinstance(value, str) and not value.strip()):
        return Restriction.NONE
    if isinstance(value, Restriction):
        return value
    try:
        return Restriction(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(r.value for r in Restriction)
        raise ValidationError(f"restriction must be one of: {allowed}")


def _bed_id(bed_id) -> str:
    bed_id = (bed_id or "").strip()
    if not bed_id:
        raise ValidationError("bed_id is required")
    return bed_id


def reserve(event_id: int, bed_id: str, name: str, logistics=None,
            restriction=None, room_bed_ids=None) -> dict:
    """
    Book ``bed_id`` for ``name``, replacing whatever the slot held before.

    Logistics are a full overwrite. A restriction other than ``none`` also
    writes placeholder slots for the free beds among ``room_bed_ids`` in the
    same transaction.
    """
    bed_id = _bed_id(bed_id)
    name = clean_name(name)
    restriction = parse_restriction(restriction)
    values = parse_logistics(logistics)

    row = dict(
        event_id=event_id,
        bed_id=bed_id,
        name=name,
        status=BedStatus.BOOKED.value,
        blocked_by=None,
        booked_at=datetime.utcnow(),
        **values,
    )
    stmt = insert_for(BedSlot.__table__).values(**row)
    stmt = stmt.on_conflict_do_update(
        index_elements=["event_id", "bed_id"],
        set_={k: stmt.excluded[k] for k in row if k not in ("event_id", "bed_id")},
    )

    with unit_of_work("reserve") as session:
        session.execute(stmt)
        restricted = apply_restriction(event_id, bed_id, name, restriction, room_bed_ids)

    return {"bed_id": bed_id, "name": name, "restriction": restriction.value, "restricted": restricted}


def release(event_id: int, bed_id: str) -> int:
    """
    Free ``bed_id`` together with every slot it anchors.

    Releasing a free bed is a successful no-op. Returns the number of slots
    removed.
    """
    bed_id = _bed_id(bed_id)
    stmt = delete(BedSlot).where(
        BedSlot.event_id == event_id,
        or_(BedSlot.bed_id == bed_id, BedSlot.blocked_by == bed_id),
    ).execution_options(synchronize_session=False)
    with unit_of_work("release") as session:
        result = session.execute(stmt)
    return result.rowcount or 0


def unblock(event_id: int, bed_id: str) -> bool:
    """Remove a blocked or gender-restricted placeholder. Booked beds stay."""
    bed_id = _bed_id(bed_id)
    stmt = delete(BedSlot).where(
        BedSlot.event_id == event_id,
        BedSlot.bed_id == bed_id,
        BedSlot.status.in_([s.value for s in RESTRICTED_STATUSES]),
    ).execution_options(synchronize_session=False)
    with unit_of_work("unblock") as session:
        result = session.execute(stmt)
    return bool(result.rowcount)


def claim(event_id: int, bed_id: str, name: str, logistics=None) -> bool:
    """
    Turn a women-only or men-only placeholder into a booking for ``name``.

    The slot keeps its anchor, so releasing the anchor later frees it too.
    Returns False when the bed was not in a claimable state; nothing changes
    in that case.
    """
    bed_id = _bed_id(bed_id)
    name = clean_name(name)
    values = parse_logistics(logistics)

    stmt = (
        update(BedSlot)
        .where(
            BedSlot.event_id == event_id,
            BedSlot.bed_id == bed_id,
            BedSlot.status.in_([s.value for s in CLAIMABLE_STATUSES]),
        )
        .values(
            name=name,
            status=BedStatus.BOOKED.value,
            booked_at=datetime.utcnow(),
            **values,
        )
        .execution_options(synchronize_session=False)
    )
    with unit_of_work("claim") as session:
        result = session.execute(stmt)
    return bool(result.rowcount)


def list_slots(event_id: int) -> dict:
    rows = db.session.execute(
        select(BedSlot).where(BedSlot.event_id == event_id).order_by(BedSlot.bed_id)
    ).scalars().all()
    return {r.bed_id: r.to_dict() for r in rows}
