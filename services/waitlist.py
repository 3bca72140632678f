from flask import current_app
from sqlalchemy import delete, select

from models import db
from models.waitlist_entry import WaitlistEntry
from services.errors import ValidationError
from services.ledger import clean_name
from services.uow import unit_of_work


def append(event_id: int, name: str, comment: str = None) -> WaitlistEntry:
    name = clean_name(name)
    comment = str(comment or "").strip() or None
    limit = current_app.config.get("WAITLIST_COMMENT_MAX_LENGTH", 500)
    if comment and len(comment) > limit:
        raise ValidationError(f"comment must be at most {limit} characters")

    entry = WaitlistEntry(event_id=event_id, name=name, comment=comment)
    with unit_of_work("waitlist append") as session:
        session.add(entry)
    return entry


def list_entries(event_id: int) -> list:
    return db.session.execute(
        select(WaitlistEntry)
        .where(WaitlistEntry.event_id == event_id)
        .order_by(WaitlistEntry.created_at.asc(), WaitlistEntry.id.asc())
    ).scalars().all()


def remove(event_id: int, entry_id: int) -> bool:
    stmt = delete(WaitlistEntry).where(
        WaitlistEntry.event_id == event_id,
        WaitlistEntry.id == entry_id,
    ).execution_options(synchronize_session=False)
    with unit_of_work("waitlist remove") as session:
        result = session.execute(stmt)
    return bool(result.rowcount)
