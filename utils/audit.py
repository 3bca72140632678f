import json
from flask import request, current_app
from sqlalchemy.exc import SQLAlchemyError
from models import db
from models.audit_log import AuditLog

def log_event(action: str, event_id=None, entity=None, entity_id=None, metadata=None):
    """
    Record an audit row for a change that has already been committed.

    A failing audit write is logged and dropped; it never turns a completed
    booking change into an error response.
    """
    ip = request.headers.get("X-Forwarded-For", request.remote_addr)
    user_agent = request.headers.get("User-Agent", "")

    row = AuditLog(
        event_id=event_id,
        action=action,
        entity=entity,
        entity_id=str(entity_id) if entity_id is not None else None,
        ip=ip[:64] if ip else None,
        user_agent=user_agent[:255] if user_agent else None,
        metadata_json=json.dumps(metadata) if metadata else None
    )
    try:
        db.session.add(row)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Could not write audit log entry %s", action)
