from contextlib import contextmanager

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from models import db
from services.errors import StorageError


@contextmanager
def unit_of_work(operation: str):
    """
    Run the enclosed statements as one transaction on ``db.session``.

    Commits when the block finishes; on any storage failure the whole unit is
    rolled back, logged, and surfaced as StorageError. Other exceptions also
    roll back and propagate unchanged.
    """
    try:
        yield db.session
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Storage failure during %s", operation)
        raise StorageError()
    except Exception:
        db.session.rollback()
        raise
