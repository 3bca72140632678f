from functools import wraps
from flask import g

from models.event import Event
from services.errors import ScopeError


def resolve_event(slug: str) -> Event:
    """Map an event slug to its active Event, or raise ScopeError."""
    slug = (slug or "").strip().lower()
    if not slug:
        raise ScopeError()

    event = Event.query.filter_by(slug=slug, is_active=True).first()
    if not event:
        raise ScopeError()
    return event


def event_required(fn):
    """
    Resolve the ``slug`` URL segment to ``g.event`` before the view runs.

    Usage: @event_required on views under /api/events/<slug>/...
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        g.event = resolve_event(kwargs.pop("slug", None))
        return fn(*args, **kwargs)
    return wrapper
