from sqlalchemy.dialects import postgresql, sqlite

from models import db

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def insert_for(model):
    """
    Dialect-specific INSERT supporting ``on_conflict_do_update`` /
    ``on_conflict_do_nothing`` for the bound engine.
    """
    dialect = db.session.get_bind().dialect.name
    try:
        factory = _DIALECT_INSERTS[dialect]
    except KeyError:
        raise RuntimeError(f"No native upsert for database dialect '{dialect}'")
    return factory(model)
