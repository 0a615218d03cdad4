# presensi/db/upsert.py
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

# Dialects that support INSERT ... ON CONFLICT DO UPDATE
_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


def upsert_insert(db: Session, model):
    dialect = db.get_bind().dialect.name
    if dialect not in _INSERTS:
        raise NotImplementedError(f"Upsert is not supported for dialect {dialect!r}")
    return _INSERTS[dialect](model)
