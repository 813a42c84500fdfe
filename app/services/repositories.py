"""
Repository layer abstracting storage (in-memory maps vs SQLAlchemy).

Every collection speaks the same contract: list / get / create / update / delete,
plus create_many / update_many for all-or-nothing batches. Records are handed
out as plain dicts keyed by snake_case field names. Ids come from
one counter shared by all collections, so an id is unique process-wide.
"""

from __future__ import annotations

import itertools
import logging
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Optional, Type

from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import Settings, settings
from app.core.db import init_db, make_engine, make_session_factory
from app.models import BudgetItem, Guest, IdSequence, SeatingTable, Task, TimelineEvent, Vendor, WeddingDetails
from app.schemas import (
    BudgetItemCreate,
    GuestCreate,
    SeatingTableCreate,
    TaskCreate,
    TimelineEventCreate,
    VendorCreate,
)

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class StoreError(Exception):
    """Raised when the backing store fails; callers answer with a 500"""


def schema_defaults(schema) -> Record:
    """Declared defaults for the optional fields of a create schema"""
    return {
        name: field.get_default(call_default_factory=True)
        for name, field in schema.model_fields.items()
        if not field.is_required()
    }


# collection attribute -> (SQLAlchemy model, create schema)
COLLECTIONS = {
    "guests": (Guest, GuestCreate),
    "budget_items": (BudgetItem, BudgetItemCreate),
    "timeline_events": (TimelineEvent, TimelineEventCreate),
    "tasks": (Task, TaskCreate),
    "vendors": (Vendor, VendorCreate),
    "seating_tables": (SeatingTable, SeatingTableCreate),
}


def wedding_seed(config: Settings) -> Record:
    return {
        "bride_name": config.DEFAULT_BRIDE_NAME,
        "groom_name": config.DEFAULT_GROOM_NAME,
        "wedding_date": config.DEFAULT_WEDDING_DATE,
        "venue": config.DEFAULT_VENUE,
        "total_budget": config.DEFAULT_TOTAL_BUDGET,
    }


# -------- In-memory backend --------

class MemoryCollection:
    """Insertion-ordered dict of records"""

    def __init__(self, name: str, next_id: Callable[[], int], defaults: Optional[Record] = None):
        self.name = name
        self._next_id = next_id
        self._defaults = dict(defaults or {})
        self._records: Dict[int, Record] = {}

    def list(self) -> List[Record]:
        return [dict(record) for record in self._records.values()]

    def get(self, record_id: int) -> Optional[Record]:
        record = self._records.get(record_id)
        return dict(record) if record is not None else None

    def create(self, fields: Record) -> Record:
        record_id = self._next_id()
        record = {**self._defaults, **fields, "id": record_id}
        self._records[record_id] = record
        return dict(record)

    def create_many(self, rows: List[Record]) -> List[Record]:
        """All rows are stored or none are"""
        records = [{**self._defaults, **fields, "id": self._next_id()} for fields in rows]
        self._records.update((record["id"], record) for record in records)
        return [dict(record) for record in records]

    def update(self, record_id: int, fields: Record) -> Optional[Record]:
        existing = self._records.get(record_id)
        if existing is None:
            return None
        updated = {**existing, **fields, "id": record_id}
        self._records[record_id] = updated
        return dict(updated)

    def update_many(self, record_ids: List[int], fields: Record) -> int:
        """Apply the same fields to every listed record that exists; returns how many changed"""
        found = [record_id for record_id in record_ids if record_id in self._records]
        for record_id in found:
            self._records[record_id] = {**self._records[record_id], **fields, "id": record_id}
        return len(found)

    def delete(self, record_id: int) -> bool:
        return self._records.pop(record_id, None) is not None


class MemorySingleton:
    """The one WeddingDetails record"""

    def __init__(self, record: Record):
        self._record = dict(record)

    def get(self) -> Record:
        return dict(self._record)

    def update(self, fields: Record) -> Record:
        self._record = {**self._record, **fields, "id": self._record["id"]}
        return dict(self._record)


class MemoryStorage:
    backend = "memory"

    def __init__(self, seed: Record):
        counter = itertools.count(1)
        next_id = lambda: next(counter)  # noqa: E731

        for attr, (_, schema) in COLLECTIONS.items():
            setattr(self, attr, MemoryCollection(attr, next_id, schema_defaults(schema)))
        self.wedding_details = MemorySingleton({**seed, "id": next_id()})


# -------- SQLAlchemy backend --------

@contextmanager
def session_scope(session_factory: Callable[[], Session]) -> Iterator[Session]:
    """Commit on success; roll back and raise StoreError on any database failure"""
    db = session_factory()
    try:
        yield db
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database operation failed: {e}")
        raise StoreError(str(e)) from e
    finally:
        db.close()


def row_to_record(row) -> Record:
    return {column.key: getattr(row, column.key) for column in row.__table__.columns}


def next_shared_id(db: Session) -> int:
    """Take the next value of the shared counter inside the caller's transaction"""
    sequence = db.get(IdSequence, "records", with_for_update=True)
    if sequence is None:
        sequence = IdSequence(name="records", next_value=1)
        db.add(sequence)
    value = sequence.next_value
    sequence.next_value = value + 1
    return value


class SqlCollection:
    def __init__(self, session_factory: Callable[[], Session], model: Type, defaults: Optional[Record] = None):
        self.name = model.__tablename__
        self._session_factory = session_factory
        self._model = model
        self._defaults = dict(defaults or {})

    def list(self) -> List[Record]:
        with session_scope(self._session_factory) as db:
            rows = db.query(self._model).order_by(self._model.id).all()
            return [row_to_record(row) for row in rows]

    def get(self, record_id: int) -> Optional[Record]:
        with session_scope(self._session_factory) as db:
            row = db.get(self._model, record_id)
            return row_to_record(row) if row is not None else None

    def create(self, fields: Record) -> Record:
        with session_scope(self._session_factory) as db:
            row = self._model(**{**self._defaults, **fields, "id": next_shared_id(db)})
            db.add(row)
            db.flush()
            return row_to_record(row)

    def create_many(self, rows: List[Record]) -> List[Record]:
        """One transaction: all rows are stored or none are"""
        with session_scope(self._session_factory) as db:
            created = []
            for fields in rows:
                row = self._model(**{**self._defaults, **fields, "id": next_shared_id(db)})
                db.add(row)
                db.flush()
                created.append(row)
            return [row_to_record(row) for row in created]

    def update(self, record_id: int, fields: Record) -> Optional[Record]:
        with session_scope(self._session_factory) as db:
            row = db.get(self._model, record_id)
            if row is None:
                return None
            for key, value in fields.items():
                if key != "id":
                    setattr(row, key, value)
            db.flush()
            return row_to_record(row)

    def update_many(self, record_ids: List[int], fields: Record) -> int:
        with session_scope(self._session_factory) as db:
            rows = db.query(self._model).filter(self._model.id.in_(record_ids)).all()
            for row in rows:
                for key, value in fields.items():
                    if key != "id":
                        setattr(row, key, value)
            return len(rows)

    def delete(self, record_id: int) -> bool:
        with session_scope(self._session_factory) as db:
            row = db.get(self._model, record_id)
            if row is None:
                return False
            db.delete(row)
            return True


class SqlSingleton:
    def __init__(self, session_factory: Callable[[], Session], seed: Record):
        self._session_factory = session_factory
        with session_scope(session_factory) as db:
            if db.query(WeddingDetails).first() is None:
                db.add(WeddingDetails(id=next_shared_id(db), **seed))
                logger.info("Seeded wedding details")

    def get(self) -> Record:
        with session_scope(self._session_factory) as db:
            return row_to_record(db.query(WeddingDetails).order_by(WeddingDetails.id).first())

    def update(self, fields: Record) -> Record:
        with session_scope(self._session_factory) as db:
            row = db.query(WeddingDetails).order_by(WeddingDetails.id).first()
            for key, value in fields.items():
                if key != "id":
                    setattr(row, key, value)
            db.flush()
            return row_to_record(row)


class SqlStorage:
    backend = "sql"

    def __init__(self, session_factory: Callable[[], Session], seed: Record):
        for attr, (model, schema) in COLLECTIONS.items():
            setattr(self, attr, SqlCollection(session_factory, model, schema_defaults(schema)))
        self.wedding_details = SqlSingleton(session_factory, seed)


def create_storage(config: Settings = settings):
    """Build the storage backend named by STORAGE_BACKEND"""
    seed = wedding_seed(config)
    if config.STORAGE_BACKEND == "memory":
        return MemoryStorage(seed)
    if config.STORAGE_BACKEND == "sql":
        engine = make_engine(config.DATABASE_URL)
        init_db(engine)
        return SqlStorage(make_session_factory(engine), seed)
    raise ValueError(f"Unknown storage backend: {config.STORAGE_BACKEND}")


def get_storage(request: Request):
    """FastAPI dependency: the storage injected into the running app"""
    return request.app.state.storage
