"""Collection store backed by SQLAlchemy, used when DATABASE_URL is set."""
from __future__ import annotations

from typing import Iterable, Optional

from pydantic import BaseModel
from sqlalchemy import func, select

from portfolio.core.logging import get_logger
from portfolio.db.models import MODELS, ContactInfo as ContactInfoRow
from portfolio.db.session import get_session
from portfolio.domain import defaults
from portfolio.domain.collections import CONTACT_INFO_ID, get_collection
from portfolio.domain.ordering import apply_order, display_order
from portfolio.domain.schemas import ContactInfo, utcnow

log = get_logger(__name__)

_PROTECTED = ("id", "created_at")


def _row_to_dict(row) -> dict:
    return {column.key: getattr(row, column.key) for column in row.__table__.columns}


def _columns(model) -> set[str]:
    return {column.key for column in model.__table__.columns}


class SQLRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    backend = "sql"

    def _record(self, kind: str, row) -> BaseModel:
        return get_collection(kind).record.model_validate(_row_to_dict(row))

    # -------------------------- collections --------------------------
    def list(self, kind: str) -> list[BaseModel]:
        collection = get_collection(kind)
        model = MODELS[kind]
        with get_session() as session:
            rows = session.execute(select(model).order_by(model.id)).scalars().all()
            records = [self._record(kind, row) for row in rows]
        return display_order(records, collection.order_field, collection.default_sort)

    def get(self, kind: str, record_id: int) -> Optional[BaseModel]:
        with get_session() as session:
            row = session.get(MODELS[kind], record_id)
            return self._record(kind, row) if row else None

    def add(self, kind: str, data: dict) -> BaseModel:
        collection = get_collection(kind)
        model = MODELS[kind]
        allowed = _columns(model)
        values = {k: v for k, v in data.items() if k in allowed and k not in _PROTECTED}
        with get_session() as session:
            if collection.order_field == "display_order" and values.get("display_order") is None:
                values["display_order"] = session.execute(select(func.count()).select_from(model)).scalar_one()
            record = collection.record.model_validate({**values, "id": 0, "created_at": utcnow()})
            entity = model(**{key: getattr(record, key) for key in allowed - {"id"}})
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return self._record(kind, entity)

    def update(self, kind: str, record_id: int, changes: dict) -> Optional[BaseModel]:
        collection = get_collection(kind)
        model = MODELS[kind]
        allowed = _columns(model)
        with get_session() as session:
            entity = session.get(model, record_id)
            if not entity:
                return None
            merged = _row_to_dict(entity)
            merged.update({k: v for k, v in changes.items() if k in allowed and k not in _PROTECTED})
            record = collection.record.model_validate(merged)
            for key in allowed - set(_PROTECTED):
                setattr(entity, key, getattr(record, key))
            session.commit()
            session.refresh(entity)
            return self._record(kind, entity)

    def delete(self, kind: str, record_id: int) -> bool:
        with get_session() as session:
            entity = session.get(MODELS[kind], record_id)
            if not entity:
                return False
            session.delete(entity)
            session.commit()
        return True

    def reorder(self, kind: str, ordered_ids: Iterable[int]) -> list[BaseModel]:
        collection = get_collection(kind)
        if not collection.order_field:
            raise ValueError(f"{collection.name} cannot be reordered")
        model = MODELS[kind]
        with get_session() as session:
            rows = session.execute(select(model).order_by(model.id)).scalars().all()
            by_id = {row.id: row for row in rows}
            current = display_order([self._record(kind, row) for row in rows], collection.order_field, collection.default_sort)
            arranged = apply_order(current, ordered_ids)
            for index, record in enumerate(arranged):
                setattr(by_id[record.id], collection.order_field, index)
            session.commit()
            return [self._record(kind, by_id[record.id]) for record in arranged]

    # -------------------------- contact info --------------------------
    def get_contact_info(self) -> Optional[ContactInfo]:
        with get_session() as session:
            row = session.get(ContactInfoRow, CONTACT_INFO_ID)
            return ContactInfo.model_validate(_row_to_dict(row)) if row else None

    def put_contact_info(self, data: dict) -> ContactInfo:
        allowed = _columns(ContactInfoRow)
        values = {k: v for k, v in data.items() if k in allowed and k not in _PROTECTED}
        info = ContactInfo.model_validate({**values, "id": CONTACT_INFO_ID, "created_at": utcnow()})
        with get_session() as session:
            entity = ContactInfoRow(**{key: getattr(info, key) for key in allowed})
            entity = session.merge(entity)
            session.commit()
            session.refresh(entity)
            return ContactInfo.model_validate(_row_to_dict(entity))

    def update_contact_info(self, record_id: int, changes: dict) -> Optional[ContactInfo]:
        allowed = _columns(ContactInfoRow)
        with get_session() as session:
            entity = session.get(ContactInfoRow, record_id)
            if not entity or record_id != CONTACT_INFO_ID:
                return None
            merged = _row_to_dict(entity)
            merged.update({k: v for k, v in changes.items() if k in allowed and k not in _PROTECTED})
            info = ContactInfo.model_validate(merged)
            for key in allowed - set(_PROTECTED):
                setattr(entity, key, getattr(info, key))
            session.commit()
            session.refresh(entity)
            return ContactInfo.model_validate(_row_to_dict(entity))

    # -------------------------- seed --------------------------
    def seed_defaults(self) -> list[str]:
        seeded = []
        if self.get_contact_info() is None:
            self.put_contact_info(defaults.DEFAULT_CONTACT_INFO)
            seeded.append("contact-info")
        for kind, items in defaults.DEFAULT_CONTENT.items():
            model = MODELS[kind]
            with get_session() as session:
                count = session.execute(select(func.count()).select_from(model)).scalar_one()
            if count:
                continue
            for item in items:
                self.add(kind, get_collection(kind).create.model_validate(item).model_dump())
            seeded.append(kind)
        if seeded:
            log.info("defaults_seeded", backend=self.backend, collections=seeded)
        return seeded
