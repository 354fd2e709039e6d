"""CRUD, featured subsets and drag-and-drop ordering for content collections."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from portfolio.core.errors import NotFoundError, ValidationFailed
from portfolio.core.logging import get_logger
from portfolio.domain.collections import Collection, get_collection
from portfolio.domain.ordering import move
from portfolio.domain.schemas import ReorderRequest
from portfolio.repositories.factory import ContentStore

log = get_logger(__name__)


def validation_details(exc: ValidationError) -> list[dict]:
    return [
        {"field": ".".join(str(part) for part in err.get("loc", ())), "message": err.get("msg", "")}
        for err in exc.errors()
    ]


def parse_body(schema: type[BaseModel], payload: Any, label: str) -> BaseModel:
    try:
        return schema.model_validate(payload if payload is not None else {})
    except ValidationError as exc:
        raise ValidationFailed(f"Invalid {label.lower()} data", validation_details(exc)) from exc


class ContentService:
    def __init__(self, store: ContentStore) -> None:
        self.store = store

    def _collection(self, kind: str) -> Collection:
        return get_collection(kind)

    def list(self, kind: str) -> list[BaseModel]:
        return self.store.list(kind)

    def featured(self, kind: str) -> list[BaseModel]:
        return [r for r in self.store.list(kind) if getattr(r, "featured", False)]

    def get(self, kind: str, record_id: int) -> BaseModel:
        record = self.store.get(kind, record_id)
        if record is None:
            raise NotFoundError(f"{self._collection(kind).label} not found")
        return record

    def create(self, kind: str, payload: Any) -> BaseModel:
        collection = self._collection(kind)
        data = parse_body(collection.create, payload, collection.label)
        try:
            record = self.store.add(kind, data.model_dump())
        except ValidationError as exc:
            raise ValidationFailed(f"Invalid {collection.label.lower()} data", validation_details(exc)) from exc
        log.info("record_created", collection=kind, id=record.id)
        return record

    def update(self, kind: str, record_id: int, payload: Any) -> BaseModel:
        collection = self._collection(kind)
        changes = parse_body(collection.patch, payload, collection.label).model_dump(exclude_unset=True)
        try:
            record = self.store.update(kind, record_id, changes)
        except ValidationError as exc:
            raise ValidationFailed(f"Invalid {collection.label.lower()} data", validation_details(exc)) from exc
        if record is None:
            raise NotFoundError(f"{collection.label} not found")
        log.info("record_updated", collection=kind, id=record_id, fields=sorted(changes))
        return record

    def delete(self, kind: str, record_id: int) -> None:
        if not self.store.delete(kind, record_id):
            raise NotFoundError(f"{self._collection(kind).label} not found")
        log.info("record_deleted", collection=kind, id=record_id)

    def reorder(self, kind: str, payload: Any) -> list[BaseModel]:
        request = parse_body(ReorderRequest, payload, "reorder")
        ordered_ids = self._ordered_ids(kind, request)
        records = self.store.reorder(kind, ordered_ids)
        log.info("collection_reordered", collection=kind, ids=[r.id for r in records])
        return records

    def _ordered_ids(self, kind: str, request: ReorderRequest) -> list[int]:
        if request.reordered_ids is not None:
            return list(request.reordered_ids)
        if request.source_index is None or request.destination_index is None:
            raise ValidationFailed("Provide reorderedIds or sourceIndex and destinationIndex")
        current = [r.id for r in self.store.list(kind)]
        try:
            return move(current, request.source_index, request.destination_index)
        except IndexError as exc:
            raise ValidationFailed(str(exc)) from exc

    def upsert_by(self, kind: str, field: str, payload: Any) -> BaseModel:
        """Create a record, or update the existing one sharing ``field``."""
        collection = self._collection(kind)
        data = parse_body(collection.create, payload, collection.label)
        value = getattr(data, field)
        existing: Optional[BaseModel] = next(
            (r for r in self.store.list(kind) if getattr(r, field) == value), None
        )
        if existing is None:
            return self.create(kind, data.model_dump())
        record = self.store.update(kind, existing.id, data.model_dump(exclude_unset=True))
        log.info("record_updated", collection=kind, id=existing.id, via=field)
        return record
