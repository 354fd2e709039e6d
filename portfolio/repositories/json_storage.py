"""
Flat-file persistence adapter: one JSON array per collection.

Every mutation reads the whole file, changes it and writes the whole file
back. The lock only serialises writers inside this process.
"""

from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import Any, Iterable, Optional

from pydantic import BaseModel, ValidationError

from portfolio.core.logging import get_logger
from portfolio.domain import defaults
from portfolio.domain.collections import (
    CONTACT_INFO_FILE,
    CONTACT_INFO_ID,
    COLLECTIONS,
    Collection,
    get_collection,
)
from portfolio.domain.ordering import apply_order, display_order, next_id
from portfolio.domain.schemas import ContactInfo, utcnow

log = get_logger(__name__)

_PROTECTED = ("id", "created_at")


class JSONStorage:
    backend = "json"

    def __init__(self, data_dir: Path | str) -> None:
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self._lock = threading.RLock()

    # -------------------------- files --------------------------
    def _path(self, filename: str) -> Path:
        return self.data_dir / filename

    def _read(self, filename: str, default: Any) -> Any:
        path = self._path(filename)
        if not path.exists():
            return default
        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as exc:
            log.warning("json_read_failed", file=filename, error=str(exc))
            return default

    def _write(self, filename: str, data: Any) -> None:
        self._path(filename).write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")

    def _load(self, collection: Collection) -> tuple[list[BaseModel], list[Any]]:
        """Parse a collection file into records plus the raw entries that failed validation."""
        raw = self._read(collection.filename, [])
        if not isinstance(raw, list):
            return [], []
        records, unreadable = [], []
        for item in raw:
            try:
                records.append(collection.record.model_validate(item))
            except ValidationError as exc:
                log.warning("json_record_unreadable", file=collection.filename, error=str(exc))
                unreadable.append(item)
        return records, unreadable

    def _dump(self, collection: Collection, records: Iterable[BaseModel], unreadable: Iterable[Any] = ()) -> None:
        # entries that failed validation are written back untouched
        payload = [r.model_dump(mode="json", by_alias=True) for r in records]
        payload.extend(unreadable)
        self._write(collection.filename, payload)

    @staticmethod
    def _raw_id(item: Any) -> Optional[int]:
        value = item.get("id") if isinstance(item, dict) else None
        return value if isinstance(value, int) and not isinstance(value, bool) else None

    # -------------------------- collections --------------------------
    def list(self, kind: str) -> list[BaseModel]:
        collection = get_collection(kind)
        records, _ = self._load(collection)
        return display_order(records, collection.order_field, collection.default_sort)

    def get(self, kind: str, record_id: int) -> Optional[BaseModel]:
        records, _ = self._load(get_collection(kind))
        for record in records:
            if record.id == record_id:
                return record
        return None

    def add(self, kind: str, data: dict) -> BaseModel:
        collection = get_collection(kind)
        with self._lock:
            records, unreadable = self._load(collection)
            payload = {k: v for k, v in data.items() if k not in _PROTECTED}
            if collection.order_field == "display_order" and payload.get("display_order") is None:
                payload["display_order"] = len(records) + len(unreadable)
            raw_ids = [i for i in map(self._raw_id, unreadable) if i is not None]
            new_id = max([next_id(records), *(i + 1 for i in raw_ids)])
            payload.update(id=new_id, created_at=utcnow())
            record = collection.record.model_validate(payload)
            records.append(record)
            self._dump(collection, records, unreadable)
        return record

    def update(self, kind: str, record_id: int, changes: dict) -> Optional[BaseModel]:
        collection = get_collection(kind)
        with self._lock:
            records, unreadable = self._load(collection)
            for index, record in enumerate(records):
                if record.id != record_id:
                    continue
                merged = record.model_dump()
                merged.update({k: v for k, v in changes.items() if k not in _PROTECTED})
                records[index] = collection.record.model_validate(merged)
                self._dump(collection, records, unreadable)
                return records[index]
        return None

    def delete(self, kind: str, record_id: int) -> bool:
        collection = get_collection(kind)
        with self._lock:
            records, unreadable = self._load(collection)
            kept = [r for r in records if r.id != record_id]
            kept_raw = [item for item in unreadable if self._raw_id(item) != record_id]
            if len(kept) == len(records) and len(kept_raw) == len(unreadable):
                return False
            self._dump(collection, kept, kept_raw)
        return True

    def reorder(self, kind: str, ordered_ids: Iterable[int]) -> list[BaseModel]:
        collection = get_collection(kind)
        if not collection.order_field:
            raise ValueError(f"{collection.name} cannot be reordered")
        with self._lock:
            records, unreadable = self._load(collection)
            current = display_order(records, collection.order_field, collection.default_sort)
            arranged = [
                r.model_copy(update={collection.order_field: index})
                for index, r in enumerate(apply_order(current, ordered_ids))
            ]
            self._dump(collection, arranged, unreadable)
        return arranged

    # -------------------------- contact info --------------------------
    def get_contact_info(self) -> Optional[ContactInfo]:
        raw = self._read(CONTACT_INFO_FILE, None)
        if not isinstance(raw, dict):
            return None
        try:
            return ContactInfo.model_validate(raw)
        except ValidationError as exc:
            log.warning("json_record_skipped", file=CONTACT_INFO_FILE, error=str(exc))
            return None

    def put_contact_info(self, data: dict) -> ContactInfo:
        payload = {k: v for k, v in data.items() if k not in _PROTECTED}
        payload.update(id=CONTACT_INFO_ID, created_at=utcnow())
        info = ContactInfo.model_validate(payload)
        with self._lock:
            self._write(CONTACT_INFO_FILE, info.model_dump(mode="json", by_alias=True))
        return info

    def update_contact_info(self, record_id: int, changes: dict) -> Optional[ContactInfo]:
        with self._lock:
            current = self.get_contact_info()
            if current is None or current.id != record_id:
                return None
            merged = current.model_dump()
            merged.update({k: v for k, v in changes.items() if k not in _PROTECTED})
            info = ContactInfo.model_validate(merged)
            self._write(CONTACT_INFO_FILE, info.model_dump(mode="json", by_alias=True))
        return info

    # -------------------------- seed --------------------------
    def seed_defaults(self) -> list[str]:
        """Write default content for collections that are missing or empty."""
        seeded = []
        with self._lock:
            if self.get_contact_info() is None:
                self.put_contact_info(defaults.DEFAULT_CONTACT_INFO)
                seeded.append("contact-info")
            for kind, items in defaults.DEFAULT_CONTENT.items():
                records, unreadable = self._load(COLLECTIONS[kind])
                if records or unreadable:
                    continue
                for item in items:
                    self.add(kind, item)
                seeded.append(kind)
        if seeded:
            log.info("defaults_seeded", backend=self.backend, collections=seeded)
        return seeded
