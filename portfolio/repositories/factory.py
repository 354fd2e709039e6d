"""Pick the storage backend for the current settings."""
from __future__ import annotations

from typing import Union

from portfolio.core.config import Settings
from portfolio.core.logging import get_logger
from portfolio.db.models import create_all

from .json_storage import JSONStorage
from .sql_repository import SQLRepository

log = get_logger(__name__)

ContentStore = Union[JSONStorage, SQLRepository]


def build_store(settings: Settings) -> ContentStore:
    if settings.storage_backend == "sql":
        create_all()
        log.info("storage_ready", backend="sql")
        return SQLRepository()
    store = JSONStorage(settings.data_dir)
    log.info("storage_ready", backend="json", data_dir=str(settings.data_dir))
    return store
