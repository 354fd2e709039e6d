"""GitHub project overrides and their uploaded media."""

from __future__ import annotations

import io
import re
import secrets
from pathlib import Path
from typing import Any

from PIL import Image, ImageOps, UnidentifiedImageError
from pydantic import BaseModel

from portfolio.core.errors import ContentError, NotFoundError, ValidationFailed
from portfolio.core.logging import get_logger
from portfolio.repositories.factory import ContentStore
from portfolio.services.content_service import ContentService

log = get_logger(__name__)

KIND = "projects"
IMAGE_MAX_SIZE = (1600, 1600)
_SAFE_SUFFIX = re.compile(r"^\.[a-z0-9]{1,8}$")


class ProjectService:
    def __init__(self, store: ContentStore, uploads_dir: Path, max_upload_bytes: int) -> None:
        self.content = ContentService(store)
        self.uploads_dir = Path(uploads_dir)
        self.max_upload_bytes = max_upload_bytes

    def list(self) -> list[BaseModel]:
        return self.content.list(KIND)

    def save(self, payload: Any) -> BaseModel:
        """Create the override for a GitHub repository, or update the existing one."""
        return self.content.upsert_by(KIND, "github_id", payload)

    def attach_media(self, project_id: int, filename: str, content_type: str, data: bytes) -> BaseModel:
        if not data:
            raise ValidationFailed("No file uploaded")
        if len(data) > self.max_upload_bytes:
            raise ContentError("File too large", "too_large", 413)
        if self.content.store.get(KIND, project_id) is None:
            raise NotFoundError("Project not found")
        content_type = (content_type or "").lower()
        if content_type.startswith("image/"):
            url = self._save_image(data)
            changes = {"image_url": url}
        else:
            url = self._save_raw(data, filename)
            changes = {"video_url": url}
        record = self.content.store.update(KIND, project_id, changes)
        log.info("project_media_attached", id=project_id, url=url, content_type=content_type)
        return record

    def _save_image(self, data: bytes) -> str:
        try:
            image = Image.open(io.BytesIO(data))
            image = ImageOps.exif_transpose(image).convert("RGB")
            image.thumbnail(IMAGE_MAX_SIZE, Image.LANCZOS)
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
            raise ValidationFailed("Invalid image file") from exc
        buffer = io.BytesIO()
        image.save(buffer, format="JPEG", quality=85, optimize=True)
        return self._write(buffer.getvalue(), ".jpg")

    def _save_raw(self, data: bytes, filename: str) -> str:
        suffix = Path(filename or "").suffix.lower()
        if not _SAFE_SUFFIX.match(suffix):
            suffix = ".bin"
        return self._write(data, suffix)

    def _write(self, payload: bytes, suffix: str) -> str:
        self.uploads_dir.mkdir(parents=True, exist_ok=True)
        name = f"{secrets.token_hex(8)}{suffix}"
        (self.uploads_dir / name).write_bytes(payload)
        return f"/uploads/{name}"
