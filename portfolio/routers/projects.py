from __future__ import annotations

from fastapi import APIRouter, Body, Depends, File, Request, UploadFile

from portfolio.core.errors import ValidationFailed
from portfolio.core.security import require_admin
from portfolio.domain.schemas import Project
from portfolio.routers.deps import get_settings_dep, get_store
from portfolio.services.project_service import ProjectService

router = APIRouter(prefix="/api/projects", tags=["projects"])


def _service(request: Request) -> ProjectService:
    settings = get_settings_dep(request)
    return ProjectService(get_store(request), settings.uploads_dir, settings.max_upload_bytes)


@router.get("", response_model=list[Project])
def list_projects(service: ProjectService = Depends(_service)):
    return service.list()


@router.post("", response_model=Project, dependencies=[Depends(require_admin)])
def save_project(payload: dict | None = Body(None), service: ProjectService = Depends(_service)):
    return service.save(payload)


@router.post("/{project_id}/upload", response_model=Project, dependencies=[Depends(require_admin)])
def upload_project_media(
    project_id: int,
    file: UploadFile | None = File(None),
    service: ProjectService = Depends(_service),
):
    if file is None:
        raise ValidationFailed("No file uploaded")
    data = file.file.read(service.max_upload_bytes + 1)
    return service.attach_media(project_id, file.filename or "", file.content_type or "", data)
