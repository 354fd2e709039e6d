"""
One router per content collection (blogs, LinkedIn posts, skills,
certifications, education, selected projects).

Reads are public; every mutation requires the admin bearer token.
"""
from __future__ import annotations

from fastapi import APIRouter, Body, Depends

from portfolio.core.security import require_admin
from portfolio.domain.collections import Collection, public_collections
from portfolio.routers.deps import get_content_service
from portfolio.services.content_service import ContentService


def build_router(collection: Collection) -> APIRouter:
    router = APIRouter(prefix=f"/api/{collection.name}", tags=[collection.name])
    kind = collection.name
    admin = [Depends(require_admin)]

    @router.get("", response_model=list[collection.record])
    def list_records(service: ContentService = Depends(get_content_service)):
        return service.list(kind)

    if collection.has_featured:
        @router.get("/featured", response_model=list[collection.record])
        def list_featured(service: ContentService = Depends(get_content_service)):
            return service.featured(kind)

    @router.put("/reorder", dependencies=admin)
    def reorder_records(payload: dict | None = Body(None), service: ContentService = Depends(get_content_service)):
        items = service.reorder(kind, payload)
        return {"success": True, "items": [r.model_dump(mode="json", by_alias=True) for r in items]}

    @router.get("/{record_id}", response_model=collection.record)
    def get_record(record_id: int, service: ContentService = Depends(get_content_service)):
        return service.get(kind, record_id)

    @router.post("", response_model=collection.record, dependencies=admin)
    def create_record(payload: dict | None = Body(None), service: ContentService = Depends(get_content_service)):
        return service.create(kind, payload)

    @router.put("/{record_id}", response_model=collection.record, dependencies=admin)
    def update_record(record_id: int, payload: dict | None = Body(None), service: ContentService = Depends(get_content_service)):
        return service.update(kind, record_id, payload)

    @router.delete("/{record_id}", dependencies=admin)
    def delete_record(record_id: int, service: ContentService = Depends(get_content_service)):
        service.delete(kind, record_id)
        return {"success": True}

    return router


routers = [build_router(collection) for collection in public_collections()]
