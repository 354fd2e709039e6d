from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Depends, Request

from portfolio.core.rate_limiter import rate_limit_ip
from portfolio.core.security import require_admin
from portfolio.domain.schemas import ContactInfo, ContactMessage
from portfolio.routers.deps import get_settings_dep, get_store
from portfolio.services.contact_service import ContactService

router = APIRouter(prefix="/api", tags=["contact"])


def _service(request: Request) -> ContactService:
    return ContactService(get_store(request), get_settings_dep(request))


@router.post("/contact")
def submit_contact(request: Request, payload: dict | None = Body(None), service: ContactService = Depends(_service)):
    rate_limit_ip(request, "contact", limit=5, window_seconds=60)
    service.submit(payload)
    return {"success": True, "message": "Message sent successfully"}


@router.get("/contact-messages", response_model=list[ContactMessage], dependencies=[Depends(require_admin)])
def list_contact_messages(service: ContactService = Depends(_service)):
    return service.messages()


@router.delete("/contact-messages/{message_id}", dependencies=[Depends(require_admin)])
def delete_contact_message(message_id: int, service: ContactService = Depends(_service)):
    service.delete_message(message_id)
    return {"success": True}


@router.get("/contact-info", response_model=Optional[ContactInfo])
def get_contact_info(service: ContactService = Depends(_service)):
    return service.info()


@router.post("/contact-info", response_model=ContactInfo, dependencies=[Depends(require_admin)])
def create_contact_info(payload: dict | None = Body(None), service: ContactService = Depends(_service)):
    return service.save_info(payload)


@router.put("/contact-info/{record_id}", response_model=ContactInfo, dependencies=[Depends(require_admin)])
def update_contact_info(record_id: int, payload: dict | None = Body(None), service: ContactService = Depends(_service)):
    return service.update_info(record_id, payload)
