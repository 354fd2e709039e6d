"""Contact form intake and the site owner's contact details."""

from __future__ import annotations

import html
from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from portfolio.core.config import Settings
from portfolio.core.errors import NotFoundError, ValidationFailed
from portfolio.core.logging import get_logger
from portfolio.core.mailer import send_email
from portfolio.domain.schemas import ContactInfo, ContactInfoIn, ContactInfoPatch, ContactMessage
from portfolio.repositories.factory import ContentStore
from portfolio.services.content_service import ContentService, parse_body, validation_details

log = get_logger(__name__)

MESSAGES = "contact-messages"


class ContactService:
    def __init__(self, store: ContentStore, settings: Settings) -> None:
        self.store = store
        self.settings = settings
        self.content = ContentService(store)

    # -------------------------- messages --------------------------
    def submit(self, payload: Any) -> ContactMessage:
        message = self.content.create(MESSAGES, payload)
        log.info("contact_message_received", id=message.id, email=message.email, subject=message.subject)
        self._notify(message)
        return message

    def messages(self) -> list[BaseModel]:
        return self.content.list(MESSAGES)

    def delete_message(self, message_id: int) -> None:
        self.content.delete(MESSAGES, message_id)

    def _notify(self, message: ContactMessage) -> bool:
        recipient = self.settings.contact_notify_email
        if not recipient:
            return False
        body = (
            f"<p><strong>{html.escape(message.name)}</strong> &lt;{html.escape(message.email)}&gt; wrote:</p>"
            f"<p>{html.escape(message.message).replace(chr(10), '<br>')}</p>"
        )
        text = f"{message.name} <{message.email}> wrote:\n\n{message.message}"
        return send_email(
            f"[Portfolio] {message.subject}",
            recipient,
            body,
            text_body=text,
            reply_to=message.email,
        )

    # -------------------------- contact info --------------------------
    def info(self) -> Optional[ContactInfo]:
        return self.store.get_contact_info()

    def save_info(self, payload: Any) -> ContactInfo:
        data = parse_body(ContactInfoIn, payload, "Contact info")
        info = self.store.put_contact_info(data.model_dump())
        log.info("contact_info_saved", id=info.id)
        return info

    def update_info(self, record_id: int, payload: Any) -> ContactInfo:
        changes = parse_body(ContactInfoPatch, payload, "Contact info").model_dump(exclude_unset=True)
        try:
            info = self.store.update_contact_info(record_id, changes)
        except ValidationError as exc:
            raise ValidationFailed("Invalid contact info data", validation_details(exc)) from exc
        if info is None:
            raise NotFoundError("Contact info not found")
        log.info("contact_info_updated", id=record_id, fields=sorted(changes))
        return info
