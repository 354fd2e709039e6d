"""
Outgoing e-mail over SMTP.

Port 465 uses implicit TLS; any other port connects in plain text and
upgrades with STARTTLS. Nothing is sent while the SMTP_* settings are
incomplete.
"""

from __future__ import annotations

from email.message import EmailMessage
import smtplib
import ssl

from .config import Settings, get_settings
from .logging import get_logger

log = get_logger(__name__)


def smtp_configured(settings: Settings | None = None) -> bool:
    settings = settings or get_settings()
    return all(
        (settings.smtp_host, settings.smtp_port, settings.smtp_user, settings.smtp_password, settings.smtp_from)
    )


def _build_message(settings: Settings, subject: str, to_email: str, html_body: str, text_body: str | None, reply_to: str | None) -> EmailMessage:
    message = EmailMessage()
    message["Subject"] = subject
    message["From"] = settings.smtp_from
    message["To"] = to_email
    if reply_to:
        message["Reply-To"] = reply_to
    message.set_content(text_body or html_body)
    message.add_alternative(html_body, subtype="html")
    return message


def _open(settings: Settings) -> smtplib.SMTP:
    context = ssl.create_default_context()
    if settings.smtp_port == 465:
        return smtplib.SMTP_SSL(settings.smtp_host, settings.smtp_port, context=context, timeout=15)
    server = smtplib.SMTP(settings.smtp_host, settings.smtp_port, timeout=15)
    try:
        server.starttls(context=context)
    except (smtplib.SMTPException, OSError):
        server.close()
        raise
    return server


def send_email(subject: str, to_email: str, html_body: str, text_body: str | None = None, reply_to: str | None = None) -> bool:
    """Send one message; return False when SMTP is unconfigured or delivery fails."""
    settings = get_settings()
    if not smtp_configured(settings):
        log.info("email_skipped", reason="smtp_not_configured", to=to_email)
        return False
    message = _build_message(settings, subject, to_email, html_body, text_body, reply_to)
    try:
        with _open(settings) as server:
            server.login(settings.smtp_user, settings.smtp_password)
            server.send_message(message)
    except (smtplib.SMTPException, OSError) as exc:
        log.warning("email_failed", to=to_email, error=str(exc))
        return False
    log.info("email_sent", to=to_email, subject=subject)
    return True
