# app/services/mailer.py
import logging
import smtplib
from email.message import EmailMessage
from typing import Optional

from app.core.config import settings

logger = logging.getLogger(__name__)


class MailerNotConfigured(RuntimeError):
    pass


def build_thankyou_message(to_addr: str, name: Optional[str] = None) -> EmailMessage:
    greeting = f"Hörmətli {name}," if name else "Hörmətli qonaq,"
    msg = EmailMessage()
    msg["Subject"] = "Rəyiniz üçün təşəkkür edirik!"
    msg["From"] = settings.SMTP_FROM or settings.SMTP_USER or "noreply@example.com"
    msg["To"] = to_addr
    msg.set_content(
        "\n".join([
            greeting,
            "",
            "Bizi seçdiyiniz və fikrinizi bölüşdüyünüz üçün təşəkkür edirik.",
            "Sizi yenidən görməyə şad olarıq!",
        ])
    )
    return msg


def send_thankyou_email(to_addr: str, name: Optional[str] = None) -> None:
    """Send the thank-you mail; SMTP errors propagate to the caller."""
    if not settings.SMTP_HOST:
        raise MailerNotConfigured("SMTP_HOST is not set")

    msg = build_thankyou_message(to_addr, name)
    with smtplib.SMTP(settings.SMTP_HOST, settings.SMTP_PORT, timeout=10) as server:
        if settings.SMTP_USER and settings.SMTP_PASS:
            server.starttls()
            server.login(settings.SMTP_USER, settings.SMTP_PASS)
        server.send_message(msg)

    logger.info("Thank-you email sent to %s", to_addr)
