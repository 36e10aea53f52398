# app/api/endpoints/email.py
import logging
import smtplib

from fastapi import APIRouter

from app.core.errors import ApiError
from app.models.schemas import SuccessResponse, ThankYouEmailRequest
from app.services.mailer import MailerNotConfigured, send_thankyou_email

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/send-thankyou-email", response_model=SuccessResponse)
def send_thankyou(payload: ThankYouEmailRequest):
    if not payload.email:
        raise ApiError(400, "Email is required")
    if "@" not in payload.email:
        raise ApiError(400, "Invalid email")

    try:
        send_thankyou_email(payload.email, payload.name)
    except MailerNotConfigured:
        raise ApiError(503, "Email service not configured")
    except (smtplib.SMTPException, OSError) as e:
        logger.error("Thank-you email to %s failed: %s", payload.email, e)
        raise ApiError(500, "Failed to send email", str(e))
    return SuccessResponse()
