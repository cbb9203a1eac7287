"""Celery tasks for outbound email."""

import logging

from src.celery_app import app as celery_app
from src.services.email_service import EmailService

logger = logging.getLogger(__name__)


@celery_app.task
def send_verification_email(to_email: str, token: str) -> dict:
    """Deliver the account verification email.

    Delivery failures are logged and reported in the result, never raised.

    Returns:
        dict with the delivery outcome
    """
    sent = EmailService().send_verification(to_email, token)
    if not sent:
        logger.error(f"Verification email for {to_email} was not delivered")
    return {"email": to_email, "sent": sent}
