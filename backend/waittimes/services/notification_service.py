"""Reviewer notification — best-effort email to the moderation inbox."""
import logging
import smtplib
from email.message import EmailMessage

from waittimes.config import settings
from waittimes.exceptions import NotificationError

logger = logging.getLogger(__name__)


def build_review_email(hospital_name: str, new_wait_time) -> EmailMessage:
    msg = EmailMessage()
    msg["From"] = settings.EMAIL_USER
    msg["To"] = settings.REVIEWER_EMAIL
    msg["Subject"] = f"Wait Time Update Request: {hospital_name}"
    msg.set_content(
        f"A user has submitted a new wait time for {hospital_name}:\n\n"
        f"{new_wait_time}\n\n"
        "Please review and verify."
    )
    return msg


def notify_reviewer(hospital_name: str, new_wait_time) -> None:
    """Email the reviewer about a new wait time. Raises NotificationError on failure.

    Never touches the submission store, so a delivery failure cannot undo
    the state change it accompanies.
    """
    if not settings.REVIEWER_EMAIL:
        raise NotificationError("No reviewer email configured")

    try:
        msg = build_review_email(hospital_name, new_wait_time)
    except ValueError as exc:
        # email.headerregistry rejects CR/LF in header values.
        logger.error("Reviewer email for %r could not be built: %s", hospital_name, exc)
        raise NotificationError("Failed to send email") from exc

    try:
        with smtplib.SMTP(settings.SMTP_HOST, settings.SMTP_PORT, timeout=10) as smtp:
            if settings.SMTP_USE_TLS:
                smtp.starttls()
            if settings.EMAIL_USER and settings.EMAIL_PASS:
                smtp.login(settings.EMAIL_USER, settings.EMAIL_PASS)
            smtp.send_message(msg)
    except (smtplib.SMTPException, OSError) as exc:
        logger.error("Reviewer email for '%s' failed: %s", hospital_name, exc)
        raise NotificationError("Failed to send email") from exc
    logger.info("Reviewer notified of new wait time for '%s'", hospital_name)
