import re
import smtplib
from typing import Any, Mapping

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from portfolio.errors import ExternalServiceUnavailable, InvalidInput
from portfolio.extensions import db
from portfolio.models import ContactInfoItem
from portfolio.utils.mailer import get_mailer
from portfolio.utils.request_data import require_fields

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def contact_recipient():
    """The first email contact item by order, else ``ADMIN_EMAIL``."""
    fallback = current_app.config.get("ADMIN_EMAIL")
    try:
        item = (
            ContactInfoItem.query.filter_by(type="email")
            .order_by(ContactInfoItem.order.asc())
            .first()
        )
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Failed to look up contact email, using fallback: {e}")
        return fallback

    if item is not None and item.value:
        return item.value
    return fallback


def send_contact_message(data: Mapping[str, Any]) -> str:
    """Validates a contact form submission and mails it. Returns the recipient."""
    mailer = get_mailer()
    if mailer is None:
        raise ExternalServiceUnavailable("Email service is not configured.")

    require_fields(data, ("email", "subject", "message"))
    email, subject, message = data["email"], data["subject"], data["message"]
    if not all(isinstance(v, str) for v in (email, subject, message)):
        raise InvalidInput("email, subject and message must be strings")
    if not EMAIL_PATTERN.match(email.strip()):
        raise InvalidInput("Invalid email address.")

    recipient = contact_recipient()
    if not recipient:
        raise ExternalServiceUnavailable("No recipient email address is configured.")

    body = f"From: {email.strip()}\n\n{message}"
    try:
        mailer.send(
            recipient,
            f"Portfolio contact: {subject.strip()}",
            body,
            reply_to=email.strip(),
        )
    except (smtplib.SMTPException, OSError) as e:
        current_app.logger.error(f"Contact form delivery failed: {e}")
        raise ExternalServiceUnavailable("Failed to send message.", error=str(e)) from e

    return recipient
