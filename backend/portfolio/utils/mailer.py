import smtplib
from dataclasses import dataclass, field
from email.message import EmailMessage
from typing import List, Optional, Protocol

from flask import current_app


@dataclass(frozen=True)
class OutgoingMail:
    to: str
    subject: str
    body: str
    reply_to: Optional[str] = None


class Mailer(Protocol):
    def send(self, to: str, subject: str, body: str, reply_to: Optional[str] = None) -> None:
        """Delivers one message; raises on delivery failure."""
        ...


@dataclass
class OutboxMailer:
    """Records messages instead of sending them (development and tests)."""

    outbox: List[OutgoingMail] = field(default_factory=list)

    def send(self, to: str, subject: str, body: str, reply_to: Optional[str] = None) -> None:
        current_app.logger.info(f"Outbox mail to {to}: {subject}")
        self.outbox.append(OutgoingMail(to=to, subject=subject, body=body, reply_to=reply_to))


@dataclass
class SmtpMailer:
    host: str
    port: int
    sender: str
    username: Optional[str] = None
    password: Optional[str] = None
    use_tls: bool = True
    timeout: float = 10.0

    def send(self, to: str, subject: str, body: str, reply_to: Optional[str] = None) -> None:
        message = EmailMessage()
        message["From"] = self.sender
        message["To"] = to
        message["Subject"] = subject
        if reply_to:
            message["Reply-To"] = reply_to
        message.set_content(body)

        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
            if self.use_tls:
                smtp.starttls()
            if self.username:
                smtp.login(self.username, self.password or "")
            smtp.send_message(message)


def build_mailer(config) -> Optional[Mailer]:
    backend = config.get("MAIL_BACKEND")
    if not backend:
        return None

    if backend == "outbox":
        return OutboxMailer()

    if backend == "smtp":
        return SmtpMailer(
            host=config["SMTP_HOST"],
            port=config["SMTP_PORT"],
            sender=config["MAIL_FROM"],
            username=config.get("SMTP_USERNAME"),
            password=config.get("SMTP_PASSWORD"),
            use_tls=config.get("SMTP_USE_TLS", True),
        )

    raise ValueError(f"Unknown MAIL_BACKEND: {backend}")


def get_mailer() -> Optional[Mailer]:
    return current_app.extensions.get("mailer")
