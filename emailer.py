import logging
import smtplib
import ssl
from email.message import EmailMessage
from email.utils import formatdate, make_msgid

from config import Settings
from digest import render_digest
from models import JobRecord, NotifyResult

logger = logging.getLogger(__name__)


class EmailSendError(RuntimeError):
    """Raised when the digest cannot be delivered."""


def build_message(settings: Settings, subject: str, html_body: str, text_body: str) -> EmailMessage:
    msg = EmailMessage()
    msg["From"] = settings.email_user
    msg["To"] = settings.email_to
    msg["Subject"] = subject
    msg["Date"] = formatdate(localtime=True)
    msg["Message-ID"] = make_msgid()

    msg.set_content(text_body)
    msg.add_alternative(html_body, subtype="html", charset="utf-8")
    return msg


def send_email(settings: Settings, subject: str, html_body: str, text_body: str) -> None:
    """Send one message over SMTP with verified STARTTLS + login. Raises EmailSendError on any failure."""
    msg = build_message(settings, subject, html_body, text_body)
    context = ssl.create_default_context()
    try:
        with smtplib.SMTP(settings.smtp_host, settings.smtp_port) as server:
            server.ehlo()
            server.starttls(context=context)
            server.ehlo()
            server.login(settings.email_user, settings.email_pass)
            server.send_message(msg)
    except (smtplib.SMTPException, OSError, ValueError) as e:
        raise EmailSendError(f"SMTP send failed: {e}") from e


def notify_new_jobs(jobs: list[JobRecord], settings: Settings) -> NotifyResult:
    """Email a digest of `jobs`. Delivery problems are logged and reported, never raised."""
    subject, html_body, text_body = render_digest(jobs)
    try:
        send_email(settings, subject, html_body, text_body)
    except EmailSendError as e:
        logger.error(f"Error sending email: {e}")
        return NotifyResult(sent=False, error=str(e))

    logger.info(f"Email sent for {len(jobs)} new job(s)")
    return NotifyResult(sent=True)
