"""
Outbound e-mail notifications.

Notifications are best effort.  ``send_email`` reports success as a
boolean and never raises: missing credentials turn it into a logged
no-op and SMTP failures are logged with their detail.  Callers that
schedule a notification after responding (see the contact endpoint)
therefore cannot be affected by its outcome.
"""

import html
import logging
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr, formatdate, make_msgid
from typing import Any, Dict

import aiosmtplib

from site_admin_api.app.core.config import Settings

logger = logging.getLogger(__name__)


class EmailNotifier:
    """Send HTML e-mails through the configured SMTP account."""

    def __init__(self, settings: Settings) -> None:
        self.user = settings.email_user
        self.password = settings.email_password
        self.from_name = settings.email_from_name
        self.recipient = settings.notification_recipient
        self.host = settings.smtp_host
        self.port = settings.smtp_port
        self.timeout = settings.http_timeout

    @property
    def configured(self) -> bool:
        return bool(self.user and self.password)

    async def send_email(self, to: str, subject: str, body_html: str) -> bool:
        if not self.configured:
            logger.warning("Email credentials not configured")
            return False
        if not to:
            logger.warning("No recipient for email %r", subject)
            return False

        msg = MIMEMultipart("alternative")
        msg["From"] = formataddr((self.from_name, self.user))
        msg["To"] = to
        msg["Subject"] = subject
        msg["Date"] = formatdate(localtime=True)
        msg["Message-ID"] = make_msgid()
        msg.attach(MIMEText(body_html, "html", "utf-8"))

        try:
            await aiosmtplib.send(
                msg,
                hostname=self.host,
                port=self.port,
                username=self.user,
                password=self.password,
                use_tls=self.port == 465,
                start_tls=self.port == 587,
                timeout=self.timeout,
            )
        except (aiosmtplib.SMTPException, OSError) as exc:
            logger.error("Email sending error: %s", exc)
            return False
        logger.info("Email %r sent to %s", subject, to)
        return True

    async def send_contact_notification(self, contact: Dict[str, Any]) -> bool:
        """Tell the site owner about a new contact form submission."""
        fields = {key: html.escape(str(contact.get(key, ""))) for key in ("name", "email", "subject", "message")}
        body_html = (
            "<h2>New Contact Form Submission</h2>"
            f"<p><strong>Name:</strong> {fields['name']}</p>"
            f"<p><strong>Email:</strong> {fields['email']}</p>"
            f"<p><strong>Subject:</strong> {fields['subject']}</p>"
            "<p><strong>Message:</strong></p>"
            f"<p>{fields['message']}</p>"
        )
        return await self.send_email(
            self.recipient,
            f"New Contact: {contact.get('subject', '')}",
            body_html,
        )
