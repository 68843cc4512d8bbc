"""SMTP email client.

Sends a single multipart (text + HTML) message per call. There are no
retries: callers that need best-effort semantics catch and log failures.
"""

import logging
import smtplib
from contextlib import contextmanager
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import List, Optional

logger = logging.getLogger(__name__)


class EmailClient:
    """Thin smtplib wrapper configured from settings."""

    def __init__(
        self,
        smtp_host: str,
        smtp_port: int,
        username: Optional[str] = None,
        password: Optional[str] = None,
        use_tls: bool = True,
        timeout: int = 10,
    ):
        self.smtp_host = smtp_host
        self.smtp_port = smtp_port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings) -> Optional["EmailClient"]:
        """Build a client, or None when SMTP_HOST is not configured."""
        if not settings.SMTP_HOST:
            return None
        return cls(
            smtp_host=settings.SMTP_HOST,
            smtp_port=settings.SMTP_PORT,
            username=settings.SMTP_USERNAME,
            password=settings.SMTP_PASSWORD,
            use_tls=settings.SMTP_USE_TLS,
            timeout=settings.SMTP_TIMEOUT_SECONDS,
        )

    @contextmanager
    def _connection(self):
        server = smtplib.SMTP(self.smtp_host, self.smtp_port, timeout=self.timeout)
        try:
            if self.use_tls:
                server.starttls()
            if self.username and self.password:
                server.login(self.username, self.password)
            yield server
        finally:
            try:
                server.quit()
            except smtplib.SMTPException as e:
                logger.warning(f"Error closing SMTP connection: {e}")

    @staticmethod
    def build_message(
        sender: str,
        recipients: List[str],
        subject: str,
        text_body: str,
        html_body: Optional[str] = None,
        reply_to: Optional[str] = None,
    ) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["From"] = sender
        msg["To"] = ", ".join(recipients)
        msg["Subject"] = subject
        if reply_to:
            msg["Reply-To"] = reply_to

        msg.attach(MIMEText(text_body or "", "plain", "utf-8"))
        if html_body:
            msg.attach(MIMEText(html_body, "html", "utf-8"))
        return msg

    def send(
        self,
        sender: str,
        recipients: List[str],
        subject: str,
        text_body: str,
        html_body: Optional[str] = None,
        reply_to: Optional[str] = None,
    ) -> None:
        """Send one message.

        Raises:
            smtplib.SMTPException / OSError: On connection or delivery failure
        """
        msg = self.build_message(sender, recipients, subject, text_body, html_body, reply_to)
        with self._connection() as server:
            server.sendmail(sender, recipients, msg.as_string())
        logger.info(f"Email sent to {', '.join(recipients)}: {subject}")
