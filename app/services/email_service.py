import asyncio
import smtplib
import ssl
from dataclasses import dataclass
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr
from typing import Iterable, Optional
from app.core.config import Settings
from app.core.logger import logger


@dataclass
class EmailMessage:
    to_email: str
    subject: str
    html: str
    to_name: Optional[str] = None


class Mailer:
    """
    Sends HTML mail over a fresh SMTP connection per message.

    smtplib blocks, so each send runs in a worker thread. Nothing is retried and
    no send state is kept: failures propagate to the caller.
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    def _build(self, message: EmailMessage) -> MIMEMultipart:
        mime = MIMEMultipart("alternative")
        mime["From"] = formataddr((self.settings.MAIL_SENDER_NAME, self.settings.MAIL_SENDER_ADDRESS))
        mime["To"] = formataddr((message.to_name, message.to_email)) if message.to_name else message.to_email
        mime["Subject"] = message.subject
        mime.attach(MIMEText(message.html, "html"))
        return mime

    def _connect(self) -> smtplib.SMTP:
        s = self.settings
        if s.SMTP_USE_SSL:
            return smtplib.SMTP_SSL(s.SMTP_HOST, s.SMTP_PORT, timeout=s.SMTP_TIMEOUT)
        return smtplib.SMTP(s.SMTP_HOST, s.SMTP_PORT, timeout=s.SMTP_TIMEOUT)

    def _send_sync(self, message: EmailMessage) -> None:
        mime = self._build(message)
        with self._connect() as server:
            if self.settings.SMTP_STARTTLS and not self.settings.SMTP_USE_SSL:
                server.starttls(context=ssl.create_default_context())
            if self.settings.SMTP_USER:
                server.login(self.settings.SMTP_USER, self.settings.SMTP_PASSWORD)
            server.sendmail(self.settings.MAIL_SENDER_ADDRESS, [message.to_email], mime.as_string())

    async def send(self, message: EmailMessage) -> None:
        await asyncio.to_thread(self._send_sync, message)
        logger.info(f"[Email] '{message.subject}' sent to {message.to_email}")

    async def send_many(self, messages: Iterable[EmailMessage]) -> None:
        """Concurrent fan-out; the first failure propagates, other sends are not rolled back."""
        await asyncio.gather(*(self.send(message) for message in messages))
