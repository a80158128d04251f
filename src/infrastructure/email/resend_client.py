import resend
from typing import Optional

from src.config.settings import settings
from src.core.errors import NotifyError
from src.infrastructure.email.templates import render_welcome
from src.utils.metrics import WELCOME_EMAIL_COUNT

from src.utils.logger import get_logger
logger = get_logger(__name__)

class ResendNotifier:
    def __init__(self, api_key: Optional[str] = None, sender: Optional[str] = None):
        self.api_key = api_key if api_key is not None else settings.RESEND_API_KEY
        self.sender = sender or settings.RESEND_FROM_EMAIL
        if self.api_key:
            resend.api_key = self.api_key

    def send_welcome(self, email: str) -> None:
        """Send the welcome email to a newly registered address"""
        if not self.api_key:
            WELCOME_EMAIL_COUNT.labels(status='failed').inc()
            raise NotifyError("Resend API key is not configured")

        content = render_welcome(email)
        try:
            response = resend.Emails.send({
                "from": self.sender,
                "to": [email],
                "subject": content["subject"],
                "html": content["html"],
                "text": content["text"],
            })
        except Exception as e:
            WELCOME_EMAIL_COUNT.labels(status='failed').inc()
            raise NotifyError(f"Failed to send welcome email: {str(e)}") from e

        WELCOME_EMAIL_COUNT.labels(status='sent').inc()
        logger.info(f"Welcome email sent: {response.get('id') if isinstance(response, dict) else response}")
