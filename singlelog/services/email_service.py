"""Email sending service."""

from ..pipeline import LoggerInterface


class EmailService:
    """Sends emails, logging through an injected logger."""

    def __init__(self, logger: LoggerInterface):
        self.logger = logger

    def send_email(self, to: str) -> None:
        self.logger.log(f"Sending email to: {to}")
        self.logger.log(f"Email sent to: {to}")
