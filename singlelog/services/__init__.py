"""Business services that receive the logger by dependency injection."""

from .order_service import OrderService
from .email_service import EmailService

__all__ = ["OrderService", "EmailService"]
