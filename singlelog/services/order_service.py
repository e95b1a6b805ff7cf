"""Order processing service."""

from ..pipeline import LoggerInterface


class OrderService:
    """Processes orders, logging through an injected logger."""

    def __init__(self, logger: LoggerInterface):
        self.logger = logger

    def process_order(self, order_id: str) -> None:
        self.logger.log(f"Processing order: {order_id}")
        self.logger.log(f"Order {order_id} processed successfully")
