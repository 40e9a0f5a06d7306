"""
Order Management Module
Handles order intake business logic: validation, order numbering and notification
"""

import logging
import random
import time
from datetime import datetime, timezone

from validation_utils import OrderRequestValidator

logger = logging.getLogger(__name__)

ORDER_NUMBER_PREFIX = 'FP'
ORDER_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def generate_order_number(now_ms=None, suffix=None):
    """
    Order number from the epoch milliseconds and a random 0-999 suffix

    Not guaranteed unique: two orders in the same millisecond can collide.
    """
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    if suffix is None:
        suffix = random.randint(0, 999)
    return f"{ORDER_NUMBER_PREFIX}{now_ms}{suffix}"


def format_order_date(now=None):
    """UTC timestamp as YYYY-MM-DD HH:MM:SS"""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.strftime(ORDER_DATE_FORMAT)


def build_order_record(order_request, product, quantity, order_number, order_date):
    return {
        'orderNumber': order_number,
        'date': order_date,
        'name': order_request.get('name'),
        'phone': order_request.get('phone'),
        'address': order_request.get('address'),
        'product': product.display_name,
        'quantity': quantity,
        'notes': order_request.get('notes') or 'None'
    }


def success_message(order_number):
    return (
        f"Thank you! Your order #{order_number} has been placed successfully. "
        "We will contact you shortly."
    )


class OrderManager:
    """Manages the order intake workflow"""

    def __init__(self, catalog, notification_manager):
        self.catalog = catalog
        self.validator = OrderRequestValidator(catalog)
        self.notification_manager = notification_manager

    def place_order(self, order_request):
        """
        Complete order intake workflow

        Args:
            order_request (dict): Decoded request body

        Returns:
            dict: Response payload with the confirmation message and order record

        Raises:
            ValidationError: If the request breaks a business rule
        """
        product, quantity = self.validator.validate(order_request)

        order_number = generate_order_number()
        order_record = build_order_record(
            order_request,
            product,
            quantity,
            order_number=order_number,
            order_date=format_order_date()
        )
        logger.info(f"Order {order_number} accepted: product={product.key} quantity={quantity}")

        notified = self.notification_manager.notify_order_placed(order_record)
        if not notified:
            logger.info(f"Order {order_number} placed without notification")

        return {
            'message': success_message(order_number),
            'orderRecord': order_record
        }
