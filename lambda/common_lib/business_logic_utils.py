"""
Business logic utilities for the order intake function
This module provides access to the business logic managers
"""

import functools
import logging

from order_manager import OrderManager
from notification_manager import NotificationManager, get_notification_manager
from product_catalog import PRODUCT_CATALOG

logger = logging.getLogger(__name__)


def handle_business_logic_error(func):
    """Decorator turning any unexpected exception into the generic 500 response"""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            logger.exception(f"Unexpected error in {func.__name__}: {type(e).__name__}")
            import response_utils as resp
            return resp.internal_error_response()
    return wrapper


def get_order_manager(catalog=None, notification_manager=None):
    """Factory function to get OrderManager instance"""
    return OrderManager(
        catalog if catalog is not None else PRODUCT_CATALOG,
        notification_manager if notification_manager is not None else get_notification_manager()
    )


__all__ = [
    'OrderManager',
    'NotificationManager',
    'get_order_manager',
    'get_notification_manager',
    'handle_business_logic_error'
]
