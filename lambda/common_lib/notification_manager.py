"""
Notification Management Module
Best-effort order notifications; delivery problems never reach the caller
"""

import logging

import email_utils

logger = logging.getLogger(__name__)


class NotificationManager:
    """Sends order notifications when mail is configured"""

    def __init__(self, settings=None, ses_client=None):
        self.settings = settings if settings is not None else email_utils.EmailSettings.from_environ()
        self.ses_client = ses_client

    @property
    def enabled(self):
        return self.settings.enabled

    def notify_order_placed(self, order_record):
        """
        Attempt to email the order summary

        Any failure, including timeouts and template errors, is logged and
        swallowed so that the order outcome does not depend on mail delivery.

        Args:
            order_record (dict): Order record to summarize

        Returns:
            bool: True if the email was sent, False if disabled or failed
        """
        if not self.enabled:
            logger.info(f"Email not configured, skipping notification for order {order_record.get('orderNumber')}")
            return False

        try:
            email_utils.send_order_notification_email(self.settings, order_record, self.ses_client)
            return True
        except Exception:
            logger.exception(f"Email error for order {order_record.get('orderNumber')}")
            return False


def get_notification_manager():
    """Factory function to get NotificationManager instance"""
    return NotificationManager()
