import html
import logging
import os
import re

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from exceptions import NotificationError
from product_catalog import format_quantity

logger = logging.getLogger(__name__)

DEFAULT_REGION = 'us-east-1'
DEFAULT_TIMEOUT_SECONDS = 5


class EmailTemplate:
    """Email template constants"""

    ORDER_RECEIVED = "New Fish Parque Order - {order_number}"


class EmailSettings:
    """
    Mail configuration read from the function environment

    EMAIL_USER and EMAIL_PASS together switch notification on. EMAIL_PASS signs
    SES calls only when EMAIL_ACCESS_KEY_ID is also set; otherwise the function
    execution role signs them.
    """

    def __init__(self, sender=None, secret=None, recipient=None, access_key_id=None,
                 region=DEFAULT_REGION, timeout=DEFAULT_TIMEOUT_SECONDS):
        self.sender = sender
        self.secret = secret
        self.recipient = recipient
        self.access_key_id = access_key_id
        self.region = region
        self.timeout = timeout

    @classmethod
    def from_environ(cls, environ=None):
        environ = os.environ if environ is None else environ

        timeout = DEFAULT_TIMEOUT_SECONDS
        raw_timeout = environ.get('EMAIL_TIMEOUT_SECONDS')
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                logger.warning(f"Ignoring invalid EMAIL_TIMEOUT_SECONDS: {raw_timeout!r}")

        return cls(
            sender=environ.get('EMAIL_USER'),
            secret=environ.get('EMAIL_PASS'),
            recipient=environ.get('EMAIL_TO'),
            access_key_id=environ.get('EMAIL_ACCESS_KEY_ID'),
            region=environ.get('EMAIL_REGION') or DEFAULT_REGION,
            timeout=timeout
        )

    @property
    def enabled(self):
        """Notification needs both the sender identity and its secret"""
        return bool(self.sender and self.secret)

    @property
    def to_address(self):
        return self.recipient or self.sender


def get_ses_client(settings):
    """SES client bounded by the configured timeout, one retry at most"""
    config = Config(
        connect_timeout=settings.timeout,
        read_timeout=settings.timeout,
        retries={'max_attempts': 1}
    )
    credentials = {}
    if not settings.access_key_id:
        logger.info("EMAIL_ACCESS_KEY_ID not set, SES calls are signed by the execution role")
    else:
        credentials = {
            'aws_access_key_id': settings.access_key_id,
            'aws_secret_access_key': settings.secret
        }
    return boto3.client('ses', region_name=settings.region, config=config, **credentials)


def send_email(ses_client, source, to_email, subject, html_body, text_body=None):
    """
    Send an email through SES

    Args:
        ses_client: boto3 SES client
        source (str): Verified sender address
        to_email (str): Recipient email address
        subject (str): Email subject
        html_body (str): HTML email body
        text_body (str): Plain text email body (optional)

    Returns:
        str: SES message id

    Raises:
        NotificationError: If SES rejects the message or cannot be reached
    """
    # If no text body provided, strip HTML tags for basic text version
    if not text_body:
        text_body = re.sub('<[^<]+?>', '', html_body)

    message = {
        'Subject': {'Data': subject, 'Charset': 'UTF-8'},
        'Body': {
            'Html': {'Data': html_body, 'Charset': 'UTF-8'},
            'Text': {'Data': text_body, 'Charset': 'UTF-8'}
        }
    }

    try:
        response = ses_client.send_email(
            Source=source,
            Destination={'ToAddresses': [to_email]},
            Message=message
        )
    except ClientError as e:
        error_code = e.response['Error']['Code']
        error_message = e.response['Error']['Message']
        raise NotificationError(f"SES rejected email: {error_code} - {error_message}") from e
    except BotoCoreError as e:
        raise NotificationError(f"SES unavailable: {e}") from e

    return response['MessageId']


def format_order_email(order_record):
    """
    Render the order notification

    Args:
        order_record (dict): Order record from OrderManager.build_order_record

    Returns:
        tuple: (subject, html_body)
    """
    fields = {key: html.escape(str(value)) for key, value in order_record.items()}
    quantity = html.escape(format_quantity(order_record['quantity']))

    subject = EmailTemplate.ORDER_RECEIVED.format(order_number=order_record['orderNumber'])
    html_body = f"""
    <h2>New Order Received</h2>
    <p><strong>Order Number:</strong> {fields['orderNumber']}</p>
    <p><strong>Date:</strong> {fields['date']}</p>
    <hr>
    <h3>Customer Information</h3>
    <p><strong>Name:</strong> {fields['name']}</p>
    <p><strong>Phone:</strong> {fields['phone']}</p>
    <p><strong>Address:</strong> {fields['address']}</p>
    <hr>
    <h3>Order Details</h3>
    <p><strong>Product:</strong> {fields['product']}</p>
    <p><strong>Quantity:</strong> {quantity}kg</p>
    <p><strong>Notes:</strong> {fields['notes']}</p>
    """
    return subject, html_body


def send_order_notification_email(settings, order_record, ses_client=None):
    """
    Email an order summary to the configured recipient

    Returns:
        str: SES message id
    """
    subject, html_body = format_order_email(order_record)
    client = ses_client or get_ses_client(settings)
    message_id = send_email(client, settings.sender, settings.to_address, subject, html_body)
    logger.info(f"Order notification {order_record['orderNumber']} sent. MessageId: {message_id}")
    return message_id
