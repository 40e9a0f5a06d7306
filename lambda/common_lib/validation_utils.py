"""
Validation utilities for order intake
Centralizes the order request business rules
"""

import functools
import logging
import math
import re

from exceptions import ValidationError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "All required fields must be filled"
INVALID_PRODUCT_MESSAGE = "Invalid product selected"

# Leading decimal literal, the same prefix a browser's parseFloat accepts
_LEADING_NUMBER = re.compile(r'^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)')


def parse_quantity(value):
    """
    Parse a quantity that may arrive as a number or as text

    Text is read up to the first character that cannot continue a decimal
    number, so "12kg" is 12. Anything without a leading number, including the
    empty string, None and booleans, is NaN. Integers too large for a float
    become infinity.

    Returns:
        float: Parsed quantity or NaN
    """
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if not isinstance(value, str):
        return math.nan

    match = _LEADING_NUMBER.match(value)
    if not match:
        return math.nan
    return float(match.group(1))


class OrderRequestValidator:
    """Business rules for an incoming order, checked in order, first failure wins"""

    REQUIRED_FIELDS = ('name', 'address', 'phone', 'product')

    def __init__(self, catalog):
        self.catalog = catalog

    def validate(self, order_request):
        """
        Run every rule against the request body

        Args:
            order_request (dict): Decoded request body

        Returns:
            tuple: (Product, float) resolved product and parsed quantity

        Raises:
            ValidationError: On the first rule the request breaks
        """
        self.validate_required_fields(order_request)
        product = self.validate_product(order_request.get('product'))
        quantity = self.validate_quantity(product, order_request.get('quantity'))
        return product, quantity

    def validate_required_fields(self, order_request):
        for field in self.REQUIRED_FIELDS:
            if not order_request.get(field):
                raise ValidationError(REQUIRED_FIELDS_MESSAGE, field)

    def validate_product(self, product_key):
        if not isinstance(product_key, str) or product_key not in self.catalog:
            raise ValidationError(INVALID_PRODUCT_MESSAGE, 'product')
        return self.catalog[product_key]

    def validate_quantity(self, product, raw_quantity):
        quantity = parse_quantity(raw_quantity)
        # NaN compares False against everything, so it is checked explicitly
        if math.isnan(quantity) or math.isinf(quantity) or quantity < product.minimum_quantity:
            raise ValidationError(
                f"Quantity does not meet minimum requirement for {product.display_name} "
                f"(Min: {product.minimum_label}kg)",
                'quantity'
            )
        return quantity


def handle_validation_error(func):
    """
    Decorator to convert ValidationError exceptions into 400 responses
    """
    import response_utils as resp

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ValidationError as e:
            logger.info(f"Validation failed in {func.__name__}: field={e.field} message={e.message}")
            return resp.error_response(e.message, e.status_code)

    return wrapper
