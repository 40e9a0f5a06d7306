"""
Product catalog
Static lookup of orderable products and their minimum order quantities
"""

import json
import os
from types import MappingProxyType
from typing import NamedTuple

from exceptions import ConfigurationError


class Product(NamedTuple):
    """A catalog entry"""
    key: str
    display_name: str
    minimum_quantity: float

    @property
    def minimum_label(self):
        """Minimum quantity as shown to customers: 1 rather than 1.0"""
        return format_quantity(self.minimum_quantity)


def format_quantity(value):
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


DEFAULT_PRODUCTS = {
    'fish_feed': {'displayName': 'Fish Feed', 'minimumQuantity': 10},
    'catfish': {'displayName': 'Catfish', 'minimumQuantity': 1},
    'materials': {'displayName': 'Materials', 'minimumQuantity': 50},
}


def build_catalog(products):
    """
    Build a read-only catalog from {key: {"displayName", "minimumQuantity"}}

    Raises:
        ConfigurationError: If an entry is missing a field or has a non-numeric minimum
    """
    if not isinstance(products, dict) or not products:
        raise ConfigurationError("Product catalog must be a non-empty object", 'PRODUCT_CATALOG_JSON')

    catalog = {}
    for key, entry in products.items():
        if not isinstance(entry, dict):
            raise ConfigurationError(f"Product '{key}' must be an object", 'PRODUCT_CATALOG_JSON')

        display_name = entry.get('displayName')
        minimum = entry.get('minimumQuantity')
        if not display_name or not isinstance(display_name, str):
            raise ConfigurationError(f"Product '{key}' requires a displayName", 'PRODUCT_CATALOG_JSON')
        if isinstance(minimum, bool) or not isinstance(minimum, (int, float)) or minimum <= 0:
            raise ConfigurationError(f"Product '{key}' requires a positive minimumQuantity", 'PRODUCT_CATALOG_JSON')

        catalog[key] = Product(key, display_name, minimum)

    return MappingProxyType(catalog)


def load_product_catalog(environ=None):
    """Catalog from PRODUCT_CATALOG_JSON when set, otherwise the built-in products"""
    environ = os.environ if environ is None else environ
    raw = environ.get('PRODUCT_CATALOG_JSON')
    if not raw:
        return build_catalog(DEFAULT_PRODUCTS)

    try:
        products = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"PRODUCT_CATALOG_JSON is not valid JSON: {e}", 'PRODUCT_CATALOG_JSON')
    return build_catalog(products)


PRODUCT_CATALOG = load_product_catalog()
