#!/usr/bin/env python3
"""
Receipt JSON Parser
Converts the raw receipt JSON (an array of line item objects) into Product
records sorted by name.

Field rules:
- name, description, weight: text; numbers and booleans are accepted and
  rendered as text, missing fields become "N/A"
- price: JSON number or numeric string, decoded as Decimal; missing -> 0
- domestic: only true (or the string "true") counts as domestic

A field of the wrong shape fails the whole receipt, not just the record.
"""

import json
import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Tuple

from .classifier import sort_products
from .config import DEFAULT_TEXT, PRICE_EXPONENT_LIMIT
from .errors import ErrorKind, ReceiptParseError, Result
from .models import Product

logger = logging.getLogger(__name__)

TEXT_FIELDS = ('name', 'description', 'weight')


class JsonNumber(Decimal):
    """Decimal that keeps the literal it was decoded from, e.g. '1e2'"""

    def __new__(cls, text: str):
        number = super().__new__(cls, text)
        number.text = text
        return number


def _reject_constant(token: str) -> Any:
    raise ReceiptParseError(f"Non-finite number not allowed: {token}")


def load_receipt_items(text: str) -> List[Any]:
    """
    Decode receipt JSON, keeping every number as an exact JsonNumber

    Raises:
        ReceiptParseError: if the text is not JSON or not a JSON array
    """
    try:
        data = json.loads(
            text,
            parse_float=JsonNumber,
            parse_int=JsonNumber,
            parse_constant=_reject_constant,
        )
    except json.JSONDecodeError as e:
        raise ReceiptParseError(f"Invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise ReceiptParseError(f"Expected a JSON array, got {type(data).__name__}")
    return data


def _as_text(item: Dict[str, Any], field: str) -> str:
    if field not in item:
        return DEFAULT_TEXT
    value = item[field]
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, JsonNumber):
        return value.text
    if isinstance(value, (str, Decimal, int, float)):
        return str(value)
    raise ReceiptParseError(f"Field '{field}' must be text, got {_json_type(value)}")


def _as_price(item: Dict[str, Any]) -> Decimal:
    if 'price' not in item:
        return Decimal('0')
    value = item['price']
    if isinstance(value, bool):
        raise ReceiptParseError(f"Field 'price' must be a number, got {_json_type(value)}")
    if isinstance(value, Decimal):
        price = Decimal(value)
    elif isinstance(value, (int, float)):
        price = Decimal(str(value))
    elif isinstance(value, str):
        try:
            price = Decimal(value)
        except InvalidOperation as e:
            raise ReceiptParseError(f"Field 'price' is not numeric: {value!r}") from e
    else:
        raise ReceiptParseError(f"Field 'price' must be a number, got {_json_type(value)}")

    if not price.is_finite():
        raise ReceiptParseError(f"Field 'price' must be finite, got {value!r}")
    if max(abs(price.adjusted()), abs(price.as_tuple().exponent)) > PRICE_EXPONENT_LIMIT:
        raise ReceiptParseError(f"Field 'price' exponent out of range: {value!r}")
    return price


def _as_domestic(item: Dict[str, Any]) -> bool:
    value = item.get('domestic', False)
    if isinstance(value, str):
        return value.lower() == 'true'
    return value is True


def _json_type(value: Any) -> str:
    if value is None:
        return 'null'
    if isinstance(value, dict):
        return 'object'
    if isinstance(value, list):
        return 'array'
    return type(value).__name__


def product_from_item(item: Any) -> Product:
    """
    Build a Product from one decoded receipt line item

    Args:
        item: Decoded JSON value for one array element

    Returns:
        Product with defaults applied to missing fields

    Raises:
        ReceiptParseError: if the item is not an object or a field has the wrong shape
    """
    if not isinstance(item, dict):
        raise ReceiptParseError(f"Receipt item must be an object, got {_json_type(item)}")

    name, description, weight = (_as_text(item, field) for field in TEXT_FIELDS)
    return Product(
        name=name,
        price=_as_price(item),
        is_domestic=_as_domestic(item),
        description=description,
        weight=weight,
    )


def parse_products(text: str) -> Tuple[Product, ...]:
    """
    Parse receipt JSON into products sorted by name

    Raises:
        ReceiptParseError: on the first malformed item; nothing is returned
    """
    items = load_receipt_items(text)
    products = []
    for index, item in enumerate(items):
        try:
            products.append(product_from_item(item))
        except ReceiptParseError as e:
            raise ReceiptParseError(f"Item {index}: {e}") from e
    return tuple(sort_products(products))


def parse_receipt_json(text: str) -> Result[Tuple[Product, ...]]:
    """
    Parse receipt JSON, reporting failure as a Result instead of raising

    An empty array parses successfully into an empty tuple; deciding what
    an empty receipt means is left to the caller.
    """
    try:
        products = parse_products(text)
    except ReceiptParseError as e:
        logger.error(f"Could not parse receipt: {e}")
        return Result.failure(ErrorKind.PARSE, str(e))

    logger.info(f"Parsed {len(products)} receipt items")
    return Result.success(products)
