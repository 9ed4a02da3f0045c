#!/usr/bin/env python3
"""
Receipt line item model
"""

from dataclasses import dataclass, field
from decimal import Decimal

from .config import DEFAULT_TEXT, NAME_MAX_LENGTH


def truncate_name(name: str, max_length: int = NAME_MAX_LENGTH) -> str:
    """Cut a product name to at most max_length characters"""
    return name[:max_length]


@dataclass(frozen=True)
class Product:
    """
    One receipt line item.

    The name is truncated when the Product is created; the original
    text is not kept anywhere.
    """
    name: str = DEFAULT_TEXT
    price: Decimal = field(default_factory=lambda: Decimal('0'))
    is_domestic: bool = False
    description: str = DEFAULT_TEXT
    weight: str = DEFAULT_TEXT

    def __post_init__(self):
        object.__setattr__(self, 'name', truncate_name(self.name))
