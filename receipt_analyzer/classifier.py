#!/usr/bin/env python3
"""
Sorting and Domestic/Imported grouping of receipt products
"""

import logging
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Iterable, List, Tuple

from .models import Product

logger = logging.getLogger(__name__)


def compare_products(a: Product, b: Product) -> int:
    """
    Order two products by their (already truncated) names.

    Names compare by code point, so uppercase sorts before lowercase.

    Returns:
        -1, 0 or 1
    """
    if a.name < b.name:
        return -1
    if a.name > b.name:
        return 1
    return 0


def sort_products(products: Iterable[Product]) -> List[Product]:
    """Sort products ascending by name; equal names keep their input order"""
    return sorted(products, key=cmp_to_key(compare_products))


@dataclass(frozen=True)
class ProductGroups:
    domestic: Tuple[Product, ...]
    imported: Tuple[Product, ...]


def partition_products(products: Iterable[Product]) -> ProductGroups:
    """
    Split products into domestic and imported groups in a single pass.

    Relative order inside each group is the order of the input.

    Args:
        products: Products, normally already sorted by name

    Returns:
        ProductGroups with the domestic and imported products
    """
    domestic: List[Product] = []
    imported: List[Product] = []
    for product in products:
        if product.is_domestic:
            domestic.append(product)
        else:
            imported.append(product)

    logger.debug(f"Partitioned products: {len(domestic)} domestic, {len(imported)} imported")
    return ProductGroups(domestic=tuple(domestic), imported=tuple(imported))
