#!/usr/bin/env python3
"""
Text report for grouped receipt products
"""

import logging
from typing import Iterable, List

from .aggregator import GroupSummary, format_amount
from .classifier import ProductGroups
from .config import DEFAULT_TEXT, REPORT, WEIGHT_UNIT
from .models import Product

logger = logging.getLogger(__name__)


def format_weight(weight: str) -> str:
    """'N/A' stays as is, anything else gets the gram suffix: '100' -> '100g'"""
    if weight == DEFAULT_TEXT:
        return DEFAULT_TEXT
    return f"{weight}{WEIGHT_UNIT}"


def render_product(product: Product) -> List[str]:
    """Four lines describing one product"""
    return [
        f"{REPORT['item_prefix']}{product.name}",
        f"Price: {REPORT['currency']}{format_amount(product.price)}",
        product.description,
        f"Weight: {format_weight(product.weight)}",
    ]


def render_group(products: Iterable[Product]) -> List[str]:
    lines = []
    for product in products:
        lines.extend(render_product(product))
    return lines


def render_report(groups: ProductGroups,
                  domestic_summary: GroupSummary,
                  imported_summary: GroupSummary) -> List[str]:
    """
    Render the full receipt report

    Layout:
        . Domestic / its items, . Imported / its items,
        then both costs, then both counts

    Args:
        groups: Domestic and imported products, in display order
        domestic_summary: Totals for the domestic group
        imported_summary: Totals for the imported group

    Returns:
        Report lines, without trailing newlines
    """
    currency = REPORT['currency']
    lines = [REPORT['domestic_header']]
    lines.extend(render_group(groups.domestic))
    lines.append(REPORT['imported_header'])
    lines.extend(render_group(groups.imported))
    lines.append(f"Domestic cost: {currency}{format_amount(domestic_summary.total_cost)}")
    lines.append(f"Imported cost: {currency}{format_amount(imported_summary.total_cost)}")
    lines.append(f"Domestic count: {domestic_summary.count}")
    lines.append(f"Imported count: {imported_summary.count}")

    logger.debug(f"Rendered report with {len(lines)} lines")
    return lines
