#!/usr/bin/env python3
"""
Per-group totals and monetary display formatting

Amounts are Decimal end to end. The text form is str(Decimal), which keeps
the scale written in the receipt JSON ("10.00" stays "10.00", "10" stays
"10"); a sum carries the largest scale of its terms and an empty group
totals "0". The decimal point is then swapped for a comma.
"""

from dataclasses import dataclass
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Decimal, localcontext
from typing import Iterable

from .config import REPORT
from .models import Product


@dataclass(frozen=True)
class GroupSummary:
    total_cost: Decimal
    count: int


def total_cost(products: Iterable[Product]) -> Decimal:
    """Exact sum of product prices, starting from zero"""
    total = Decimal('0')
    # Unbounded precision and exponent range so sums never round or overflow
    with localcontext() as ctx:
        ctx.prec = MAX_PREC
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        for product in products:
            total += product.price
    return total


def summarize_group(products) -> GroupSummary:
    """Total cost and item count for one group"""
    products = list(products)
    return GroupSummary(total_cost=total_cost(products), count=len(products))


def format_amount(value: Decimal) -> str:
    """Render a decimal with ',' instead of '.': Decimal('12.50') -> '12,50'"""
    return str(value).replace('.', REPORT['decimal_separator'])
