"""
Receipt Analyzer
Fetches receipt line items, groups them into Domestic and Imported products
and prints a cost report.
"""

from .aggregator import GroupSummary, format_amount, summarize_group, total_cost
from .classifier import ProductGroups, compare_products, partition_products, sort_products
from .errors import ConfigError, ErrorKind, Failure, ReceiptParseError, Result
from .fetcher import ReceiptFetcher
from .main import analyze_receipt, main, run
from .models import Product
from .parser import parse_products, parse_receipt_json
from .reporter import render_report

__all__ = [
    'GroupSummary',
    'format_amount',
    'summarize_group',
    'total_cost',
    'ProductGroups',
    'compare_products',
    'partition_products',
    'sort_products',
    'ConfigError',
    'ErrorKind',
    'Failure',
    'ReceiptParseError',
    'Result',
    'ReceiptFetcher',
    'analyze_receipt',
    'main',
    'run',
    'Product',
    'parse_products',
    'parse_receipt_json',
    'render_report',
]
