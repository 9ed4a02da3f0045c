#!/usr/bin/env python3
"""
Unit tests for product sorting and Domestic/Imported grouping
"""
from decimal import Decimal

from receipt_analyzer.classifier import compare_products, partition_products, sort_products
from receipt_analyzer.models import Product


def _product(name, domestic=False, price='1.00'):
    return Product(name=name, price=Decimal(price), is_domestic=domestic)


class TestCompareProducts:
    """Comparator works on truncated names only"""

    def test_ordering(self):
        assert compare_products(_product('Apple'), _product('Banana')) == -1
        assert compare_products(_product('Banana'), _product('Apple')) == 1
        assert compare_products(_product('Apple'), _product('Apple')) == 0

    def test_uses_truncated_name(self):
        """Names equal in their first 10 characters compare equal"""
        a = _product('Chocolate Bar Dark')
        b = _product('Chocolate Bar Milk')
        assert compare_products(a, b) == 0

    def test_code_point_order(self):
        assert compare_products(_product('Zebra'), _product('apple')) == -1


class TestSortProducts:

    def test_sorted_ascending(self):
        products = [_product(n) for n in ['Milk', 'Bread', 'Eggs', 'Apples']]
        result = sort_products(products)
        names = [p.name for p in result]
        assert names == ['Apples', 'Bread', 'Eggs', 'Milk']
        for earlier, later in zip(result, result[1:]):
            assert earlier.name <= later.name

    def test_equal_names_keep_input_order(self):
        first = _product('Same', price='1.00')
        second = _product('Same', price='2.00')
        assert sort_products([second, first]) == [second, first]

    def test_empty(self):
        assert sort_products([]) == []


class TestPartitionProducts:
    """Stable partition keyed on is_domestic"""

    def test_partition(self):
        products = sort_products([
            _product('Milk', domestic=True),
            _product('Chocolate'),
            _product('Bread', domestic=True),
            _product('Wine'),
        ])
        groups = partition_products(products)

        assert [p.name for p in groups.domestic] == ['Bread', 'Milk']
        assert [p.name for p in groups.imported] == ['Chocolate', 'Wine']
        assert all(p.is_domestic for p in groups.domestic)
        assert not any(p.is_domestic for p in groups.imported)
        assert len(groups.domestic) + len(groups.imported) == len(products)

    def test_all_one_group(self):
        groups = partition_products([_product('A'), _product('B')])
        assert groups.domestic == ()
        assert len(groups.imported) == 2
