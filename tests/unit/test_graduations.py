from decimal import Decimal

from core.graduations import division_values, format_label, subdivision_values, value_to_offset


def test_division_values_include_both_ends():
    values = division_values(Decimal(0), Decimal(100), Decimal(4))

    assert values == [0, 25, 50, 75, 100]


def test_division_values_empty_for_non_positive_divisions():
    assert division_values(Decimal(0), Decimal(10), Decimal(0)) == []


def test_subdivision_values_fall_strictly_between_divisions():
    values = subdivision_values(Decimal(0), Decimal(20), Decimal(2), Decimal(1))

    assert values == [5, 15]


def test_subdivision_values_count():
    values = subdivision_values(Decimal(0), Decimal(100), Decimal(10), Decimal(4))

    assert len(values) == 40
    assert all(0 < v < 100 for v in values)
    assert Decimal(10) not in values


def test_format_label_drops_trailing_zeros():
    assert format_label(Decimal("25.00")) == "25"
    assert format_label(Decimal("2.50")) == "2.5"
    assert format_label(Decimal("-3")) == "-3"


def test_value_to_offset_scales_into_length():
    assert value_to_offset(Decimal(50), Decimal(0), Decimal(100), 200) == 100
    assert value_to_offset(Decimal(0), Decimal(0), Decimal(100), 200) == 0
    assert value_to_offset(Decimal(5), Decimal(0), Decimal(100), 0) == 0
