from decimal import Decimal


def division_values(minimum: Decimal, maximum: Decimal, divisions: Decimal):
    """Evenly spaced values from minimum to maximum, both ends included."""
    count = int(divisions)
    if count <= 0 or maximum <= minimum:
        return []
    step = (maximum - minimum) / Decimal(count)
    values = [minimum + step * i for i in range(count)]
    values.append(maximum)
    return values


def subdivision_values(minimum: Decimal, maximum: Decimal, divisions: Decimal, subdivisions: Decimal):
    """Values strictly between consecutive divisions, ``subdivisions`` per interval."""
    majors = division_values(minimum, maximum, divisions)
    per_interval = int(subdivisions)
    if len(majors) < 2 or per_interval <= 0:
        return []
    values = []
    for left, right in zip(majors, majors[1:]):
        step = (right - left) / Decimal(per_interval + 1)
        values.extend(left + step * j for j in range(1, per_interval + 1))
    return values


def format_label(value: Decimal) -> str:
    if value == value.to_integral_value():
        return str(int(value))
    return f"{value.normalize():f}"


def value_to_offset(value: Decimal, minimum: Decimal, maximum: Decimal, length) -> int:
    if maximum <= minimum or length <= 0:
        return 0
    return int((value - minimum) / (maximum - minimum) * length)
