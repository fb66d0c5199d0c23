"""Runtime values. lox values are represented by Python values:

lox        represented as (in Python)
---        --------------------------
number     float
string     str
boolean    bool
nil        None
"""

import math


def is_truthy(value):
    """nil and false are falsy, everything else (0 and "" included) is truthy."""
    return not (value is None or value is False)


def is_equal(left, right):
    """Structural equality. Different kinds are never equal, which also keeps true apart from 1."""
    return type(left) is type(right) and left == right


def stringify(value):
    """Text shown for a value: nil, true, false, 7, 2.5, or the raw string."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return number_str(value)
    return value


def number_str(number):
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    if number.is_integer():
        sign = "-" if math.copysign(1.0, number) < 0 else ""
        return sign + str(abs(int(number)))
    return repr(number)
