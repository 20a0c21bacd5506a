import math
from decimal import Decimal
from typing import Any


def _format_float(value: float) -> str:
    """
    Shortest ``%g`` form: ``1.0`` -> ``1``, ``4.25`` -> ``4.25``,
    ``1e6`` -> ``1e+06``, ``1e-05`` stays exponential.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    sign, digits, exponent = Decimal(repr(value)).normalize().as_tuple()
    mantissa = "".join(str(d) for d in digits)
    point = len(mantissa) + exponent
    head = "-" if sign else ""

    exp = point - 1
    if exp < -4 or exp >= 6:
        fraction = f".{mantissa[1:]}" if len(mantissa) > 1 else ""
        return f"{head}{mantissa[0]}{fraction}e{'-' if exp < 0 else '+'}{abs(exp):02d}"

    if point <= 0:
        return f"{head}0.{'0' * -point}{mantissa}"
    if point >= len(mantissa):
        return f"{head}{mantissa}{'0' * (point - len(mantissa))}"
    return f"{head}{mantissa[:point]}.{mantissa[point:]}"


def format_key(key: Any) -> str:
    """Render a mapping key for an error path segment."""
    if isinstance(key, float):
        return _format_float(float(key))
    return str(key)
