import math


def decimal_round(value: float, precision: int) -> float:
    """
    Round a float to ``precision`` decimal places, half away from zero.

    A negative precision rounds to a multiple of ``10 ** -precision``,
    e.g. ``decimal_round(987.654, -1) == 990``.

    :param value: Value to round
    :param precision: Number of decimal places, may be zero or negative
    :return: Rounded value
    """
    try:
        scale = 10.0**precision
    except OverflowError:
        # No float carries that many decimal places.
        return value

    if scale == 0.0:
        return 0.0

    shifted = value * scale
    if not math.isfinite(shifted):
        return value

    rounded = int(shifted + math.copysign(0.5, shifted))
    return rounded / scale
