from __future__ import annotations

__all__ = ["DEFAULT_DECIMALS", "format_number", "format_rounded"]


DEFAULT_DECIMALS = 8


def format_number(value: float) -> str:
    """
    Returns the shortest string that reads back as `value`, without the
    trailing ".0" Python puts on integral floats (2.0 -> "2", -0.0 -> "-0").
    """
    s = repr(float(value))
    if s.endswith(".0"):
        return s[:-2]
    return s


def format_rounded(value: float, decimals: int = DEFAULT_DECIMALS) -> str:
    """
    Rounds `value` to `decimals` decimal places and formats the result with
    `format_number()`.

    Rounding is done by the built-in round(), i.e. round-half-to-even on the
    exact binary value of the float.
    """
    return format_number(round(value, decimals))
