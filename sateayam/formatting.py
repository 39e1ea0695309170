"""Display formatting for prices."""

from __future__ import annotations


def format_thousands(number: int) -> str:
    """Write an integer with a dot before every group of three trailing digits."""
    digits = str(number)
    size = len(digits)
    return "".join(
        ("." if position and (size - position) % 3 == 0 else "") + digit
        for position, digit in enumerate(digits)
    )


def format_rupiah(price: int) -> str:
    """Write a price in rupiah, for example ``Rp 15.000``."""
    return f"Rp {format_thousands(price)}"