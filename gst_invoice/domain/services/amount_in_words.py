# gst_invoice/domain/services/amount_in_words.py
"""
Amount in words for the printed invoice, Indian numbering system.

    12980.50 -> "Rupees Twelve Thousand Nine Hundred and Eighty and Fifty Paise Only"

Groups are Thousand (10^3), Lakh (10^5) and Crore (10^7); amounts of a
hundred crore and above repeat the crore group ("One Hundred Crore").
"""

from __future__ import annotations

from decimal import ROUND_FLOOR, Decimal

from gst_invoice.domain.money import HUNDRED, round_money, to_decimal

_ONES = ["", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine"]
_TEENS = [
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen",
    "Fifteen", "Sixteen", "Seventeen", "Eighteen", "Nineteen",
]
_TENS = ["", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety"]

THOUSAND = 1_000
LAKH = 100_000
CRORE = 10_000_000


def number_to_words(n: int) -> str:
    """Spell a non-negative integer. ``0`` gives ``"Zero"``."""
    if n < 0:
        raise ValueError(f"Cannot spell a negative number: {n}")
    if n == 0:
        return "Zero"
    return _convert(n)


def _convert(n: int) -> str:
    if n < 10:
        return _ONES[n]
    if n < 20:
        return _TEENS[n - 10]
    if n < 100:
        return _TENS[n // 10] + (" " + _ONES[n % 10] if n % 10 else "")
    if n < THOUSAND:
        rest = n % 100
        return _ONES[n // 100] + " Hundred" + (" and " + _convert(rest) if rest else "")
    if n < LAKH:
        return _group(n, THOUSAND, "Thousand")
    if n < CRORE:
        return _group(n, LAKH, "Lakh")
    return _group(n, CRORE, "Crore")


def _group(n: int, unit: int, name: str) -> str:
    rest = n % unit
    return _convert(n // unit) + " " + name + (" " + _convert(rest) if rest else "")


def amount_in_words(amount) -> str:
    """Legal "amount in words" line for a rupee amount.

    The amount is rounded half-up to paise first, so 0.995 reads as one
    rupee rather than a hundred paise.
    """
    value = round_money(to_decimal(amount, field="amount"))
    if value < 0:
        raise ValueError(f"Amount in words needs a non-negative amount, got {value}")

    rupees = int(value.to_integral_value(rounding=ROUND_FLOOR))
    paise = int((value - rupees) * HUNDRED)

    words = "Rupees " + number_to_words(rupees)
    if paise > 0:
        words += " and " + _convert(paise) + " Paise"
    return words + " Only"
