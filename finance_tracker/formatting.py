"""Formatting utilities for currency display."""

from __future__ import annotations

from decimal import Decimal
from typing import Union

MASKED_AMOUNT = "****"


def format_currency(
    amount: Union[Decimal, float, int],
    include_sign: bool = True,
    visible: bool = True,
) -> str:
    """Format a currency amount with thousands separators and two decimals.

    Args:
        amount: The amount to format
        include_sign: Whether to include the dollar sign
        visible: When False the amount is masked, for screens shared in public

    Returns:
        Formatted currency string (e.g., "$1,234.56", "1,234.56" or "****")

    Example:
        >>> format_currency(1234.56)
        '$1,234.56'
        >>> format_currency(1234.56, visible=False)
        '****'
    """
    if not visible:
        return MASKED_AMOUNT
    formatted = f"{amount:,.2f}"
    return f"${formatted}" if include_sign else formatted
