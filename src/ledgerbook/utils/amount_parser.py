"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "₹123.45"
    - "Rs 1,234.56"
    - "1,23,456.78" (Indian digit grouping)

    Sign handling is left to the caller; "-50" parses to Decimal("-50").

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    # Remove whitespace
    amount_str = amount_str.strip()

    # Remove currency symbols and the "Rs" / "INR" prefixes
    amount_str = re.sub(r"^(rs\.?|inr)\s*", "", amount_str, flags=re.IGNORECASE)
    amount_str = re.sub(r"[₹$€£]", "", amount_str)

    # Remove grouping commas
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'") from None

    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return amount
