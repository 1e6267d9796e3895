"""
Opening balance normalisation.

The form keeps the balance as an unsigned magnitude plus a Dr/Cr toggle;
storage keeps a single signed amount (negative is credit) next to OpType.
"""
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional, Tuple

DEBIT = "Dr"
CREDIT = "Cr"
BALANCE_TYPES = (DEBIT, CREDIT)

ZERO = Decimal("0")
TWO_PLACES = Decimal("0.01")


def parse_decimal(value: Any) -> Optional[Decimal]:
    """Parse text or a number as a finite Decimal; None when it is not one"""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        parsed = value
    elif isinstance(value, (int, float)):
        parsed = Decimal(str(value))
    else:
        try:
            parsed = Decimal(str(value).strip())
        except InvalidOperation:
            return None
    if not parsed.is_finite():
        return None
    return parsed


def normalize(magnitude_text: Any, sign: str) -> Decimal:
    """Signed storage amount for a magnitude and a Dr/Cr toggle.

    The toggle wins over any sign typed into the magnitude. Empty text is
    zero, and zero is always returned unsigned.
    """
    if sign not in BALANCE_TYPES:
        raise ValueError(f"balance type must be Dr or Cr, got {sign!r}")
    text = "" if magnitude_text is None else str(magnitude_text).strip()
    if not text:
        return ZERO
    value = parse_decimal(text)
    if value is None:
        raise ValueError(f"opening balance is not a number: {magnitude_text!r}")
    magnitude = abs(value)
    if magnitude == 0:
        return ZERO
    return magnitude if sign == DEBIT else -magnitude


def denormalize(value: Any) -> Tuple[str, str]:
    """Magnitude text (two decimals) and Dr/Cr for a signed amount; zero is Dr"""
    amount = ZERO if value is None else parse_decimal(value)
    if amount is None:
        raise ValueError(f"opening balance is not a number: {value!r}")
    sign = CREDIT if amount < 0 else DEBIT
    return format_magnitude(amount), sign


def format_magnitude(amount: Decimal) -> str:
    return str(abs(amount).quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


def format_balance(amount: Any, op_type: Optional[str]) -> str:
    """Display form used by the list and detail views, e.g. ``"150.00 Dr"``"""
    magnitude, sign = denormalize(amount)
    return f"{magnitude} {op_type or sign}"
