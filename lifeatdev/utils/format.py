# utils/format.py


def format_number(value: int) -> str:
    """1234567 -> '1,234,567'."""
    return f"{int(value or 0):,}"


def money(amount: int) -> str:
    """'$1,234'. Negatives keep the sign in front: '-$4,000'."""
    amount = int(amount or 0)
    sign = "-" if amount < 0 else ""
    return f"{sign}${format_number(abs(amount))}"
