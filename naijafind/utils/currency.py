from decimal import Decimal


def format_naira(amount) -> str:
    """1234567.5 -> '₦1,234,567.5' (drops a zero fraction)."""
    value = Decimal(str(amount or 0)).normalize()
    if value == value.to_integral():
        return f'₦{int(value):,}'
    return f'₦{float(value):,}'
