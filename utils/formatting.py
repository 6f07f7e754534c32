"""Display formatting helpers."""


def format_currency(value: float) -> str:
    """Format a dollar amount as USD with no fractional digits (e.g. "$1,234")."""
    rounded = round(value)
    if rounded < 0:
        return f"-${-rounded:,.0f}"
    return f"${rounded:,.0f}"
