"""Human-readable publication dates"""

from datetime import date
from typing import Optional


def _relative(target: date, today: date) -> str:
    """Coarse age of target: whole years, else months, else days, else Today."""
    years = today.year - target.year
    months = today.month - target.month
    days = today.day - target.day
    if years > 0:
        return f"{years}y ago"
    if months > 0:
        return f"{months}mo ago"
    if days > 0:
        return f"{days}d ago"
    return "Today"


def format_date(value: date, include_relative: bool = False, today: Optional[date] = None) -> str:
    """Format as 'January 1, 2024', optionally suffixed with '(3y ago)'."""
    full = f"{value:%B} {value.day}, {value.year}"
    if not include_relative:
        return full
    return f"{full} ({_relative(value, today or date.today())})"
