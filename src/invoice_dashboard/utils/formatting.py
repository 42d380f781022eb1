"""Display helpers for amounts and pagination."""

from typing import List, Optional, Union


def format_currency(amount: Optional[Union[int, float, str]]) -> str:
    """
    Format an amount in cents as US dollars, e.g. 123456 -> "$1,234.56".

    Strings are accepted because count endpoints may return numeric strings.
    None and empty strings are treated as zero.
    """
    if amount is None or amount == "":
        cents = 0.0
    else:
        cents = float(amount)
    dollars = cents / 100
    sign = "-" if dollars < 0 else ""
    return f"{sign}${abs(dollars):,.2f}"


def generate_pagination(current_page: int, total_pages: int) -> List[Union[int, str]]:
    """
    Page numbers to show in a pagination bar, with "..." for skipped ranges.
    """
    # Few pages: show them all
    if total_pages <= 7:
        return list(range(1, total_pages + 1))

    # Near the start
    if current_page <= 3:
        return [1, 2, 3, "...", total_pages - 1, total_pages]

    # Near the end
    if current_page >= total_pages - 2:
        return [1, 2, "...", total_pages - 2, total_pages - 1, total_pages]

    return [
        1,
        "...",
        current_page - 1,
        current_page,
        current_page + 1,
        "...",
        total_pages,
    ]
