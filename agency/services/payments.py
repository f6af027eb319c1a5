"""
Payment helpers.
"""
from typing import Iterable, List

from agency.models.payment import Payment


def sort_payments(payments: Iterable[Payment]) -> List[Payment]:
    """Newest billing period first: year descending, then calendar month descending."""
    return sorted(payments, key=lambda p: (p.year, p.month_number), reverse=True)
