"""Recent transactions window."""

from typing import Iterable, List

from finyx.domain.entities import Transaction


def sort_by_date_desc(transactions: Iterable[Transaction]) -> List[Transaction]:
    """
    Return a new list ordered by date, most recent first.

    YYYY-MM-DD strings sort chronologically as text. The sort is stable,
    so transactions sharing a date keep their relative input order; the
    store gives no ordering guarantee among them, so neither does this.
    """
    return sorted(transactions, key=lambda t: t.date or "", reverse=True)


def recent_transactions(
    transactions: Iterable[Transaction],
    limit: int = 5,
) -> List[Transaction]:
    """
    Select the most recent transactions.

    The input collection is never modified; sorting happens on a copy.

    Args:
        transactions: The full transaction collection
        limit: Maximum number of transactions to return

    Returns:
        At most `limit` transactions, newest first
    """
    if limit <= 0:
        return []
    return sort_by_date_desc(transactions)[:limit]
