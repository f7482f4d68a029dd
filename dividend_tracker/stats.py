"""Per-ticker dividend statistics estimated from payment history."""

from collections import defaultdict
from typing import Dict, Iterable, List, Sequence

from . import utils
from .models import LedgerEntry, TickerStatistics


def estimate(entries: Sequence[LedgerEntry]) -> TickerStatistics:
    """Estimate annual dividend, cadence and yield for one ticker.

    ``entries`` should be the full, unfiltered history of the ticker.  The
    latest price is taken from the most recent payment (first one wins on
    ties) and the average dividend counts every entry, including several on
    the same day.
    """
    if not entries:
        raise ValueError("Cannot estimate statistics without ledger entries")

    latest = entries[0]
    for entry in entries[1:]:
        if entry.payment_date > latest.payment_date:
            latest = entry

    per_year = utils.payments_per_year(e.payment_date for e in entries)
    average = sum(e.dividend_per_share for e in entries) / len(entries)
    annual = average * per_year

    return TickerStatistics(
        ticker=entries[0].ticker,
        currency=entries[0].currency or "USD",
        annual_dividend_per_share=annual,
        latest_price_per_share=latest.price_per_share,
        payments_per_year=per_year,
        dividend_yield_percent=utils.dividend_yield(annual, latest.price_per_share),
    )


def estimate_all(ledger: Iterable[LedgerEntry]) -> List[TickerStatistics]:
    """Estimate statistics for every ticker in the ledger, sorted by ticker."""
    grouped: Dict[str, List[LedgerEntry]] = defaultdict(list)
    for entry in ledger:
        grouped[entry.ticker].append(entry)
    return [estimate(grouped[ticker]) for ticker in sorted(grouped)]
