"""Filtering and aggregation over the dividend ledger."""

from datetime import date
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from .models import LedgerEntry

FRAME_COLUMNS = [
    "payment_date", "ticker", "currency", "share_count",
    "price_per_share", "dividend_per_share", "total",
]


class DateRangePreset(Enum):
    ALL = "all"
    LAST_QUARTER = "last_quarter"
    LAST_6_MONTHS = "last_6_months"
    LAST_YEAR = "last_year"
    LAST_2_YEARS = "last_2_years"
    LAST_3_YEARS = "last_3_years"
    LAST_5_YEARS = "last_5_years"


_LOOKBACK_MONTHS = {
    DateRangePreset.LAST_6_MONTHS: 6,
    DateRangePreset.LAST_YEAR: 12,
    DateRangePreset.LAST_2_YEARS: 24,
    DateRangePreset.LAST_3_YEARS: 36,
    DateRangePreset.LAST_5_YEARS: 60,
}


def resolve_range(preset: DateRangePreset, today: date) -> Optional[Tuple[date, date]]:
    """Return the inclusive ``(start, end)`` window for ``preset``.

    ``None`` means no date filtering.
    """
    if preset is DateRangePreset.ALL:
        return None
    if preset is DateRangePreset.LAST_QUARTER:
        previous = pd.Period(pd.Timestamp(today), freq="Q") - 1
        return previous.start_time.date(), previous.end_time.date()
    months = _LOOKBACK_MONTHS[preset]
    start = (pd.Timestamp(today) - pd.DateOffset(months=months)).date()
    return start, today


def filter_entries(ledger: Iterable[LedgerEntry], ticker: Optional[str] = None,
                   preset: DateRangePreset = DateRangePreset.ALL,
                   today: Optional[date] = None) -> List[LedgerEntry]:
    """Select ledger entries by exact ticker and/or date-range preset."""
    window = resolve_range(preset, today or date.today())
    wanted = ticker.lower() if ticker else None
    selected = []
    for entry in ledger:
        if wanted is not None and entry.ticker.lower() != wanted:
            continue
        if window is not None and not (window[0] <= entry.payment_date <= window[1]):
            continue
        selected.append(entry)
    return selected


def tickers(ledger: Iterable[LedgerEntry]) -> List[str]:
    return sorted({e.ticker for e in ledger})


def to_frame(entries: Sequence[LedgerEntry]) -> pd.DataFrame:
    """Tabular view of ledger entries, one row per payment."""
    return pd.DataFrame(
        [{col: getattr(e, col) for col in FRAME_COLUMNS} for e in entries],
        columns=FRAME_COLUMNS,
    )


def aggregate_by_currency(entries: Sequence[LedgerEntry]) -> Dict[str, float]:
    """Sum entry totals per currency, ordered by currency code."""
    df = to_frame(entries)
    if df.empty:
        return {}
    sums = df.groupby("currency")["total"].sum().sort_index()
    return {currency: float(total) for currency, total in sums.items()}
