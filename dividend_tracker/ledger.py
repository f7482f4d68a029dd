"""Build and correct the dividend ledger.

The ledger is a flat list of ``LedgerEntry`` objects, one per payment per
holding.  Entries are immutable: corrections return new entries whose
``total`` is recomputed from the corrected values.
"""

import dataclasses
import math
from typing import Iterable, List, Mapping, Sequence

from .models import DividendRecord, Holding, LedgerEntry

EDITABLE_FIELDS = ("share_count", "price_per_share", "dividend_per_share")


def build(holdings: Sequence[Holding],
          per_holding_records: Mapping[str, Sequence[DividendRecord]]) -> List[LedgerEntry]:
    """Join each holding's records with its share count.

    Holdings sharing a ticker each contribute their own entries.  The result
    is ordered by payment date, most recent first.
    """
    entries = []
    for holding in holdings:
        for record in per_holding_records.get(holding.id, ()):
            entries.append(
                LedgerEntry(
                    holding_id=holding.id,
                    payment_date=record.payment_date,
                    ticker=record.ticker or holding.ticker,
                    currency=record.currency,
                    share_count=holding.share_count,
                    dividend_per_share=record.dividend_per_share,
                    price_per_share=record.price_per_share,
                )
            )
    entries.sort(key=lambda e: e.payment_date, reverse=True)
    return entries


def apply_edit(entry: LedgerEntry, **changes) -> LedgerEntry:
    """Return a copy of ``entry`` with corrected fields and a fresh total."""
    for name, value in changes.items():
        if name not in EDITABLE_FIELDS:
            raise ValueError(f"Field {name!r} cannot be edited")
        if not isinstance(value, (int, float)) or not math.isfinite(value) or value < 0:
            raise ValueError(f"{name} must be a non-negative number")
        if name == "share_count" and value != int(value):
            raise ValueError(f"share_count must be a whole number, got {value}")
    if "share_count" in changes:
        changes["share_count"] = int(changes["share_count"])
    # replace() re-runs __post_init__, which recomputes total
    return dataclasses.replace(entry, **changes)


def edit_ledger(ledger: Sequence[LedgerEntry], index: int, **changes) -> List[LedgerEntry]:
    """Return a new ledger with the entry at ``index`` corrected."""
    if not 0 <= index < len(ledger):
        raise IndexError(f"No ledger entry at position {index}")
    updated = list(ledger)
    updated[index] = apply_edit(ledger[index], **changes)
    return updated


def total_earnings(entries: Iterable[LedgerEntry]) -> float:
    return sum(e.total for e in entries)
