"""Session context threaded through the fetch / ledger / projection stages."""

import logging
from datetime import date
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from . import ledger as ledger_mod
from . import planner, query, stats
from .fetch import fetch_all
from .models import AllocationPlan, DividendRecord, Holding, LedgerEntry, TickerStatistics
from .portfolio import ValidationError

logger = logging.getLogger(__name__)

Fetcher = Callable[[Sequence[Holding]], Mapping[str, List[DividendRecord]]]


class Session:
    """State for one viewing session over a submitted holdings list.

    Holdings are fixed once the session exists.  The ledger is replaced as a
    whole on submit or edit, never mutated in place.
    """

    def __init__(self, holdings: Sequence[Holding], today: Optional[date] = None):
        self.holdings = tuple(holdings)
        self.today = today or date.today()
        self.ledger: List[LedgerEntry] = []

    def submit(self, fetcher: Fetcher = fetch_all) -> List[LedgerEntry]:
        """Fetch every holding's payments and build the ledger."""
        if not self.holdings:
            raise ValidationError("Please add at least one portfolio item")
        records: Dict[str, List[DividendRecord]] = dict(fetcher(self.holdings))
        empty = [h.display_ticker for h in self.holdings if not records.get(h.id)]
        if empty:
            logger.info("No dividend payments for: %s", ", ".join(empty))
        self.ledger = ledger_mod.build(self.holdings, records)
        return self.ledger

    def results(self, ticker: Optional[str] = None,
                preset: query.DateRangePreset = query.DateRangePreset.ALL) -> List[LedgerEntry]:
        return query.filter_entries(self.ledger, ticker=ticker, preset=preset, today=self.today)

    def edit(self, index: int, **changes) -> LedgerEntry:
        """Correct one ledger entry; returns the new entry."""
        self.ledger = ledger_mod.edit_ledger(self.ledger, index, **changes)
        return self.ledger[index]

    def statistics(self) -> List[TickerStatistics]:
        return stats.estimate_all(self.ledger)

    def projection(self, target_monthly_income: float, target_currency: str = "USD",
                   horizon_years: float = 10,
                   strategy: planner.AllocationStrategy = planner.equal_split) -> Optional[AllocationPlan]:
        return planner.plan(self.statistics(), target_monthly_income, target_currency,
                            horizon_years, strategy=strategy)
