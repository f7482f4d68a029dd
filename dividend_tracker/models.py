"""Data classes shared across dividend_tracker.

All entities are frozen; derived values (``LedgerEntry.total``) are
computed on construction so a changed entry is always a new object.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import List


@dataclass(frozen=True)
class Holding:
    """A position in one ticker, as entered by the user."""

    id: str
    ticker: str
    share_count: int
    acquisition_date: date

    @property
    def display_ticker(self) -> str:
        return self.ticker.upper()


@dataclass(frozen=True)
class DividendRecord:
    """One dividend payment as returned by the provider."""

    payment_date: date
    ticker: str
    currency: str
    dividend_per_share: float
    price_per_share: float = 0.0


@dataclass(frozen=True)
class LedgerEntry:
    """A dividend payment joined with the share count of a holding."""

    holding_id: str
    payment_date: date
    ticker: str
    currency: str
    share_count: int
    dividend_per_share: float
    price_per_share: float = 0.0
    total: float = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "total", self.dividend_per_share * self.share_count)


@dataclass(frozen=True)
class TickerStatistics:
    ticker: str
    currency: str
    annual_dividend_per_share: float
    latest_price_per_share: float
    payments_per_year: int
    dividend_yield_percent: float


@dataclass(frozen=True)
class AllocationRow:
    ticker: str
    native_currency: str
    price_per_share: float
    annual_dividend_per_share: float
    dividend_yield_percent: float
    shares_needed: int
    investment_native: float
    investment_target: float
    monthly_dividend_target: float


@dataclass(frozen=True)
class AllocationPlan:
    """Investment needed to reach a monthly dividend target."""

    rows: List[AllocationRow]
    target_currency: str
    target_monthly_income: float
    horizon_years: float
    total_investment: float
    total_monthly_dividend: float
    total_shares: int
    monthly_investment: float
    yearly_investment: float
    shares_per_month: float
    shares_per_year: float
