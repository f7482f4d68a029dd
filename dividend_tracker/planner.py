"""Investment plan to reach a target monthly dividend income.

The default allocation splits the annual target equally across tickers.
It is a simple business rule, not an optimisation; another policy can be
passed as ``strategy``.
"""

import math
from typing import Callable, List, Optional, Sequence

from .currency import convert
from .models import AllocationPlan, AllocationRow, TickerStatistics

AllocationStrategy = Callable[[float, Sequence[TickerStatistics]], List[float]]


def equal_split(target_annual_income: float, stats: Sequence[TickerStatistics]) -> List[float]:
    """Give every ticker the same share of the annual target."""
    share = target_annual_income / len(stats)
    return [share] * len(stats)


def _row(stats: TickerStatistics, annual_target: float, target_currency: str) -> AllocationRow:
    annual_div = convert(stats.annual_dividend_per_share, stats.currency, target_currency)
    shares = math.ceil(annual_target / annual_div) if annual_div > 0 else 0
    investment_native = shares * stats.latest_price_per_share
    return AllocationRow(
        ticker=stats.ticker,
        native_currency=stats.currency,
        price_per_share=stats.latest_price_per_share,
        annual_dividend_per_share=stats.annual_dividend_per_share,
        dividend_yield_percent=stats.dividend_yield_percent,
        shares_needed=shares,
        investment_native=investment_native,
        investment_target=convert(investment_native, stats.currency, target_currency),
        # actual income after rounding shares up, may exceed the target
        monthly_dividend_target=shares * annual_div / 12,
    )


def plan(stats: Sequence[TickerStatistics], target_monthly_income: float,
         target_currency: str, horizon_years: float,
         strategy: AllocationStrategy = equal_split) -> Optional[AllocationPlan]:
    """Size the investment in each ticker needed for the monthly target.

    Returns ``None`` when there is nothing to plan (no tickers or a
    non-positive target).  Contributions are amortized linearly over
    ``horizon_years``; there is no growth or compounding.
    """
    if not stats or target_monthly_income <= 0:
        return None

    targets = strategy(target_monthly_income * 12, stats)
    rows = [_row(s, t, target_currency) for s, t in zip(stats, targets)]

    total_investment = sum(r.investment_target for r in rows)
    total_shares = sum(r.shares_needed for r in rows)
    months = horizon_years * 12

    return AllocationPlan(
        rows=rows,
        target_currency=target_currency,
        target_monthly_income=target_monthly_income,
        horizon_years=horizon_years,
        total_investment=total_investment,
        total_monthly_dividend=sum(r.monthly_dividend_target for r in rows),
        total_shares=total_shares,
        monthly_investment=total_investment / months if months > 0 else 0.0,
        yearly_investment=total_investment / horizon_years if horizon_years > 0 else 0.0,
        shares_per_month=total_shares / months if months > 0 else 0.0,
        shares_per_year=total_shares / horizon_years if horizon_years > 0 else 0.0,
    )
