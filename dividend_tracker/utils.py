"""Utility functions for dividend calculations.

Provides:
* dividend_yield – compute yield given annual amount and price.
* round_half_up – rounding that matches how payment counts are estimated.
* payments_per_year – infer payment cadence from a list of payment dates.
"""

import math
from datetime import date
from typing import Iterable

DEFAULT_PAYMENTS_PER_YEAR = 4
DAYS_PER_YEAR = 365.25
MIN_SPAN_YEARS = 0.25


def dividend_yield(amount: float, price: float) -> float:
    """Return dividend yield as a percentage.

    ``amount`` is the annual dividend per share, ``price`` the latest known
    price per share.  The result is ``amount / price * 100``, or ``0`` when
    no price is known.
    """
    if price <= 0:
        return 0.0
    return (amount / price) * 100.0


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def payments_per_year(payment_dates: Iterable[date]) -> int:
    """Estimate how many times a year a ticker pays a dividend.

    Distinct dates are counted over the span between the first and last
    payment.  Fewer than two dates, or a span of a quarter or less, fall
    back to quarterly.  The estimate is clamped to 1..12.
    """
    dates = sorted(set(payment_dates))
    if len(dates) < 2:
        return DEFAULT_PAYMENTS_PER_YEAR
    span_years = (dates[-1] - dates[0]).days / DAYS_PER_YEAR
    if span_years <= MIN_SPAN_YEARS:
        return DEFAULT_PAYMENTS_PER_YEAR
    estimate = round_half_up(len(dates) / span_years)
    return max(1, min(12, estimate))
