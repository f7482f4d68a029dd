"""Static currency conversion.

Rates are fixed estimates expressed against USD.  They are not live FX
quotes, only a rough way to compare holdings priced in different
currencies.
"""

import logging
from typing import List

logger = logging.getLogger(__name__)

REFERENCE_CURRENCY = "USD"

FX_RATES = {
    "USD": 1.0,
    "EUR": 1.08,
    "GBP": 1.27,
    "CAD": 0.74,
    "AUD": 0.65,
    "JPY": 0.0067,
    "CHF": 1.13,
    "HKD": 0.13,
    "SGD": 0.75,
    "CNY": 0.14,
    "KRW": 0.00075,
    "INR": 0.012,
    "BRL": 0.20,
    "MXN": 0.058,
    "SEK": 0.096,
    "NOK": 0.094,
    "DKK": 0.145,
    "NZD": 0.61,
    "ZAR": 0.055,
    "TWD": 0.031,
}

# Codes missing from FX_RATES are treated as if they were the reference
# currency.  Known approximation, not an error.
UNKNOWN_CURRENCY_RATE = 1.0

SUPPORTED_CURRENCIES: List[str] = sorted(FX_RATES)


def is_supported(code: str) -> bool:
    return bool(code) and code.upper() in FX_RATES


def rate_for(code: str) -> float:
    """Return the USD rate for ``code`` or ``UNKNOWN_CURRENCY_RATE``."""
    rate = FX_RATES.get((code or "").upper())
    if rate is None:
        logger.debug("No FX rate for %r, using %s", code, UNKNOWN_CURRENCY_RATE)
        return UNKNOWN_CURRENCY_RATE
    return rate


def convert(amount: float, from_currency: str, to_currency: str) -> float:
    """Convert ``amount`` between two currencies through USD.

    The result is ``amount * rate[from] / rate[to]``.
    """
    if (from_currency or "").upper() == (to_currency or "").upper():
        return amount
    return amount * rate_for(from_currency) / rate_for(to_currency)
