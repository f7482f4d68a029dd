"""Holdings list management: creation, CSV import and persistence."""

import json
import logging
import time
from datetime import date, datetime
from typing import Iterable, List, Optional, Sequence, Union

from . import db
from .models import Holding

logger = logging.getLogger(__name__)

STORAGE_SLOT = "portfolio"


class ValidationError(ValueError):
    """Raised when user input is missing or invalid."""


def _new_id(existing: Iterable[str] = ()) -> str:
    taken = set(existing)
    stamp = int(time.time() * 1000)
    while str(stamp) in taken:
        stamp += 1
    return str(stamp)


def _to_date(value: Union[str, date, None]) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value:
        return None
    try:
        return datetime.fromisoformat(str(value).strip()[:10]).date()
    except ValueError:
        return None


def new_holding(ticker: str, share_count, acquisition_date,
                existing_ids: Iterable[str] = ()) -> Holding:
    """Validate user input and return a new holding with a fresh id."""
    ticker = (ticker or "").strip()
    if not ticker or not share_count or not acquisition_date:
        raise ValidationError("Please fill in all fields")
    try:
        shares = int(share_count)
    except (TypeError, ValueError):
        raise ValidationError(f"Share count must be a whole number, got {share_count!r}")
    if shares <= 0:
        raise ValidationError("Share count must be positive")
    acquired = _to_date(acquisition_date)
    if acquired is None:
        raise ValidationError(f"Invalid date {acquisition_date!r}, expected YYYY-MM-DD")
    return Holding(
        id=_new_id(existing_ids),
        ticker=ticker.lower(),
        share_count=shares,
        acquisition_date=acquired,
    )


def remove_holding(holdings: Sequence[Holding], holding_id: str) -> List[Holding]:
    return [h for h in holdings if h.id != holding_id]


def parse_import(text: str) -> List[Holding]:
    """Parse ``ticker,shares,date`` rows into holdings.

    A first line containing "ticker" is treated as a header.  Rows with
    missing fields, a non-numeric share count or a bad date are skipped.
    """
    lines = [line for line in text.splitlines() if line.strip()]
    if lines and "ticker" in lines[0].lower():
        lines = lines[1:]

    holdings: List[Holding] = []
    for line in lines:
        fields = [f.strip() for f in line.split(",")]
        if len(fields) < 3:
            logger.debug("Skipping short import row %r", line)
            continue
        ticker, shares, acquired = fields[:3]
        try:
            holding = new_holding(ticker, shares, acquired, existing_ids=[h.id for h in holdings])
        except ValidationError as e:
            logger.debug("Skipping import row %r: %s", line, e)
            continue
        holdings.append(holding)
    return holdings


def _to_dict(holding: Holding) -> dict:
    return {
        "id": holding.id,
        "ticker": holding.ticker,
        "amount": holding.share_count,
        "start_date": holding.acquisition_date.isoformat(),
    }


def _from_dict(item: dict) -> Holding:
    acquired = _to_date(item["start_date"])
    if acquired is None:
        raise ValueError(f"bad start_date {item['start_date']!r}")
    return Holding(
        id=str(item["id"]),
        ticker=str(item["ticker"]).lower(),
        share_count=int(item["amount"]),
        acquisition_date=acquired,
    )


def load_holdings() -> List[Holding]:
    """Load the saved holdings list, or an empty list if none is usable."""
    raw = db.load_slot(STORAGE_SLOT)
    if raw is None:
        return []
    try:
        return [_from_dict(item) for item in json.loads(raw)]
    except (ValueError, KeyError, TypeError) as e:
        logger.warning("Ignoring invalid saved portfolio: %s", e)
        return []


def save_holdings(holdings: Sequence[Holding]) -> None:
    db.save_slot(STORAGE_SLOT, json.dumps([_to_dict(h) for h in holdings]))
