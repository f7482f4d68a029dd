"""Data fetching utilities for dividend_tracker.

Dividend history is requested from the dividend backend, one call per
holding.  A failed call never aborts the batch: it is logged and the
holding simply contributes no payments.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Sequence

import requests
from tqdm import tqdm

from . import config
from .models import DividendRecord, Holding

logger = logging.getLogger(__name__)

DIVIDENDS_PATH = "/dividends/{ticker}"

HEADERS = {
    "Accept": "application/json",
    "User-Agent": "dividend-tracker/1.0",
}


def _parse_date(value: Any) -> Optional[date]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(str(value)[:10]).date()
    except ValueError:
        return None


def parse_records(data: Dict[str, Any]) -> List[DividendRecord]:
    """Turn a provider payload into ``DividendRecord`` objects.

    Records without a usable payment date or dividend amount are skipped.
    """
    default_ticker = str(data.get("ticker") or "").lower()
    default_currency = data.get("currency") or "USD"
    items = data.get("dividends") or []
    if not isinstance(items, list):
        logger.warning("Dividends payload is not a list: %r", items)
        return []
    records = []
    for item in items:
        if not isinstance(item, dict):
            logger.warning("Skipping malformed dividend record %r", item)
            continue
        payment_date = _parse_date(item.get("payment_date"))
        amount = item.get("dividend")
        if payment_date is None or amount is None:
            logger.warning("Skipping malformed dividend record %r", item)
            continue
        try:
            dividend = float(amount)
            price = float(item.get("price_per_share") or 0)
        except (TypeError, ValueError):
            logger.warning("Skipping dividend record with bad numbers %r", item)
            continue
        records.append(
            DividendRecord(
                payment_date=payment_date,
                ticker=str(item.get("ticker") or default_ticker).lower(),
                currency=item.get("currency") or default_currency,
                dividend_per_share=dividend,
                price_per_share=price,
            )
        )
    return records


def fetch_history(ticker: str, start_date: Optional[date] = None) -> List[DividendRecord]:
    """Fetch dividend history for ``ticker`` paid on or after ``start_date``.

    Returns an empty list when the backend cannot be reached or answers
    with an error.
    """
    url = config.BACKEND_URL.rstrip("/") + DIVIDENDS_PATH.format(ticker=ticker.lower())
    params = {}
    if start_date is not None:
        params["start_date"] = start_date.isoformat()
    try:
        response = requests.get(url, params=params, headers=HEADERS, timeout=config.REQUEST_TIMEOUT)
        response.raise_for_status()
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.error("Error fetching dividends for %s: %s", ticker, e)
        return []
    if not isinstance(data, dict):
        logger.error("Unexpected payload for %s: %r", ticker, data)
        return []
    return parse_records(data)


def _fetch_for_holding(holding: Holding) -> List[DividendRecord]:
    return fetch_history(holding.ticker, holding.acquisition_date)


def fetch_all(holdings: Sequence[Holding], workers: int = 1,
              progress: bool = False) -> Dict[str, List[DividendRecord]]:
    """Fetch records for every holding, keyed by holding id.

    With ``workers > 1`` the calls run concurrently and are collected as a
    batch.  Each holding's result is stored independently.
    """
    results: Dict[str, List[DividendRecord]] = {}
    if workers > 1 and len(holdings) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            batch = pool.map(_fetch_for_holding, holdings)
            for holding, records in tqdm(zip(holdings, batch), total=len(holdings),
                                         desc="Fetching dividends", disable=not progress):
                results[holding.id] = records
        return results

    for holding in tqdm(holdings, desc="Fetching dividends", disable=not progress):
        results[holding.id] = _fetch_for_holding(holding)
    return results
