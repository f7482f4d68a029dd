from datetime import date

from dividend_tracker.models import LedgerEntry


def entry(payment_date, ticker="ko", dividend=0.5, shares=10, price=0.0,
          currency="USD", holding_id="1"):
    if isinstance(payment_date, str):
        payment_date = date.fromisoformat(payment_date)
    return LedgerEntry(
        holding_id=holding_id,
        payment_date=payment_date,
        ticker=ticker,
        currency=currency,
        share_count=shares,
        dividend_per_share=dividend,
        price_per_share=price,
    )
