"""Command‑line interface for dividend_tracker.

Provides sub‑commands to manage the holdings list, show the dividends the
holdings have paid, and project the investment needed to reach a target
monthly dividend income.
"""

from typing import Tuple

import click
from tabulate import tabulate

from . import __version__
from . import config
from . import currency
from . import portfolio
from . import query
from .fetch import fetch_all
from .session import Session

# Suggestions only; any ticker the backend knows is accepted.
POPULAR_TICKERS = ["AAPL", "MSFT", "JNJ", "PG", "JPM", "KO", "PEP", "CVX", "HD", "COST"]

EDIT_FIELDS = {
    "shares": "share_count",
    "price": "price_per_share",
    "dividend": "dividend_per_share",
}

RANGE_CHOICES = [p.value for p in query.DateRangePreset]


def money(amount: float, code: str) -> str:
    return f"{amount:,.2f} {code.upper()}"


def parse_edit(value: str) -> Tuple[int, str, float]:
    """Parse ``ROW:FIELD=VALUE`` into ``(row, field, number)``."""
    try:
        row, assignment = value.split(":", 1)
        name, number = assignment.split("=", 1)
        field = EDIT_FIELDS[name.strip().lower()]
        return int(row), field, float(number)
    except (ValueError, KeyError):
        raise click.BadParameter(
            f"{value!r}; expected ROW:FIELD=VALUE with FIELD one of {', '.join(EDIT_FIELDS)}",
            param_hint="--edit",
        )


def _start_session(workers: int) -> Session:
    holdings = portfolio.load_holdings()
    session = Session(holdings)
    try:
        session.submit(lambda items: fetch_all(items, workers=workers, progress=True))
    except portfolio.ValidationError as e:
        raise click.UsageError(f"{e}. Use 'add' or 'import' first.")
    return session


@click.group()
@click.version_option(version=__version__, prog_name="dividend-tracker")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
def main(verbose):
    """Dividend Calculator: track dividend income and plan for a target."""
    config.configure_logging(verbose)


@main.command()
@click.argument("ticker")
@click.argument("shares", type=int)
@click.argument("purchase_date")
def add(ticker, shares, purchase_date):
    """Add TICKER with SHARES bought on PURCHASE_DATE (YYYY-MM-DD)."""
    holdings = portfolio.load_holdings()
    try:
        holding = portfolio.new_holding(ticker, shares, purchase_date,
                                        existing_ids=[h.id for h in holdings])
    except portfolio.ValidationError as e:
        raise click.UsageError(str(e))
    holdings.append(holding)
    portfolio.save_holdings(holdings)
    click.echo(f"Added {holding.share_count} shares of {holding.display_ticker} (id {holding.id}).")


@main.command()
@click.argument("holding_id")
def remove(holding_id):
    """Remove the holding with HOLDING_ID."""
    holdings = portfolio.load_holdings()
    remaining = portfolio.remove_holding(holdings, holding_id)
    if len(remaining) == len(holdings):
        click.echo(f"No holding with id {holding_id}.", err=True)
        return
    portfolio.save_holdings(remaining)
    click.echo(f"Removed holding {holding_id}.")


@main.command(name="list")
def list_holdings():
    """Show the current holdings list."""
    holdings = portfolio.load_holdings()
    if not holdings:
        click.echo("Portfolio is empty. Try for example: add "
                   + " / ".join(POPULAR_TICKERS[:3]) + " ...")
        return
    rows = [(h.id, h.display_ticker, h.share_count, h.acquisition_date.isoformat())
            for h in holdings]
    click.echo(tabulate(rows, headers=["Id", "Ticker", "Shares", "Since"], tablefmt="simple"))
    click.echo(f"\n{len(holdings)} {'stock' if len(holdings) == 1 else 'stocks'} added")


@main.command(name="import")
@click.argument("csv_file", type=click.File("r"))
@click.option("--replace", is_flag=True, help="Replace the current list instead of appending.")
def import_holdings(csv_file, replace):
    """Import holdings from a CSV file of ticker,shares,date rows."""
    imported = portfolio.parse_import(csv_file.read())
    holdings = [] if replace else portfolio.load_holdings()
    taken = {h.id for h in holdings}
    for h in imported:
        if h.id in taken:
            h = portfolio.new_holding(h.ticker, h.share_count, h.acquisition_date, existing_ids=taken)
        taken.add(h.id)
        holdings.append(h)
    portfolio.save_holdings(holdings)
    click.echo(f"Imported {len(imported)} holdings.")


@main.command()
def clear():
    """Remove every holding."""
    portfolio.save_holdings([])
    click.echo("Portfolio cleared.")


@main.command()
@click.option("--ticker", help="Show only payments for this ticker.")
@click.option("--range", "date_range", type=click.Choice(RANGE_CHOICES), default="all",
              show_default=True, help="Limit payments to a date range.")
@click.option("--edit", "edits", multiple=True,
              help="Correct a row before display, e.g. '3:shares=10', '0:price=41.5'.")
@click.option("--workers", default=config.FETCH_WORKERS, show_default=True,
              help="Number of concurrent backend requests.")
def results(ticker, date_range, edits, workers):
    """Show dividend payments received by the holdings."""
    session = _start_session(workers)
    for value in edits:
        row, field, number = parse_edit(value)
        try:
            session.edit(row, **{field: number})
        except (IndexError, ValueError) as e:
            raise click.BadParameter(str(e), param_hint="--edit")

    position = {id(e): i for i, e in enumerate(session.ledger)}
    entries = session.results(ticker=ticker, preset=query.DateRangePreset(date_range))

    totals = query.aggregate_by_currency(entries)
    click.echo("Total Dividend Earnings:")
    for code, total in totals.items():
        click.echo(f"  {money(total, code)}")
    click.echo(f"From {len(entries)} dividend {'payment' if len(entries) == 1 else 'payments'}\n")

    if not entries:
        click.echo("No dividend payments found.")
        return

    df = query.to_frame(entries)
    df.insert(0, "#", [position[id(e)] for e in entries])
    df["payment_date"] = df["payment_date"].map(lambda d: d.strftime("%b %d, %Y"))
    df["ticker"] = df["ticker"].str.upper()
    df = df.rename(columns={
        "payment_date": "Payment Date", "ticker": "Ticker", "currency": "Currency",
        "share_count": "Shares", "price_per_share": "Price/Share",
        "dividend_per_share": "Dividend/Share", "total": "Total Earned",
    })
    click.echo(tabulate(df, headers="keys", tablefmt="simple", showindex=False, floatfmt=".2f"))
    if len(query.tickers(session.ledger)) > 1 and not ticker:
        click.echo("\nTickers: " + ", ".join(t.upper() for t in query.tickers(session.ledger)))


@main.command()
@click.option("--monthly", default=500.0, show_default=True, help="Target monthly dividend.")
@click.option("--years", default=10, show_default=True, help="Time horizon in years.")
@click.option("--currency", "target_currency", default="USD", show_default=True,
              type=click.Choice(currency.SUPPORTED_CURRENCIES, case_sensitive=False))
@click.option("--workers", default=config.FETCH_WORKERS, show_default=True,
              help="Number of concurrent backend requests.")
def projection(monthly, years, target_currency, workers):
    """Plan the investment needed to reach a monthly dividend target."""
    session = _start_session(workers)
    target_currency = target_currency.upper()
    plan = session.projection(monthly, target_currency, years)
    if plan is None:
        click.echo("No projection available: need dividend history and a positive target.")
        return

    rows = [
        (r.ticker.upper(), money(r.price_per_share, r.native_currency),
         money(r.annual_dividend_per_share, r.native_currency),
         f"{r.dividend_yield_percent:.2f}%", r.shares_needed,
         money(r.investment_native, r.native_currency),
         money(r.investment_target, target_currency),
         money(r.monthly_dividend_target, target_currency))
        for r in plan.rows
    ]
    click.echo(tabulate(rows, headers=["Ticker", "Price", "Annual Div", "Yield", "Shares",
                                       "Investment", f"Investment ({target_currency})",
                                       f"Monthly Div ({target_currency})"],
                        tablefmt="grid"))

    click.echo("\n" + "=" * 40)
    click.echo(f"Target:              {money(monthly, target_currency)} / month")
    click.echo(f"Total investment:    {money(plan.total_investment, target_currency)}")
    click.echo(f"Monthly dividend:    {money(plan.total_monthly_dividend, target_currency)}")
    click.echo(f"Total shares:        {plan.total_shares}")
    click.echo(f"Over {years} years:")
    click.echo(f"  Invest per month:  {money(plan.monthly_investment, target_currency)}")
    click.echo(f"  Invest per year:   {money(plan.yearly_investment, target_currency)}")
    click.echo(f"  Shares per month:  {plan.shares_per_month:.1f}")
    click.echo(f"  Shares per year:   {plan.shares_per_year:.1f}")
    click.echo("=" * 40)
    click.echo("FX rates are fixed estimates, not live quotes.")


if __name__ == "__main__":
    main()
