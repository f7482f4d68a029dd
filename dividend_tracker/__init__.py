"""Top level package for dividend_tracker.

The package provides a small CLI tool that keeps a list of stock holdings,
downloads their dividend history from a dividend backend and reports the
income received.  It can also project how much needs to be invested, and
in which tickers, to reach a target monthly dividend.

The computational pieces (ledger, query, stats, planner, currency) are
plain functions over the dataclasses in ``models`` and can be used without
the CLI.
"""

__version__ = "1.0.0"

__all__ = ["cli", "config", "currency", "db", "fetch", "ledger", "models",
           "planner", "portfolio", "query", "session", "stats", "utils"]
