import unittest
from datetime import date

from dividend_tracker import query
from dividend_tracker.query import DateRangePreset

from helpers import entry


class TestResolveRange(unittest.TestCase):
    def test_all_means_no_filter(self):
        self.assertIsNone(query.resolve_range(DateRangePreset.ALL, date(2025, 6, 1)))

    def test_last_quarter(self):
        self.assertEqual(query.resolve_range(DateRangePreset.LAST_QUARTER, date(2025, 6, 1)),
                         (date(2025, 1, 1), date(2025, 3, 31)))

    def test_last_quarter_crosses_year(self):
        self.assertEqual(query.resolve_range(DateRangePreset.LAST_QUARTER, date(2025, 2, 10)),
                         (date(2024, 10, 1), date(2024, 12, 31)))

    def test_month_lookback_clamps_to_month_end(self):
        self.assertEqual(query.resolve_range(DateRangePreset.LAST_6_MONTHS, date(2025, 8, 31)),
                         (date(2025, 2, 28), date(2025, 8, 31)))

    def test_year_lookbacks(self):
        today = date(2025, 6, 1)
        self.assertEqual(query.resolve_range(DateRangePreset.LAST_YEAR, today)[0], date(2024, 6, 1))
        self.assertEqual(query.resolve_range(DateRangePreset.LAST_2_YEARS, today)[0], date(2023, 6, 1))
        self.assertEqual(query.resolve_range(DateRangePreset.LAST_3_YEARS, today)[0], date(2022, 6, 1))
        self.assertEqual(query.resolve_range(DateRangePreset.LAST_5_YEARS, today)[0], date(2020, 6, 1))


class TestFilter(unittest.TestCase):
    def setUp(self):
        self.ledger = [
            entry("2025-01-01", ticker="ko"),
            entry("2024-06-01", ticker="pep"),
            entry("2023-01-15", ticker="ko"),
        ]

    def test_last_year(self):
        result = query.filter_entries(self.ledger, preset=DateRangePreset.LAST_YEAR,
                                      today=date(2025, 6, 1))
        self.assertEqual([e.payment_date for e in result], [date(2025, 1, 1), date(2024, 6, 1)])

    def test_ticker_filter(self):
        result = query.filter_entries(self.ledger, ticker="KO")
        self.assertEqual(len(result), 2)
        self.assertTrue(all(e.ticker == "ko" for e in result))

    def test_combined_filters(self):
        result = query.filter_entries(self.ledger, ticker="ko", preset=DateRangePreset.LAST_2_YEARS,
                                      today=date(2025, 6, 1))
        self.assertEqual([e.payment_date for e in result], [date(2025, 1, 1)])

    def test_no_filter(self):
        self.assertEqual(query.filter_entries(self.ledger), self.ledger)

    def test_last_quarter_bounds_are_inclusive(self):
        rows = [
            entry("2025-04-01"),
            entry("2025-03-31"),
            entry("2025-01-01"),
            entry("2024-12-31"),
        ]
        result = query.filter_entries(rows, preset=DateRangePreset.LAST_QUARTER,
                                      today=date(2025, 6, 1))
        self.assertEqual([e.payment_date for e in result], [date(2025, 3, 31), date(2025, 1, 1)])

    def test_tickers(self):
        self.assertEqual(query.tickers(self.ledger), ["ko", "pep"])


class TestAggregate(unittest.TestCase):
    def test_sums_per_currency_in_code_order(self):
        rows = [
            entry("2024-01-01", currency="USD", dividend=1.0, shares=10),
            entry("2024-02-01", currency="EUR", dividend=0.5, shares=10),
            entry("2024-03-01", currency="USD", dividend=0.25, shares=4),
        ]
        totals = query.aggregate_by_currency(rows)
        self.assertEqual(list(totals), ["EUR", "USD"])
        self.assertAlmostEqual(totals["EUR"], 5.0)
        self.assertAlmostEqual(totals["USD"], 11.0)

    def test_empty(self):
        self.assertEqual(query.aggregate_by_currency([]), {})

    def test_to_frame_columns(self):
        df = query.to_frame([entry("2024-01-01")])
        self.assertEqual(list(df.columns), query.FRAME_COLUMNS)
        self.assertAlmostEqual(df["total"].iloc[0], 5.0)


if __name__ == "__main__":
    unittest.main()
