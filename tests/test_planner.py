import math
import unittest

from dividend_tracker import planner
from dividend_tracker.models import TickerStatistics


def ticker_stats(ticker, annual, price, currency="USD", per_year=4):
    return TickerStatistics(
        ticker=ticker,
        currency=currency,
        annual_dividend_per_share=annual,
        latest_price_per_share=price,
        payments_per_year=per_year,
        dividend_yield_percent=annual / price * 100 if price else 0.0,
    )


class TestPlanner(unittest.TestCase):
    def setUp(self):
        self.ko = ticker_stats("ko", 2.0, 50.0)
        self.sap = ticker_stats("sap", 1.0, 20.0, currency="EUR")

    def test_equal_split(self):
        self.assertEqual(planner.equal_split(500 * 12, [self.ko, self.sap]), [3000.0, 3000.0])

    def test_plan_rows(self):
        plan = planner.plan([self.ko, self.sap], 500, "USD", 10)
        ko, sap = plan.rows

        self.assertEqual(ko.shares_needed, 1500)
        self.assertAlmostEqual(ko.investment_native, 75000.0)
        self.assertAlmostEqual(ko.investment_target, 75000.0)
        self.assertAlmostEqual(ko.monthly_dividend_target, 250.0)

        # 1.0 EUR a year is 1.08 USD
        self.assertEqual(sap.shares_needed, math.ceil(3000 / 1.08))
        self.assertAlmostEqual(sap.investment_native, sap.shares_needed * 20.0)
        self.assertAlmostEqual(sap.investment_target, sap.shares_needed * 20.0 * 1.08)
        # rounding shares up overshoots the per-ticker target
        self.assertGreaterEqual(sap.monthly_dividend_target, 250.0)

    def test_plan_totals(self):
        plan = planner.plan([self.ko, self.sap], 500, "USD", 10)
        total = sum(r.investment_target for r in plan.rows)
        shares = sum(r.shares_needed for r in plan.rows)
        self.assertAlmostEqual(plan.total_investment, total)
        self.assertEqual(plan.total_shares, shares)
        self.assertAlmostEqual(plan.total_monthly_dividend,
                               sum(r.monthly_dividend_target for r in plan.rows))
        self.assertAlmostEqual(plan.monthly_investment, total / 120)
        self.assertAlmostEqual(plan.yearly_investment, total / 10)
        self.assertAlmostEqual(plan.shares_per_month, shares / 120)
        self.assertAlmostEqual(plan.shares_per_year, shares / 10)
        self.assertEqual(plan.target_currency, "USD")

    def test_zero_dividend_needs_no_shares(self):
        plan = planner.plan([ticker_stats("amzn", 0.0, 180.0)], 100, "USD", 5)
        self.assertEqual(plan.rows[0].shares_needed, 0)
        self.assertEqual(plan.total_investment, 0)

    def test_degenerate_inputs(self):
        self.assertIsNone(planner.plan([], 500, "USD", 10))
        self.assertIsNone(planner.plan([self.ko], 0, "USD", 10))
        self.assertIsNone(planner.plan([self.ko], -5, "USD", 10))

    def test_zero_horizon(self):
        plan = planner.plan([self.ko], 100, "USD", 0)
        self.assertEqual(plan.monthly_investment, 0)
        self.assertEqual(plan.yearly_investment, 0)
        self.assertEqual(plan.shares_per_month, 0)

    def test_custom_strategy(self):
        def all_in_first(target, stats):
            return [target] + [0.0] * (len(stats) - 1)

        plan = planner.plan([self.ko, self.sap], 100, "USD", 1, strategy=all_in_first)
        self.assertEqual(plan.rows[0].shares_needed, 600)
        self.assertEqual(plan.rows[1].shares_needed, 0)


if __name__ == "__main__":
    unittest.main()
