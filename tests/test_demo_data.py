import random
import unittest
from datetime import date

from stockcheck.services.demo_data import DemoDataGenerator


class TestDemoDataGenerator(unittest.TestCase):
    def setUp(self):
        self.generator = DemoDataGenerator(rng=random.Random(7), today=lambda: date(2025, 6, 30))

    def test_values_within_ranges(self):
        for _ in range(50):
            result = self.generator.generate(10)

            self.assertGreaterEqual(result.current_price, 50)
            self.assertLessEqual(result.current_price, 450)
            ratio = result.purchase_price / result.current_price
            self.assertGreaterEqual(ratio, 0.69)
            self.assertLessEqual(ratio, 1.31)
            self.assertGreaterEqual(result.daily_change_percent, -3)
            self.assertLessEqual(result.daily_change_percent, 7)
            self.assertLessEqual(abs(result.avg7 / result.current_price - 1), 0.041)
            self.assertLessEqual(abs(result.avg30 / result.current_price - 1), 0.051)
            self.assertEqual(result.investment_value, round(10 * result.purchase_price, 2))

    def test_series_covers_31_days_most_recent_first(self):
        series = self.generator.generate(1).time_series

        days = list(series)
        self.assertEqual(len(days), 31)
        self.assertEqual(days[0], "2025-06-30")
        self.assertEqual(days[-1], "2025-05-30")
        for bar in series.values():
            self.assertLessEqual(bar.low, bar.close)
            self.assertGreaterEqual(bar.high, bar.close)
            self.assertGreaterEqual(bar.volume, 0)
            self.assertLess(bar.volume, 10_000_000)

    def test_walk_steps_stay_within_band(self):
        series = self.generator.generate(1).time_series
        closes = [bar.close for bar in reversed(list(series.values()))]
        for prev, cur in zip(closes, closes[1:]):
            self.assertLessEqual(abs(cur / prev - 1), 0.0251)

    def test_unseeded_calls_differ(self):
        generator = DemoDataGenerator()
        first = generator.generate(1)
        second = generator.generate(1)
        self.assertNotEqual(first.time_series, second.time_series)


if __name__ == "__main__":
    unittest.main()
