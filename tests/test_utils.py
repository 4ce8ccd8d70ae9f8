#!/usr/bin/env python3

import unittest
from datetime import datetime, timezone

from formreceipt.utils import format_arabic_date, get_timezone, parse_timestamp, utc_now_iso


class FormatArabicDateTest(unittest.TestCase):
    def test_afternoon(self) -> None:
        self.assertEqual(format_arabic_date('2026-10-18T14:30:00.000Z'), '18 أكتوبر 2026 في 02:30 م')

    def test_midnight_and_noon(self) -> None:
        self.assertEqual(format_arabic_date('2026-01-05T00:05:00Z'), '5 جانفي 2026 في 12:05 ص')
        self.assertEqual(format_arabic_date('2026-07-05T12:00:00+00:00'), '5 جويلية 2026 في 12:00 م')

    def test_datetime_input(self) -> None:
        value = datetime(2026, 8, 1, 9, 7, tzinfo=timezone.utc)
        self.assertEqual(format_arabic_date(value), '1 أوت 2026 في 09:07 ص')

    def test_unparseable_values_give_placeholder(self) -> None:
        for value in (None, '', 'yesterday', 42):
            self.assertEqual(format_arabic_date(value), 'N/A')

    def test_unknown_timezone_falls_back_to_utc(self) -> None:
        for tz_name in ('Not/AZone', '../etc'):
            with self.assertLogs('formreceipt.utils', level='WARNING'):
                self.assertEqual(format_arabic_date('2026-10-18T14:30:00.000Z', tz_name),
                                 '18 أكتوبر 2026 في 02:30 م')
        self.assertIs(get_timezone(None), timezone.utc)


class TimestampTest(unittest.TestCase):
    def test_now_round_trips(self) -> None:
        stamp = utc_now_iso()
        self.assertTrue(stamp.endswith('Z'))
        self.assertEqual(parse_timestamp(stamp).tzinfo, timezone.utc)

    def test_naive_is_treated_as_utc(self) -> None:
        self.assertEqual(parse_timestamp('2026-10-18T14:30:00').tzinfo, timezone.utc)


if __name__ == '__main__':
    unittest.main()
