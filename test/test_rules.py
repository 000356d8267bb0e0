#!/usr/bin/env python3

from datetime import datetime, timezone
import unittest

from netaddr import IPAddress

from httpwarn import rules


class LengthTest(unittest.TestCase):
    def test_whitespace_length(self):
        i = 0
        for (instr, start, expected) in [
            ("a  \tb", 1, 3),
            ("a\r\n b", 1, 3),
            ("a\r\nb", 1, 0),
            ("ab", 1, 0),
            ("a", 1, 0),
            ("", 0, 0),
        ]:
            self.assertEqual(
                expected, rules.whitespace_length(instr, start), f"[{i}] {instr!r}"
            )
            i += 1

    def test_number_length(self):
        self.assertEqual(rules.number_length("1234x", 0), 4)
        self.assertEqual(rules.number_length("x12", 1), 2)
        self.assertEqual(rules.number_length("x1", 0), 0)
        self.assertEqual(rules.number_length("١٢", 0), 0)
        self.assertEqual(rules.number_length("1", 5), 0)

    def test_host_length(self):
        i = 0
        for (instr, start, allow_token, expected) in [
            ("fred rest", 0, True, 4),
            ("fred,rest", 0, True, 4),
            ("fred\trest", 0, True, 4),
            ("example.com:8080 x", 0, True, 16),
            ("[::1] x", 0, True, 5),
            ("[::1]:80", 0, True, 8),
            ("[v1.fe80::a+en1]", 0, True, 16),
            ("[zz] x", 0, True, 0),
            ("a/b", 0, True, 0),
            ("a#b", 0, True, 3),
            ("a#b", 0, False, 0),
            ("a%20b", 0, False, 5),
            (",x", 0, True, 0),
            ("x fred", 2, True, 4),
            ("", 0, True, 0),
        ]:
            self.assertEqual(
                expected,
                rules.host_length(instr, start, allow_token),
                f"[{i}] {instr!r}",
            )
            i += 1

    def test_quoted_string_length(self):
        i = 0
        for (instr, start, expected) in [
            ('"abc" x', 0, 5),
            (r'"a\"b" x', 0, 6),
            ('""', 0, 2),
            ('x "a"', 2, 3),
            ('x "a"', 1, 0),
            ("abc", 0, 0),
            ('"abc', 0, 0),
            ('"a\x01"', 0, 0),
        ]:
            self.assertEqual(
                expected, rules.quoted_string_length(instr, start), f"[{i}] {instr!r}"
            )
            i += 1


class QuotingTest(unittest.TestCase):
    def test_unquote_string(self):
        i = 0
        for (instr, expected_str) in [
            ("foo", "foo"),
            ('"foo"', "foo"),
            (r'"fo\"o"', 'fo"o'),
            (r'"f\"o\"o"', 'f"o"o'),
            (r'"fo\\o"', r"fo\o"),
            (r'"f\\o\\o"', r"f\o\o"),
            (r'"fo\o"', "foo"),
            ('""', ""),
            ('"', '"'),
        ]:
            out_str = rules.unquote_string(instr)
            self.assertEqual(
                expected_str, out_str, f"[{i}] {expected_str} != {out_str}"
            )
            i += 1

    def test_quote_string(self):
        self.assertEqual(rules.quote_string("foo"), '"foo"')
        self.assertEqual(rules.quote_string('fo"o'), r'"fo\"o"')
        self.assertEqual(rules.quote_string("fo\\o"), r'"fo\\o"')
        self.assertEqual(rules.quote_string(""), '""')


class DateTest(unittest.TestCase):
    def test_parse_date(self):
        nov_6 = datetime(1994, 11, 6, 8, 49, 37, tzinfo=timezone.utc)
        for instr in [
            "Sun, 06 Nov 1994 08:49:37 GMT",
            "Sunday, 06-Nov-94 08:49:37 GMT",
            "Sun Nov  6 08:49:37 1994",
        ]:
            self.assertEqual(rules.parse_date(instr), nov_6, instr)

    def test_bad_date(self):
        for instr in [
            "",
            "yesterday",
            "Sun, 6 Nov 1994 08:49:37 GMT",
            "Sun, 06 Nov 1994 08:49:37 PST",
            "Wed, 32 Oct 2015 07:28:00 GMT",
            "Wed, 21 Oct 2015 25:28:00 GMT",
            " Wed, 21 Oct 2015 07:28:00 GMT",
            "Mon, 21 Oct 2015 07:28:00 GMT",
            "Monday, 21-Oct-15 07:28:00 GMT",
            "Mon Oct 21 07:28:00 2015",
        ]:
            self.assertIsNone(rules.parse_date(instr), instr)

    def test_is_obsolete_date(self):
        self.assertFalse(rules.is_obsolete_date("Sun, 06 Nov 1994 08:49:37 GMT"))
        self.assertTrue(rules.is_obsolete_date("Sunday, 06-Nov-94 08:49:37 GMT"))
        self.assertTrue(rules.is_obsolete_date("Sun Nov  6 08:49:37 1994"))

    def test_format_date(self):
        self.assertEqual(
            rules.format_date(datetime(2015, 10, 21, 7, 28, tzinfo=timezone.utc)),
            "Wed, 21 Oct 2015 07:28:00 GMT",
        )
        self.assertEqual(
            rules.format_date(datetime(1994, 11, 6, 8, 49, 37)),
            "Sun, 06 Nov 1994 08:49:37 GMT",
        )


class HostAddressTest(unittest.TestCase):
    def test_host_address(self):
        self.assertEqual(rules.host_address("127.0.0.1"), IPAddress("127.0.0.1"))
        self.assertEqual(rules.host_address("10.1.2.3:3128"), IPAddress("10.1.2.3"))
        self.assertEqual(rules.host_address("[::1]:80"), IPAddress("::1"))
        self.assertIsNone(rules.host_address("fred"))
        self.assertIsNone(rules.host_address("999.1.1.1"))
        self.assertIsNone(rules.host_address("my#agent"))


if __name__ == "__main__":
    unittest.main()
