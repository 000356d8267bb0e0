#!/usr/bin/env python3

from configparser import ConfigParser
import unittest

import thor.events

from httpwarn.formatter import available_formatters, find_formatter
from httpwarn.formatter.html import HtmlFormatter
from httpwarn.formatter.text import TextFormatter, VerboseTextFormatter, strip_tags
from httpwarn.lint import lint


def make_config():
    config = ConfigParser()
    config.read_dict({"httpwarn": {}})
    return config["httpwarn"]


class FindFormatterTest(unittest.TestCase):
    def test_find(self):
        self.assertIs(find_formatter("text"), TextFormatter)
        self.assertIs(find_formatter("txt_verbose"), VerboseTextFormatter)
        self.assertIs(find_formatter("html"), HtmlFormatter)
        self.assertIs(find_formatter("nonexistent"), TextFormatter)
        self.assertIs(find_formatter("nonexistent", "html"), HtmlFormatter)

    def test_available(self):
        self.assertEqual(available_formatters(), ["text", "txt_verbose", "html"])


class FormatterOutputTest(unittest.TestCase):
    def setUp(self):
        self.results = [lint('199 fred "x"'), lint('199 fred x')]
        self.out = []

    def run_formatter(self, name, tty_out=False):
        formatter = find_formatter(name)(make_config(), self.out.append, {"tty_out": tty_out})
        done = []

        @thor.events.on(formatter)
        def formatter_done():
            done.append(True)

        formatter.format_all(self.results)
        self.assertEqual(done, [True])
        return "".join(self.out)

    def test_text(self):
        output = self.run_formatter("text")
        self.assertIn('199 fred "x"\n  -> 199 fred "x"\n', output)
        self.assertIn("  -> not a valid Warning value\n", output)
        self.assertIn("* Caching:\n  * The response carries warning 199 (Miscellaneous Warning).", output)
        self.assertIn("  * The Warning value's warn-text isn't a quoted-string.", output)
        self.assertTrue(output.endswith("2 value(s) checked, 1 invalid.\n"))
        self.assertNotIn("\033[", output)

    def test_text_color(self):
        output = self.run_formatter("text", tty_out=True)
        self.assertIn("\033[1;31mnot a valid Warning value\033[0;39m", output)

    def test_verbose_text(self):
        output = self.run_formatter("txt_verbose")
        self.assertIn("    Warning 199 is \"Miscellaneous Warning\".", output)
        self.assertIn("revalidate", output)
        self.assertNotIn("<p>", output)

    def test_html(self):
        output = self.run_formatter("html")
        self.assertTrue(output.startswith("<!DOCTYPE html>"))
        self.assertIn("<h2><code>199 fred &#34;x&#34;</code></h2>", output)
        self.assertIn('<p class="canonical"><code>199 fred &#34;x&#34;</code></p>', output)
        self.assertIn('<p class="bad">Not a valid Warning value.</p>', output)
        self.assertIn('<li class="info" data-category="Caching">', output)
        self.assertIn('<a href="http://httpwg.org/specs/rfc7234#warn.199">', output)
        self.assertTrue(output.endswith("</html>\n"))


class StripTagsTest(unittest.TestCase):
    def test_strip_tags(self):
        self.assertEqual(strip_tags("<p>a <code>b</code></p>"), "a b")


if __name__ == "__main__":
    unittest.main()
