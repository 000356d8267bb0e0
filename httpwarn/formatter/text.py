"""
Text Formatter for httpwarn.
"""

from html import unescape
from html.parser import HTMLParser
import re
import textwrap
from typing import List, Optional
from typing_extensions import Unpack

from httpwarn.formatter import Formatter, FormatterArgs
from httpwarn.lint import LintResult
from httpwarn.speak import Note, categories, levels

NL = "\n"


class TextFormatter(Formatter):
    """
    Format the results of checking Warning values as text.
    """

    name = "text"
    media_type = "text/plain"

    note_categories = [
        categories.SYNTAX,
        categories.CACHING,
        categories.GENERAL,
    ]

    def __init__(self, *args: Unpack[FormatterArgs]) -> None:
        Formatter.__init__(self, *args)
        self.verbose = False

    def start_output(self) -> None:
        pass

    def feed(self, result: LintResult) -> None:
        out = [self.colorize(None, result.field_value)]
        if result.value is None:
            out.append(f"  -> {self.colorize(levels.BAD, 'not a valid Warning value')}")
        else:
            out.append(f"  -> {result.value}")
        self.output(NL.join(out) + NL + self.format_notes(result.notes) + NL)

    def finish_output(self) -> None:
        bad = len([r for r in self.results if r.value is None])
        self.output(f"{len(self.results)} value(s) checked, {bad} invalid.{NL}")

    def format_notes(self, notes: List[Note]) -> str:
        out = []
        for category in self.note_categories:
            category_notes = [note for note in notes if note.category == category]
            if not category_notes:
                continue
            out.append(f"* {category.value}:")
            for note in category_notes:
                out.append(f"  * {self.colorize(note.level, note.show_summary())}")
                if self.verbose:
                    out.append("")
                    out.extend("    " + line for line in self.format_text(note))
                    out.append("")
        return NL.join(out) + NL if out else ""

    @staticmethod
    def format_text(note: Note) -> List[str]:
        return textwrap.wrap(
            unescape(strip_tags(re.sub(r"(?m)\s\s+", " ", note.show_text())))
        )

    def colorize(self, level: Optional[levels], instr: str) -> str:
        if self.kw.get("tty_out", False):
            color_end = "\033[0;39m"
            if level == levels.GOOD:
                color_start = "\033[1;32m"
            elif level == levels.BAD:
                color_start = "\033[1;31m"
            elif level == levels.WARN:
                color_start = "\033[1;33m"
            elif level == levels.INFO:
                color_start = "\033[1;34m"
            else:
                color_start = "\033[0;32m"
            return color_start + instr + color_end
        return instr


class VerboseTextFormatter(TextFormatter):
    name = "txt_verbose"

    def __init__(self, *args: Unpack[FormatterArgs]) -> None:
        TextFormatter.__init__(self, *args)
        self.verbose = True


class MLStripper(HTMLParser):
    def __init__(self) -> None:
        HTMLParser.__init__(self)
        self.reset()
        self.fed: List[str] = []

    def handle_data(self, data: str) -> None:
        self.fed.append(data)

    def get_data(self) -> str:
        return "".join(self.fed)


def strip_tags(html: str) -> str:
    stripper = MLStripper()
    stripper.feed(html)
    return stripper.get_data()
