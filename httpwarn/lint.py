"""
Checks for Warning field values.

WarningLinter.handle_input() is called for each field value; evaluate() is
called once all of them have been seen.
"""

from configparser import SectionProxy
from datetime import datetime
from functools import partial
from typing import Any, List, NamedTuple, Optional, Type
import unittest

from httpwarn import rules
from httpwarn.error import WarningError, WarnFormatError
from httpwarn.known import lookup
from httpwarn.notes import WARNING_BAD_SYNTAX, WARN_AGENT_BAD, WARN_CODE_BAD, WARN_TEXT_BAD
from httpwarn.speak import Note, categories, levels
from httpwarn.syntax import rfc7234
from httpwarn.type import AddNoteMethodType
from httpwarn.warning import WarningValue, parse

### configuration
MAX_VALUE_SIZE = 4 * 1024

FIELD_NOTES = {
    "code": WARN_CODE_BAD,
    "agent": WARN_AGENT_BAD,
    "text": WARN_TEXT_BAD,
}

FIELD_NAMES = {
    "code": "warn-code",
    "agent": "warn-agent",
    "text": "warn-text",
    "date": "warn-date",
    "end": "trailing characters",
}


class WarningLinter:
    """
    Parses and checks Warning field values.
    """

    canonical_name = "Warning"
    description = """\
The `Warning` header is used to carry additional information about the status or transformation of
a message that might not be reflected in it. It has been deprecated."""
    reference = f"{rfc7234.SPEC_URL}#header.warning"
    deprecated = True
    deprecation_ref = "https://httpwg.org/specs/rfc9111.html#field.warning"

    def __init__(self, config: Optional[SectionProxy] = None) -> None:
        self.max_value_size = MAX_VALUE_SIZE
        if config is not None:
            self.max_value_size = config.getint("max_value_size", fallback=MAX_VALUE_SIZE)
        self.value: List[WarningValue] = []

    def handle_input(
        self, field_value: str, add_note: AddNoteMethodType
    ) -> Optional[WarningValue]:
        """
        Basic input processing on a new field value. Returns the parsed value,
        or None if it couldn't be parsed.
        """
        if len(field_value) > self.max_value_size:
            add_note(
                WARNING_TOO_LARGE,
                value_size=len(field_value),
                max_size=self.max_value_size,
            )
        try:
            parsed_value = self.parse(field_value, add_note)
        except WarningError:
            return None  # the parser made a note of the problem.
        self.value.append(parsed_value)
        return parsed_value

    def parse(self, field_value: str, add_note: AddNoteMethodType) -> WarningValue:
        """
        Given a string value and an add_note function, parse and return the result.
        """
        try:
            value = parse(field_value)
        except WarnFormatError as why:
            note = FIELD_NOTES.get(why.field, WARNING_BAD_SYNTAX)
            add_note(
                note,
                field_value=field_value,
                part=FIELD_NAMES.get(why.field, "value"),
                ref_uri=self.reference,
            )
            raise

        if rules.number_length(field_value, 0) < 3:
            add_note(WARN_CODE_NOT_3DIGIT, warn_code=value.code)

        known_code = lookup(value.code)
        if known_code is None:
            add_note(WARN_CODE_UNKNOWN, warn_code=f"{value.code:03d}")
        else:
            add_note(
                WARN_CODE_PRESENT,
                warn_code=f"{known_code.code:03d}",
                warn_title=known_code.title,
                warn_ref=known_code.reference,
                lifetime="kept" if known_code.persistent else "removed",
            )

        address = rules.host_address(value.agent)
        if address is not None and not address.is_global():
            add_note(WARN_AGENT_LOCAL, warn_agent=value.agent)

        if value.date is not None:
            # only HTTP whitespace can follow the warn-date.
            close_quote = len(field_value.rstrip(" \t\r\n")) - 1
            date_str = field_value[field_value.rindex('"', 0, close_quote) + 1 : close_quote]
            if rules.is_obsolete_date(date_str):
                add_note(WARN_DATE_OBSOLETE, warn_date=date_str)
        return value

    def evaluate(
        self, add_note: AddNoteMethodType, message_date: Optional[datetime] = None
    ) -> None:
        """
        Called once all field values are processed; message_date is the
        message's Date header, if known.
        """
        if self.deprecated:
            add_note(WARNING_DEPRECATED, deprecation_ref=self.deprecation_ref)
        if message_date is None:
            return
        for value in self.value:
            if value.date is not None and value.date != message_date:
                add_note(
                    WARN_DATE_MISMATCH,
                    warn_value=str(value),
                    warn_date=rules.format_date(value.date),
                    message_date=rules.format_date(message_date),
                )


class NoteCollector:
    """
    Collects the notes set while checking, for reporting and testing.
    """

    def __init__(self) -> None:
        self.notes: List[Note] = []
        self.note_classes: List[str] = []

    def add_note(self, subject: str, note: Type[Note], **kw: Any) -> None:
        "Record the notes set."
        self.notes.append(note(subject, kw))
        self.note_classes.append(note.__name__)


class LintResult(NamedTuple):
    field_value: str
    value: Optional[WarningValue]
    notes: List[Note]


def lint(
    field_value: str,
    config: Optional[SectionProxy] = None,
    message_date: Optional[datetime] = None,
) -> LintResult:
    """
    Check a single Warning field value, returning the parsed value (if any)
    and the notes about it.
    """
    collector = NoteCollector()
    linter = WarningLinter(config)
    add_note = partial(
        collector.add_note, "field-value", field_name=linter.canonical_name
    )
    value = linter.handle_input(field_value, add_note)
    linter.evaluate(add_note, message_date)
    return LintResult(field_value, value, collector.notes)


class WARNING_DEPRECATED(Note):
    category = categories.GENERAL
    level = levels.WARN
    summary = "The %(field_name)s header is deprecated."
    text = """\
The `Warning` header was found to be rarely used and rarely shown to users, and it has been
obsoleted; see [its deprecation](%(deprecation_ref)s).

Senders should stop generating it, and recipients can ignore it."""


class WARNING_TOO_LARGE(Note):
    category = categories.GENERAL
    level = levels.WARN
    summary = "The %(field_name)s value is very large (%(value_size)s characters)."
    text = """\
Some implementations limit the size of any single header line. This value is larger than
%(max_size)s characters, which may cause it to be dropped or truncated."""


class WARN_CODE_NOT_3DIGIT(Note):
    category = categories.SYNTAX
    level = levels.WARN
    summary = "The warn-code %(warn_code)s isn't written with three digits."
    text = """\
warn-codes are always three digits long. Some recipients accept shorter codes and treat them as if
they had leading zeros, but others will reject the value."""


class WARN_CODE_UNKNOWN(Note):
    category = categories.CACHING
    level = levels.WARN
    summary = "The warn-code %(warn_code)s isn't registered."
    text = """\
The warn-code `%(warn_code)s` isn't one of the codes in the [HTTP Warn Codes
registry](https://www.iana.org/assignments/http-warn-codes/), so recipients won't be able to tell
what it means."""


class WARN_CODE_PRESENT(Note):
    category = categories.CACHING
    level = levels.INFO
    summary = "The response carries warning %(warn_code)s (%(warn_title)s)."
    text = """\
[Warning %(warn_code)s](%(warn_ref)s) is "%(warn_title)s".

Caches that successfully revalidate the response will keep warnings in the 2xx range and remove
those in the 1xx range; this one will be %(lifetime)s."""


class WARN_AGENT_LOCAL(Note):
    category = categories.GENERAL
    level = levels.INFO
    summary = "The warn-agent %(warn_agent)s isn't a public address."
    text = """\
The warn-agent identifies the server or intermediary that added the warning. `%(warn_agent)s` is
a loopback, private or otherwise non-global address, so it won't mean much to clients outside of
the network where the warning was generated."""


class WARN_DATE_OBSOLETE(Note):
    category = categories.SYNTAX
    level = levels.WARN
    summary = "The warn-date uses an obsolete date format."
    text = """\
HTTP dates are to be sent in the IMF-fixdate format, e.g., `Sun, 06 Nov 1994 08:49:37 GMT`.

`%(warn_date)s` uses one of the obsolete formats, which recipients are required to accept, but
senders must not generate."""


class WARN_DATE_MISMATCH(Note):
    category = categories.CACHING
    level = levels.BAD
    summary = "The warn-date doesn't match the message's Date."
    text = """\
When a warning carries a warn-date that is different from the `Date` header of the message (here,
%(warn_date)s against %(message_date)s), it was added by an earlier hop and the message has since
been stored and revalidated. Recipients have to remove such warnings, so `%(warn_value)s` will
be ignored."""


class LintTest(unittest.TestCase):
    """
    Testing machinery for Warning values.
    """

    inputs: List[str] = []
    expected_out: Any = []
    expected_err: List[Type[Note]] = []
    message_date: Optional[datetime] = None

    def test_lint(self) -> Any:
        "Test the values."
        if not self.inputs:
            return self.skipTest("")
        collector = NoteCollector()
        linter = WarningLinter()
        for offset, field_value in enumerate(self.inputs):
            linter.handle_input(
                field_value,
                partial(
                    collector.add_note,
                    f"offset-{offset}",
                    field_name=linter.canonical_name,
                ),
            )
        linter.evaluate(
            partial(collector.add_note, "warning", field_name=linter.canonical_name),
            self.message_date,
        )
        self.assertEqual(self.expected_out, linter.value)
        diff = {n.__name__ for n in self.expected_err}.symmetric_difference(
            set(collector.note_classes)
        )
        for note in collector.notes:  # check formatting
            self.assertTrue(note.show_summary())
            self.assertTrue(note.show_text())
        self.assertEqual(len(diff), 0, f"Mismatched notes: {diff}")
        return None
