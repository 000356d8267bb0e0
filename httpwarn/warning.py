"""
Warning header field values.

A Warning value looks like:

    199 fred "Miscellaneous warning" "Wed, 21 Oct 2015 07:28:00 GMT"

i.e., a warn-code, a warn-agent, a quoted warn-text and an optional quoted
warn-date. scan() finds one of these at a given offset without raising, so
that it can be used while walking through a longer string; parse() and the
WarningValue constructor raise a WarningError instead.
"""

from datetime import datetime, timezone
from typing import Any, Dict, NamedTuple, Optional, Tuple

from httpwarn import rules as default_rules
from httpwarn.error import (
    WarnAgentError,
    WarnCodeError,
    WarnFormatError,
    WarnTextError,
)
from httpwarn.type import GrammarRules

MAX_CODE = 999
MAX_CODE_LENGTH = 3


class WarningValue:
    """
    An immutable Warning value.

    agent is compared case-insensitively; text is compared exactly. text is
    stored without its surrounding quotes and escapes.
    """

    __slots__ = ("_code", "_agent", "_text", "_date")

    def __init__(
        self,
        code: int,
        agent: str,
        text: str,
        date: Optional[datetime] = None,
        rules: Optional[GrammarRules] = None,
    ) -> None:
        rules = rules or default_rules
        check_code(code)
        check_agent(agent, rules)
        check_text(text, rules)
        if date is not None:
            if not isinstance(date, datetime):
                raise TypeError(f"date must be a datetime, not {type(date).__name__}")
            if date.tzinfo is None:
                date = date.replace(tzinfo=timezone.utc)
        self._code = code
        self._agent = agent
        self._text = text
        self._date = date

    @classmethod
    def _from_fields(
        cls, code: int, agent: str, text: str, date: Optional[datetime]
    ) -> "WarningValue":
        "Build a value from fields that are already known to be valid."
        value = cls.__new__(cls)
        value._code = code
        value._agent = agent
        value._text = text
        value._date = date
        return value

    @property
    def code(self) -> int:
        return self._code

    @property
    def agent(self) -> str:
        return self._agent

    @property
    def text(self) -> str:
        return self._text

    @property
    def date(self) -> Optional[datetime]:
        return self._date

    @property
    def persistent(self) -> bool:
        "2xx warnings are kept after revalidation; 1xx warnings are not."
        return 200 <= self._code < 300

    def to_canonical_text(self) -> str:
        """
        Format the value for use in a header.

        text is quoted again on the way out, so the result can always be
        scanned back into an equal value. Output always uses the standard
        rules, whatever rules the value was scanned with, so a warn-date is
        always written as an IMF-fixdate.
        """
        out = [f"{self._code:03d}", self._agent, default_rules.quote_string(self._text)]
        if self._date is not None:
            out.append(f'"{default_rules.format_date(self._date)}"')
        return " ".join(out)

    __str__ = to_canonical_text

    def __repr__(self) -> str:
        args = [repr(self._code), repr(self._agent), repr(self._text)]
        if self._date is not None:
            args.append(repr(self._date))
        return f"WarningValue({', '.join(args)})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, WarningValue):
            return NotImplemented
        if (
            self._code != other._code
            or self._agent.lower() != other._agent.lower()
            or self._text != other._text
        ):
            return False
        if self._date is None:
            return other._date is None
        return other._date is not None and self._date == other._date

    def __hash__(self) -> int:
        result = hash(self._code) ^ hash(self._agent.lower()) ^ hash(self._text)
        if self._date is not None:
            result = result ^ hash(self._date)
        return result

    def __copy__(self) -> "WarningValue":
        return self._from_fields(self._code, self._agent, self._text, self._date)

    def __deepcopy__(self, memo: Dict[int, Any]) -> "WarningValue":
        return self.__copy__()

    def __getstate__(self) -> Tuple[int, str, str, Optional[datetime]]:
        return (self._code, self._agent, self._text, self._date)

    def __setstate__(self, state: Tuple[int, str, str, Optional[datetime]]) -> None:
        self._code, self._agent, self._text, self._date = state


def check_code(code: Any) -> None:
    if isinstance(code, bool) or not isinstance(code, int):
        raise WarnCodeError(code, "not an integer")
    if code < 0 or code > MAX_CODE:
        raise WarnCodeError(code, "out of range")


def check_agent(agent: Any, rules: Optional[GrammarRules] = None) -> None:
    rules = rules or default_rules
    if not isinstance(agent, str) or not agent:
        raise WarnAgentError(agent, "empty")
    # a token is a valid host, so this covers both.
    if rules.host_length(agent, 0, True) != len(agent):
        raise WarnAgentError(agent, "not a host or token")


def check_text(text: Any, rules: Optional[GrammarRules] = None) -> None:
    rules = rules or default_rules
    if not isinstance(text, str):
        raise WarnTextError(text, "not a string")
    quoted = rules.quote_string(text)
    if rules.quoted_string_length(quoted, 0) != len(quoted):
        raise WarnTextError(text)


class Scanned(NamedTuple):
    """
    The result of scanning for a Warning value.

    On success, value is set and length is the number of characters consumed.
    On failure, value is None, length is 0 and field names the part of the
    value that didn't match.
    """

    value: Optional[WarningValue]
    length: int
    field: Optional[str] = None


def _no_match(field: str) -> Scanned:
    return Scanned(None, 0, field)


def scan_warning(instr: str, start: int, rules: GrammarRules) -> Scanned:
    """
    Scan a Warning value in instr at start.

    Fields are read in order with no backtracking; the first one that doesn't
    match fails the whole value. Whitespace after the value is consumed.
    """
    if not instr or start >= len(instr):
        return _no_match("code")
    current = start

    # warn-code: up to three digits, then whitespace
    code_length = rules.number_length(instr, current)
    if code_length == 0 or code_length > MAX_CODE_LENGTH:
        return _no_match("code")
    code = int(instr[current : current + code_length])
    current += code_length
    whitespace_length = rules.whitespace_length(instr, current)
    current += whitespace_length
    if whitespace_length == 0 or current == len(instr):
        return _no_match("code")

    # warn-agent, then whitespace; something has to be left for warn-text
    agent_length = rules.host_length(instr, current, True)
    if agent_length == 0:
        return _no_match("agent")
    agent = instr[current : current + agent_length]
    current += agent_length
    whitespace_length = rules.whitespace_length(instr, current)
    current += whitespace_length
    if whitespace_length == 0 or current == len(instr):
        return _no_match("agent")

    # warn-text
    text_length = rules.quoted_string_length(instr, current)
    if text_length == 0:
        return _no_match("text")
    text = rules.unquote_string(instr[current : current + text_length])
    current += text_length

    # warn-date, if there's a quote after some whitespace
    date: Optional[datetime] = None
    whitespace_length = rules.whitespace_length(instr, current)
    current += whitespace_length
    if current < len(instr) and instr[current] == '"':
        if whitespace_length == 0:
            return _no_match("date")
        current += 1
        date_start = current
        date_end = instr.find('"', date_start)
        if date_end in (-1, date_start):
            return _no_match("date")
        date = rules.parse_date(instr[date_start:date_end])
        if date is None:
            return _no_match("date")
        current = date_end + 1
        current += rules.whitespace_length(instr, current)

    return Scanned(
        WarningValue._from_fields(code, agent, text, date),  # pylint: disable=protected-access
        current - start,
    )


def scan(
    instr: str, start: int = 0, rules: Optional[GrammarRules] = None
) -> Tuple[Optional[WarningValue], int]:
    """
    Look for a Warning value in instr at start.

    Returns the value and the number of characters consumed, or (None, 0) if
    there isn't one. Anything after the value is left for the caller.
    """
    scanned = scan_warning(instr, start, rules or default_rules)
    return scanned.value, scanned.length


def parse(instr: str, rules: Optional[GrammarRules] = None) -> WarningValue:
    """
    Parse instr, which must be a single Warning value (optionally surrounded by
    whitespace). Raises WarnFormatError if it isn't.
    """
    rules = rules or default_rules
    if not isinstance(instr, str) or not instr:
        raise WarnFormatError(instr, "empty", field="code")
    start = rules.whitespace_length(instr, 0)
    scanned = scan_warning(instr, start, rules)
    if scanned.value is None:
        raise WarnFormatError(instr, f"bad {scanned.field}", field=scanned.field)
    if start + scanned.length != len(instr):
        raise WarnFormatError(instr, "trailing characters", field="end")
    return scanned.value


def try_parse(
    instr: str, rules: Optional[GrammarRules] = None
) -> Optional[WarningValue]:
    "Like parse(), but returns None instead of raising."
    try:
        return parse(instr, rules)
    except WarnFormatError:
        return None
