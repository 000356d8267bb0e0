"""
Scanners for the HTTP primitives that a Warning value is made of.

Each *_length function looks at instr starting at start and returns the
length of the run it recognises there, or 0 when nothing matches. They never
raise for bad input, so they can be composed by a caller that is walking
through a larger string.
"""

from datetime import datetime, timezone
from email.utils import parsedate as lib_parsedate, format_datetime
import re
from typing import Optional

from netaddr import IPAddress, valid_ipv6  # type: ignore

from httpwarn.syntax import rfc3986, rfc5234, rfc7230, rfc7231

RE_FLAGS = re.VERBOSE

HOST_DELIMITERS = " \t\r\n,"

DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

_WHITESPACE = re.compile(rfc7230.LWS, RE_FLAGS)
_NUMBER = re.compile(rf"{rfc5234.DIGIT}*", RE_FLAGS)
_QUOTED_STRING = re.compile(rfc7230.quoted_string, RE_FLAGS)
_TOKEN = re.compile(rfc7230.token, RE_FLAGS)
_HOST_PORT = re.compile(
    rf"(?P<host> {rfc3986.host} ) (?: : {rfc3986.port} )?", RE_FLAGS
)
_IPV4 = re.compile(rfc3986.IPv4address, RE_FLAGS)
_IPVFUTURE = re.compile(rfc3986.IPvFuture, RE_FLAGS)
_HTTP_DATE = re.compile(rfc7231.HTTP_date, RE_FLAGS)
_OBS_DATE = re.compile(rfc7231.obs_date, RE_FLAGS)


def whitespace_length(instr: str, start: int) -> int:
    "Length of the SP / HTAB / obs-fold run at start."
    if start >= len(instr):
        return 0
    match = _WHITESPACE.match(instr, start)
    return match.end() - start if match else 0


def number_length(instr: str, start: int) -> int:
    "Length of the DIGIT run at start."
    if start >= len(instr):
        return 0
    match = _NUMBER.match(instr, start)
    return match.end() - start if match else 0


def host_length(instr: str, start: int, allow_token: bool = True) -> int:
    """
    Length of the host (with optional port) or token at start.

    The run ends at whitespace or a comma; a '/' inside it means it's a URI
    rather than a host, so nothing matches.
    """
    current = start
    while current < len(instr):
        char = instr[current]
        if char == "/":
            return 0
        if char in HOST_DELIMITERS:
            break
        current += 1
    candidate = instr[start:current]
    if not candidate:
        return 0
    if allow_token and _TOKEN.fullmatch(candidate):
        return len(candidate)
    if valid_host(candidate):
        return len(candidate)
    return 0


def valid_host(instr: str) -> bool:
    "Is instr a uri-host, optionally followed by a port?"
    match = _HOST_PORT.fullmatch(instr)
    if not match:
        return False
    host = match.group("host")
    if not host:
        return False
    if host[0] == "[":
        literal = host[1:-1]
        return bool(valid_ipv6(literal) or _IPVFUTURE.fullmatch(literal))
    return True


def host_address(instr: str) -> Optional[IPAddress]:
    """
    If instr is a host that is an IP literal or IPv4 address, return the
    address; otherwise None.
    """
    match = _HOST_PORT.fullmatch(instr)
    if not match:
        return None
    host = match.group("host")
    if host.startswith("[") and valid_ipv6(host[1:-1]):
        return IPAddress(host[1:-1])
    if _IPV4.fullmatch(host):
        return IPAddress(host)
    return None


def quoted_string_length(instr: str, start: int) -> int:
    "Length of the quoted-string at start, quotes included."
    if start >= len(instr) or instr[start] != '"':
        return 0
    match = _QUOTED_STRING.match(instr, start)
    return match.end() - start if match else 0


def unquote_string(instr: str) -> str:
    """
    Remove the quotes around a quoted-string and resolve its quoted-pairs.

    Strings that aren't quoted are returned as they are.
    """
    if len(instr) > 1 and instr[0] == instr[-1] == '"':
        return re.sub(r"\\(.)", r"\1", instr[1:-1])
    return instr


def quote_string(instr: str) -> str:
    "Wrap instr in quotes, escaping the characters that need it."
    return '"' + re.sub(r'(["\\])', r"\\\1", instr) + '"'


def parse_date(value: str) -> Optional[datetime]:
    """
    Parse a HTTP-date into an aware UTC datetime; return None if it's bad.

    All three HTTP-date forms are accepted. The day name has to agree with
    the date.
    """
    if not _HTTP_DATE.fullmatch(value):
        return None
    date_tuple = lib_parsedate(value)
    if date_tuple is None:
        return None
    try:
        date = datetime(*date_tuple[:6], tzinfo=timezone.utc)
    except ValueError:
        return None
    # every form starts with the day name; rfc850 spells it out in full.
    if value[:3] != DAY_NAMES[date.weekday()]:
        return None
    return date


def is_obsolete_date(value: str) -> bool:
    "Is value a HTTP-date in one of the obsolete (rfc850 or asctime) forms?"
    return bool(_OBS_DATE.fullmatch(value))


def format_date(value: datetime) -> str:
    "Format value as an IMF-fixdate, e.g. 'Wed, 21 Oct 2015 07:28:00 GMT'."
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return format_datetime(value.astimezone(timezone.utc), usegmt=True)
