"""
Regex for RFC7230

These regex are derived from the collected ABNF in RFC7230:

  <http://httpwg.org/specs/rfc7230.html#collected.abnf>

They should be processed with re.VERBOSE.
"""

# pylint: disable=invalid-name, line-too-long

from .rfc5234 import (
    ALPHA,
    CRLF,
    DIGIT,
    HTAB,
    SP,
    VCHAR,
)

SPEC_URL = "http://httpwg.org/specs/rfc7230"


## Basics

# obs-fold = CRLF 1*( SP / HTAB )

obs_fold = rf"(?: {CRLF} (?: {SP} | {HTAB} )+ )"

# Whitespace as a recipient sees it between the parts of a field value:
# SP and HTAB, plus any obsolete line folding.

LWS = rf"(?: {SP} | {HTAB} | {obs_fold} )*"

# obs-text = %x80-FF

obs_text = r"[\x80-\xff]"

# tchar = "!" / "#" / "$" / "%" / "&" / "'" / "*" / "+" / "-" / "." / "^" / "_" / "`" / "|" / "~" / DIGIT / ALPHA

tchar = rf"(?: ! | \# | \$ | % | & | ' | \* | \+ | \- | \. | \^ | _ | ` | \| | \~ | {DIGIT} | {ALPHA} )"

# token = 1*tchar

token = rf"{tchar}+"

# qdtext = HTAB / SP / "!" / %x23-5B ; '#'-'['
#  / %x5D-7E ; ']'-'~'
#  / obs-text

qdtext = r"[\t !\x23-\x5b\x5d-\x7e\x80-\xff]"

# quoted-pair = "\" ( HTAB / SP / VCHAR / obs-text )

quoted_pair = rf"(?: \\ (?: {HTAB} | {SP} | {VCHAR} | {obs_text} ) )"

# quoted-string = DQUOTE *( qdtext / quoted-pair ) DQUOTE

quoted_string = rf"(?: \" (?: {qdtext} | {quoted_pair} )* \" )"

# pseudonym = token

pseudonym = token