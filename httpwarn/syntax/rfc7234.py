"""
Regex for the Warning header

These regex are derived from the collected ABNF in RFC7234, which carries
over the RFC2616 grammar for Warning:

  <http://httpwg.org/specs/rfc7234.html#collected.abnf>

They should be processed with re.VERBOSE.
"""

# pylint: disable=invalid-name

from .rfc3986 import port, host as uri_host
from .rfc5234 import DIGIT, DQUOTE, SP
from .rfc7230 import pseudonym, quoted_string
from .rfc7231 import HTTP_date

SPEC_URL = "http://httpwg.org/specs/rfc7234"

# warn-agent = ( uri-host [ ":" port ] ) / pseudonym

warn_agent = rf"(?: (?: {uri_host} (?: : {port} )? ) | {pseudonym} )"

# warn-code = 3DIGIT

warn_code = rf"{DIGIT}{{3}}"

# warn-date = DQUOTE HTTP-date DQUOTE

warn_date = rf"(?: {DQUOTE} {HTTP_date} {DQUOTE} )"

# warn-text = quoted-string

warn_text = quoted_string

# warning-value = warn-code SP warn-agent SP warn-text [ SP warn-date ]

warning_value = (
    rf"(?: {warn_code} {SP} {warn_agent} {SP} {warn_text} (?: {SP} {warn_date} )? )"
)
