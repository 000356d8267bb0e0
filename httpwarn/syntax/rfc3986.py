"""
Regex for URI hosts

These regex are derived from the collected ABNF in RFC3986, limited to the
authority rules a warn-agent or received-by can use:

  https://tools.ietf.org/html/rfc3986#appendix-A

They should be processed with re.VERBOSE.
"""

# pylint: disable=invalid-name

from .rfc5234 import DIGIT, ALPHA, HEXDIG


#   pct-encoded   = "%" HEXDIG HEXDIG
pct_encoded = rf"(?: % {HEXDIG} {HEXDIG} )"

#   unreserved    = ALPHA / DIGIT / "-" / "." / "_" / "~"
unreserved = rf"(?: {ALPHA} | {DIGIT} | \- | \. | _ | ~ )"

#   sub-delims    = "!" / "$" / "&" / "'" / "(" / ")"
#                 / "*" / "+" / "," / ";" / "="
sub_delims = r"""(?: ! | \$ | & | ' | \( | \) |
                     \* | \+ | , | ; | = )"""

#   dec-octet     = DIGIT                 ; 0-9
#                 / %x31-39 DIGIT         ; 10-99
#                 / "1" 2DIGIT            ; 100-199
#                 / "2" %x30-34 DIGIT     ; 200-249
#                 / "25" %x30-35          ; 250-255
dec_octet = rf"""(?: 25 [\x30-\x35] |
                    2 [\x30-\x34] {DIGIT} |
                    1 {DIGIT}{{2}} |
                    [\x31-\x39] {DIGIT} |
                    {DIGIT}
                )
"""

#  IPv4address   = dec-octet "." dec-octet "." dec-octet "." dec-octet
IPv4address = rf"(?: {dec_octet} \. {dec_octet} \. {dec_octet} \. {dec_octet} )"

#   IPvFuture     = "v" 1*HEXDIG "." 1*( unreserved / sub-delims / ":" )
IPvFuture = rf"(?: v {HEXDIG}+ \. (?: {unreserved} | {sub_delims} | : )+ )"

#   IP-literal    = "[" ( IPv6address / IPvFuture  ) "]"
#
# IPv6address is not spelled out here; the bracketed span is handed to
# netaddr instead (see httpwarn.rules.host_length).
IP_literal_span = r"\[ [^\[\]]+ \]"

#   reg-name      = *( unreserved / pct-encoded / sub-delims )
reg_name = rf"(?: {unreserved} | {pct_encoded} | {sub_delims} )*"

#   host          = IP-literal / IPv4address / reg-name
#
# IPv4address is a subset of reg-name, so it does not need its own branch
# to match; it is kept separately so that literals can be recognised.
host = rf"(?: {IP_literal_span} | {reg_name} )"

#   port          = *DIGIT
port = rf"(?: {DIGIT} )*"
