"""
Warn-codes registered in the HTTP Warn Codes registry.

  <https://www.iana.org/assignments/http-warn-codes/>
"""

from typing import Dict, NamedTuple, Optional

from httpwarn.syntax import rfc7234


class WarnCode(NamedTuple):
    code: int
    title: str
    reference: str

    @property
    def persistent(self) -> bool:
        return 200 <= self.code < 300


def _ref(section: str) -> str:
    return f"{rfc7234.SPEC_URL}#warn.{section}"


KNOWN_WARN_CODES: Dict[int, WarnCode] = {
    w.code: w
    for w in [
        WarnCode(110, "Response is Stale", _ref("110")),
        WarnCode(111, "Revalidation Failed", _ref("111")),
        WarnCode(112, "Disconnected Operation", _ref("112")),
        WarnCode(113, "Heuristic Expiration", _ref("113")),
        WarnCode(199, "Miscellaneous Warning", _ref("199")),
        WarnCode(214, "Transformation Applied", _ref("214")),
        WarnCode(299, "Miscellaneous Persistent Warning", _ref("299")),
    ]
}


def lookup(code: int) -> Optional[WarnCode]:
    return KNOWN_WARN_CODES.get(code)
