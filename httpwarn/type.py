from datetime import datetime
from typing import Callable, Optional

from typing_extensions import Protocol

AddNoteMethodType = Callable[..., None]


class GrammarRules(Protocol):
    """
    The HTTP sub-grammars a Warning value is built from.

    Length functions return the number of characters matched at start, or 0 for
    no match; none of them raise on malformed input. The httpwarn.rules module
    satisfies this protocol.
    """

    def whitespace_length(self, instr: str, start: int) -> int: ...

    def number_length(self, instr: str, start: int) -> int: ...

    def host_length(self, instr: str, start: int, allow_token: bool = True) -> int: ...

    def quoted_string_length(self, instr: str, start: int) -> int: ...

    def unquote_string(self, instr: str) -> str: ...

    def quote_string(self, instr: str) -> str: ...

    def parse_date(self, value: str) -> Optional[datetime]: ...

    def format_date(self, value: datetime) -> str: ...
