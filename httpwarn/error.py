"""
Errors raised when a Warning value can't be built.

All of them are ValueErrors; the scanning functions in httpwarn.warning
never raise them, only the constructor and parse() do.
"""

from typing import Any, Optional


class WarningError(ValueError):
    desc = "Invalid Warning value"

    def __init__(self, value: Any = None, detail: Optional[str] = None) -> None:
        ValueError.__init__(self, value, detail)
        self.value = value
        self.detail = detail

    def __str__(self) -> str:
        if self.detail:
            return f"{self.desc} ({self.detail}): {self.value!r}"
        return f"{self.desc}: {self.value!r}"


class WarnCodeError(WarningError):
    desc = "warn-code must be an integer between 0 and 999"


class WarnAgentError(WarningError):
    desc = "warn-agent must be a non-empty host or token"


class WarnTextError(WarningError):
    desc = "warn-text can't be represented as a quoted-string"


class WarnFormatError(WarningError):
    desc = "Not a valid Warning value"

    def __init__(
        self,
        value: Any = None,
        detail: Optional[str] = None,
        field: Optional[str] = None,
    ) -> None:
        WarningError.__init__(self, value, detail)
        self.field = field
