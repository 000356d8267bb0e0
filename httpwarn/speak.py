"""
The notes that httpwarn can emit about a Warning value.

PLEASE NOTE: the summary field is interpolated as-is, so it can contain
arbitrary text (as long as it's unicode).

The longer text field is markdown; the variables interpolated into it are
HTML-escaped before it is rendered.
"""

from enum import Enum
from typing import Any, Dict, Optional, Union

from markdown import markdown
from markupsafe import Markup, escape


class categories(Enum):
    "Note classifications."
    GENERAL = "General"
    CACHING = "Caching"
    SYNTAX = "Syntax"


class levels(Enum):
    "Note levels."
    GOOD = "good"
    WARN = "warning"
    BAD = "bad"
    INFO = "info"


class Note:
    """
    A note about a Warning field value.
    """

    category: categories
    level: levels
    summary = ""
    text = ""

    def __init__(
        self, subject: str, vrs: Optional[Dict[str, Union[str, int]]] = None
    ) -> None:
        self.subject = subject
        self.vars = vrs or {}

    def __eq__(self, other: Any) -> bool:
        return bool(
            self.__class__ == other.__class__
            and self.vars == other.vars
            and self.subject == other.subject
        )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.subject}>"

    def show_summary(self) -> str:
        """
        Output a textual summary of the note as a Unicode string.

        If it is displayed in an environment that needs encoding (e.g., HTML),
        that is *NOT* done.
        """
        return self.summary % self.vars

    def show_text(self) -> Markup:
        """
        Show the HTML text for the note as a Unicode string.

        The resulting string is already HTML-encoded.
        """
        return Markup(
            markdown(
                self.text % {k: escape(str(v)) for k, v in self.vars.items()},
                output_format="html",
            )
        )
