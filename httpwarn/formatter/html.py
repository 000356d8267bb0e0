"""
HTML Formatter for httpwarn.
"""

from typing import List
from typing_extensions import Unpack

from markupsafe import Markup, escape

from httpwarn import __version__
from httpwarn.formatter import Formatter, FormatterArgs
from httpwarn.lint import LintResult
from httpwarn.speak import Note

NL = "\n"


class HtmlFormatter(Formatter):
    """
    Format the results of checking Warning values as a HTML page.
    """

    name = "html"
    media_type = "text/html"

    def __init__(self, *args: Unpack[FormatterArgs]) -> None:
        Formatter.__init__(self, *args)
        self.charset = self.config.get("charset", "utf-8")

    def start_output(self) -> None:
        self.output(
            f"""\
<!DOCTYPE html>
<html>
<head>
<meta charset="{escape(self.charset)}">
<meta name="generator" content="httpwarn {__version__}">
<title>Warning header check</title>
</head>
<body>
"""
        )

    def feed(self, result: LintResult) -> None:
        out = [
            '<div class="result">',
            f"<h2><code>{escape(result.field_value)}</code></h2>",
        ]
        if result.value is None:
            out.append('<p class="bad">Not a valid Warning value.</p>')
        else:
            out.append(f'<p class="canonical"><code>{escape(str(result.value))}</code></p>')
        out.append(self.format_notes(result.notes))
        out.append("</div>")
        self.output(NL.join(out) + NL)

    def finish_output(self) -> None:
        self.output("</body>\n</html>\n")

    @staticmethod
    def format_notes(notes: List[Note]) -> Markup:
        if not notes:
            return Markup("")
        out = ['<ul class="notes">']
        for note in notes:
            out.append(
                f'<li class="{note.level.value}" data-category="{note.category.value}">'
                f"<span class=\"summary\">{escape(note.show_summary())}</span>"
                f'<div class="detail">{note.show_text()}</div></li>'
            )
        out.append("</ul>")
        return Markup(NL.join(out))
