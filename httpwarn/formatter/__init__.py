"""
Formatters for httpwarn output.
"""

from configparser import SectionProxy
import inspect
import sys
from typing import Any, Callable, Dict, List, Tuple, Type

from thor.events import EventEmitter

from httpwarn.lint import LintResult

# formatter name -> module name
_formatters = {
    "text": "text",
    "txt_verbose": "text",
    "html": "html",
}


def find_formatter(name: str, default: str = "text") -> Type["Formatter"]:
    """
    Find the formatter for name, and use default if it can't be found.
    """
    if name not in _formatters:
        name = default
    try:
        module_name = f"httpwarn.formatter.{_formatters[name]}"
        __import__(module_name)
        module = sys.modules[module_name]
    except (ImportError, KeyError, TypeError):
        return find_formatter(default)
    for candidate in list(module.__dict__.values()):
        if (
            inspect.isclass(candidate)
            and issubclass(candidate, Formatter)
            and getattr(candidate, "name") == name
        ):
            return candidate
    raise RuntimeError(f"Can't find a format in {list(_formatters)}")


FormatterArgs = Tuple[SectionProxy, Callable[[str], None], Dict[str, Any]]


def available_formatters() -> List[str]:
    """
    Return a list of the available formatter names.
    """
    return list(_formatters)


class Formatter(EventEmitter):
    """
    A formatter for the results of checking Warning values.

    Is available to UIs based upon the 'name' attribute. Emits
    'formatter_done' once all output has been written.
    """

    media_type: str  # the media type of the format.
    name = "base class"  # the name of the format.

    def __init__(
        self,
        config: SectionProxy,
        output: Callable[[str], None],
        params: Dict[str, Any],
    ) -> None:
        """
        Formatter writing to the callable output(uni_str). Output is Unicode;
        callee is responsible for encoding correctly.
        """
        EventEmitter.__init__(self)
        self.config = config
        self.output = output
        self.kw = params
        self.results: List[LintResult] = []

    def start_output(self) -> None:
        """
        Output whatever is needed before any results.
        """
        raise NotImplementedError

    def feed(self, result: LintResult) -> None:
        """
        Output the result of checking one value.
        """
        raise NotImplementedError

    def finish_output(self) -> None:
        """
        Output whatever is needed after all results.
        """
        raise NotImplementedError

    def format_all(self, results: List[LintResult]) -> None:
        "Format results from start to finish."
        self.start_output()
        for result in results:
            self.results.append(result)
            self.feed(result)
        self.finish_output()
        self.emit("formatter_done")
