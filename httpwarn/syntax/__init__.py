#!/usr/bin/env python

import re
import sys
from typing import List, Tuple

__all__ = [
    "rfc3986",
    "rfc5234",
    "rfc7230",
    "rfc7231",
    "rfc7234",
]


def check_regex() -> List[Tuple[str, str, re.error]]:
    """Compile all the regex in these modules, returning the ones that fail."""
    failures = []
    for module_name in __all__:
        full_name = f"httpwarn.syntax.{module_name}"
        __import__(full_name)
        module = sys.modules[full_name]
        for attr_name in dir(module):
            if attr_name.startswith("_") or attr_name == "SPEC_URL":
                continue
            attr_value = getattr(module, attr_name, None)
            if isinstance(attr_value, str):
                try:
                    re.compile(attr_value, re.VERBOSE)
                except re.error as why:
                    failures.append((module_name, attr_name, why))
    return failures


if __name__ == "__main__":
    for failure in check_regex():
        print("*", *failure)
