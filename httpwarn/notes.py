"""
Notes about Warning values that don't parse.
"""

from httpwarn.speak import Note, categories, levels


class WARNING_BAD_SYNTAX(Note):
    category = categories.SYNTAX
    level = levels.BAD
    summary = "The %(field_name)s value's syntax isn't valid."
    text = """\
The value `%(field_value)s` doesn't conform to the syntax of a Warning value:

    warn-code SP warn-agent SP warn-text [ SP warn-date ]

The problem was found in its %(part)s; see [its definition](%(ref_uri)s) for more
information. Recipients will ignore the whole value."""


class WARN_CODE_BAD(Note):
    category = categories.SYNTAX
    level = levels.BAD
    summary = "The %(field_name)s value doesn't start with a valid warn-code."
    text = """\
Each Warning value starts with a three-digit warn-code, followed by a space. `%(field_value)s`
doesn't; recipients will ignore it."""


class WARN_AGENT_BAD(Note):
    category = categories.SYNTAX
    level = levels.BAD
    summary = "The %(field_name)s value's warn-agent isn't valid."
    text = """\
The warn-agent identifies the server or intermediary that added the warning, using either its host
name (with an optional port) or a pseudonym token. It has to be followed by a space and the
warn-text.

In `%(field_value)s`, it isn't; recipients will ignore the value."""


class WARN_TEXT_BAD(Note):
    category = categories.SYNTAX
    level = levels.BAD
    summary = "The %(field_name)s value's warn-text isn't a quoted-string."
    text = """\
The warn-text is a human-readable explanation of the warning, and it has to be enclosed in double
quotes, with any quotes or backslashes inside it escaped by a backslash.

In `%(field_value)s`, it isn't; recipients will ignore the value."""
