"""Command tables: keyword declarations, help text and documentation alignment."""

import re
from collections.abc import Sequence
from gettext import gettext as _
from typing import NamedTuple

from extarg import settings
from extarg.specs import OptionSpec, Symbol

# Splits a doc string into its argument placeholder and its description.
_DOC_PATTERN = re.compile(r"(\S*)\s*(.*)", re.DOTALL)


class Command(NamedTuple):
    """A keyword, the behavior associated with it and its documentation."""

    keyword: str
    spec: OptionSpec
    doc: str = ""


CommandTable = Sequence[Command]


def command(keyword: str, spec: OptionSpec, doc: str | None = None) -> Command:
    """
    Construct a new command.

    `doc` should explain both the behavior and the syntax of the keyword.
    Commands without documentation are accepted by the parser but are not
    listed in the usage message.
    """
    if not keyword.startswith(settings.KEYWORD_PREFIX):
        raise ValueError(
            _("Keyword '%(keyword)s' must start with '%(prefix)s'.")
            % {"keyword": keyword, "prefix": settings.KEYWORD_PREFIX}
        )
    return Command(keyword, spec, doc or "")


def missing_help_keywords(table: CommandTable) -> list[str]:
    """Return the built-in help keywords that the table does not override."""
    defined = {keyword for keyword, __, __ in table}
    return [keyword for keyword in settings.HELP_KEYWORDS if keyword not in defined]


def usage(table: CommandTable, usage_msg: str) -> str:
    """Build the usage message followed by the list of documented options."""
    lines = [usage_msg]
    for keyword, spec, doc in table:
        if not doc:
            continue
        if isinstance(spec, Symbol):
            symbols = "{" + "|".join(spec.values) + "}"
            lines.append(f"  {keyword} {symbols} {doc}")
        else:
            lines.append(f"  {keyword} {doc}")
    column = _column(table)
    for keyword in missing_help_keywords(table):
        doc = _pad(keyword, settings.HELP_DOC, max(column, len(keyword)))
        lines.append(f"  {keyword} {doc}")
    return "\n".join(lines) + "\n"


def _split_doc(doc: str) -> tuple[str, str]:
    """Split a doc string into (placeholder, description)."""
    placeholder, description = _DOC_PATTERN.fullmatch(doc).groups()
    return placeholder, description


def _alignable(spec: OptionSpec, doc: str) -> bool:
    return bool(doc) and not isinstance(spec, Symbol) and bool(_split_doc(doc)[1])


def _column(table: CommandTable) -> int:
    """Return the widest keyword plus placeholder among alignable commands."""
    widths = [
        len(keyword) + len(_split_doc(doc)[0])
        for keyword, spec, doc in table
        if _alignable(spec, doc)
    ]
    return max(widths, default=0)


def _pad(keyword: str, doc: str, column: int) -> str:
    placeholder, description = _split_doc(doc)
    padding = " " * (column - len(keyword) - len(placeholder) + 1)
    return f"{placeholder}{padding}{description}"


def align(table: CommandTable) -> list[Command]:
    """
    Align documentation strings so that descriptions start in the same column.

    The first word of a doc string is the placeholder of the keyword's argument
    (for example `<file>`); padding is inserted after it. Start a doc string
    with a space when the keyword takes no argument, so the whole string is
    treated as the description. Docs of `Symbol` commands are not aligned.
    """
    column = _column(table)
    aligned = []
    for keyword, spec, doc in table:
        if _alignable(spec, doc):
            doc = _pad(keyword, doc, column)
        aligned.append(Command(keyword, spec, doc))
    return aligned
