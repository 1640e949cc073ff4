"""Scan a command line against a table of keyword specifications."""

import contextlib
import logging
import os
import sys
from collections.abc import Callable, Iterator, Sequence
from gettext import gettext as _
from typing import Any

from extarg import errors, settings
from extarg.specs import OptionSpec
from extarg.table import CommandTable, missing_help_keywords, usage

logger = logging.getLogger(__name__)

AnonFun = Callable[[str], Any]


class Cursor:
    """
    Position of the scan within the token sequence.

    Option specs pull their arguments through a cursor. When the keyword was
    written as `-key=value`, `value` is handed out before any following token.
    """

    def __init__(
        self,
        tokens: Sequence[str],
        index: int,
        keyword: str,
        follow: str | None = None,
    ):
        self.tokens = tokens
        self.index = index
        self.keyword = keyword
        self.follow = follow
        self.value: str | None = None

    def next_token(self) -> str:
        """Return the next argument of the current keyword."""
        if self.follow is not None:
            self.value, self.follow = self.follow, None
        elif self.index < len(self.tokens):
            self.value = self.tokens[self.index]
            self.index += 1
        else:
            raise errors.MissingArgument(self.keyword)
        return self.value

    def take(self, convert: Callable[[str], Any], expected: str) -> Any:
        """Return the next argument converted, or reject it."""
        token = self.next_token()
        try:
            return convert(token)
        except ValueError as error:
            reason = _(
                "wrong argument '%(value)s'; option '%(keyword)s' expects %(expected)s"
            ) % {"value": token, "keyword": self.keyword, "expected": expected}
            raise errors.InvalidArgument(
                reason, keyword=self.keyword, value=token
            ) from error

    def no_argument(self) -> None:
        """Reject a `=value` given to a keyword that takes no argument."""
        if self.follow is not None:
            reason = _(
                "wrong argument '%(value)s'; option '%(keyword)s' expects no argument"
            ) % {"value": self.follow, "keyword": self.keyword}
            raise errors.InvalidArgument(
                reason, keyword=self.keyword, value=self.follow
            )

    @contextlib.contextmanager
    def follow_held(self) -> Iterator[None]:
        """Keep a pending `=value` away from a spec that takes no argument."""
        follow, self.follow = self.follow, None
        try:
            yield
        finally:
            self.follow = follow

    def drain(self) -> Iterator[str]:
        """Yield every remaining token, consuming them all."""
        if self.follow is not None:
            yield self.next_token()
        while self.index < len(self.tokens):
            yield self.next_token()


def default_program_name() -> str:
    """Return the name of the running program, as shown in error messages."""
    if sys.argv and sys.argv[0]:
        return os.path.basename(sys.argv[0])
    return settings.UNKNOWN_PROGRAM_NAME


def _build_lookup(table: CommandTable) -> dict[str, OptionSpec]:
    lookup: dict[str, OptionSpec] = {}
    for keyword, spec, __ in table:
        lookup.setdefault(keyword, spec)  # first match wins
    return lookup


def _split_keyword(
    token: str, lookup: dict[str, OptionSpec]
) -> tuple[str, str | None]:
    """Split `-key=value` when `-key` is a known keyword."""
    if token in lookup or settings.VALUE_SEPARATOR not in token:
        return token, None
    keyword, __, follow = token.partition(settings.VALUE_SEPARATOR)
    if keyword in lookup:
        return keyword, follow
    return token, None


def parse(  # noqa: PLR0913
    tokens: Sequence[str],
    table: CommandTable,
    anon_fun: AnonFun | None = None,
    usage_msg: str = "",
    *,
    start: int = 0,
    program: str | None = None,
) -> list[str]:
    """
    Parse `tokens` and return the anonymous arguments in order of appearance.

    Scanning begins at `tokens[start]`. Actions of matched keywords and
    `anon_fun` are called in the same order as their tokens appear. `-help`
    and `--help` raise HelpRequested unless the table defines them.

    Raises a ParseError subclass on the first failure; its `index` is the
    position in `tokens` of the offending keyword or anonymous argument.
    """
    if program is None:
        program = default_program_name()
    lookup = _build_lookup(table)
    help_keywords = missing_help_keywords(table)
    anonymous: list[str] = []

    index = start
    while index < len(tokens):
        token = tokens[index]
        position = index
        try:
            if not token.startswith(settings.KEYWORD_PREFIX):
                logger.debug(_("Anonymous argument '%(token)s'."), {"token": token})
                if anon_fun is not None:
                    try:
                        anon_fun(token)
                    except errors.InvalidArgument as error:
                        if error.value is None:
                            error.value = token
                        raise
                anonymous.append(token)
                index += 1
                continue

            if token in help_keywords:
                logger.debug(_("Help requested with '%(token)s'."), {"token": token})
                raise errors.HelpRequested(usage(table, usage_msg))

            keyword, follow = _split_keyword(token, lookup)
            if keyword not in lookup:
                raise errors.UnknownKeyword(keyword)

            logger.debug(_("Matched option '%(keyword)s'."), {"keyword": keyword})
            cursor = Cursor(tokens, index + 1, keyword, follow)
            try:
                lookup[keyword].apply(cursor)
            except errors.InvalidArgument as error:
                if error.keyword is None:
                    error.keyword = keyword
                if error.value is None:
                    error.value = cursor.value
                raise
            index = cursor.index
        except errors.ParseError as error:
            error.program = program
            if error.index is None:
                error.index = position
            raise

    return anonymous


def parse_argv(  # noqa: PLR0913
    argv: Sequence[str],
    table: CommandTable,
    anon_fun: AnonFun | None = None,
    usage_msg: str = "",
    *,
    current: int = 0,
) -> list[str]:
    """
    Parse `argv` as if it were the process command line.

    `argv[current]` is the program name; parsing starts right after it.
    """
    program = (
        os.path.basename(argv[current])
        if current < len(argv)
        else settings.UNKNOWN_PROGRAM_NAME
    )
    return parse(
        argv, table, anon_fun, usage_msg, start=current + 1, program=program
    )
