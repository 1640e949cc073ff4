"""Exceptions raised while parsing a command line."""

from gettext import gettext as _

from extarg import settings


class ParseError(Exception):
    """Base class for every failure reported by the parser."""

    def __init__(
        self,
        reason: str,
        *,
        keyword: str | None = None,
        value: str | None = None,
        index: int | None = None,
        program: str = settings.UNKNOWN_PROGRAM_NAME,
    ):
        super().__init__(reason)
        self.reason = reason
        self.keyword = keyword
        self.value = value
        self.index = index
        self.program = program

    def __str__(self) -> str:
        """Format the error the way it is shown to the user."""
        return _("%(program)s: %(reason)s.") % {
            "program": self.program,
            "reason": self.reason,
        }


class UnknownKeyword(ParseError):
    """A token looks like a keyword but the command table does not define it."""

    def __init__(self, keyword: str, **kwargs):
        reason = _("unknown option '%(keyword)s'") % {"keyword": keyword}
        super().__init__(reason, keyword=keyword, **kwargs)


class MissingArgument(ParseError):
    """A keyword needs a following token but the command line ended."""

    def __init__(self, keyword: str, **kwargs):
        reason = _("option '%(keyword)s' needs an argument") % {"keyword": keyword}
        super().__init__(reason, keyword=keyword, **kwargs)


class InvalidArgument(ParseError):
    """
    A value was rejected.

    The parser raises this when a token cannot be converted to the type its
    keyword expects. Actions and anonymous-argument handlers may raise it too,
    with only a reason; the parser then fills in keyword, value and index.
    """


class HelpRequested(ParseError):
    """The user asked for help with `-help` or `--help`."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, **kwargs)
        self.message = message

    def __str__(self) -> str:
        """Return the full help message."""
        return self.message
