"""Process-level entrypoint: parse sys.argv, print help or errors, and exit."""

import logging
import sys
from collections.abc import Sequence
from gettext import gettext as _

from extarg import errors, parser, settings
from extarg.table import CommandTable, usage

logger = logging.getLogger(__name__)


def handle(
    commands: CommandTable,
    usage_msg: str | None = None,
    argv: Sequence[str] | None = None,
) -> list[str]:
    """
    Parse the command line, apply `commands` and return the anonymous arguments.

    On `-help` or `--help` print the usage message and the documentation of
    `commands` to stdout, then exit successfully. On any other parse error
    print the error and the same help text to stderr, then exit with an error.
    """
    if argv is None:
        argv = sys.argv
    usage_msg = usage_msg or ""
    try:
        return parser.parse_argv(argv, commands, usage_msg=usage_msg)
    except errors.HelpRequested as e:
        logger.debug(_("Exiting after help request."))
        print(e.message, end="")
        sys.exit(settings.EXIT_HELP)
    except errors.ParseError as e:
        logger.debug(
            _("Exiting after parse error at index %(index)s."), {"index": e.index}
        )
        print(e, file=sys.stderr)
        print(usage(commands, usage_msg), end="", file=sys.stderr)
        sys.exit(settings.EXIT_ERROR)
