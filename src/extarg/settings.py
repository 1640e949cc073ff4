"""Global configuration settings for extarg."""

from gettext import gettext as _

KEYWORD_PREFIX = "-"  # a token starting with this is a keyword, not an anonymous arg
VALUE_SEPARATOR = "="  # splits "-key=value" into a keyword and its first argument

# Recognized unless the command table defines keywords with the same names.
HELP_KEYWORDS = ("-help", "--help")
HELP_DOC = _(" Display this list of options")

# Locale-independent boolean spellings, as accepted on the command line.
BOOL_LITERALS = {"true": True, "false": False}

# Used in error messages when the program name cannot be determined.
UNKNOWN_PROGRAM_NAME = "(?)"

EXIT_HELP = 0
EXIT_ERROR = 2
