"""Parse command-line arguments against a table of keyword specifications."""

from extarg.cli import handle
from extarg.errors import (
    HelpRequested,
    InvalidArgument,
    MissingArgument,
    ParseError,
    UnknownKeyword,
)
from extarg.parser import parse, parse_argv
from extarg.specs import (
    Bool,
    Clear,
    Float,
    Int,
    OptionSpec,
    Ref,
    Rest,
    Set,
    SetFloat,
    SetInt,
    SetString,
    String,
    Symbol,
    Tuple,
    Unit,
)
from extarg.table import Command, align, command, usage

__all__ = [
    "Bool",
    "Clear",
    "Command",
    "Float",
    "HelpRequested",
    "Int",
    "InvalidArgument",
    "MissingArgument",
    "OptionSpec",
    "ParseError",
    "Ref",
    "Rest",
    "Set",
    "SetFloat",
    "SetInt",
    "SetString",
    "String",
    "Symbol",
    "Tuple",
    "UnknownKeyword",
    "Unit",
    "align",
    "command",
    "handle",
    "parse",
    "parse_argv",
    "usage",
]
