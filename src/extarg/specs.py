"""
Option specifications: how a keyword consumes arguments and what it does.

Action variants (`Unit`, `Bool`, `String`, `Int`, `Float`, `Symbol`, `Rest`)
call a function with the converted value. Reference variants (`Set`, `Clear`,
`SetString`, `SetInt`, `SetFloat`) write a caller-owned `Ref` instead.
"""

import dataclasses
from collections.abc import Callable, Sequence
from gettext import gettext as _
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from extarg import converters

if TYPE_CHECKING:
    from extarg.parser import Cursor

T = TypeVar("T")


@dataclasses.dataclass
class Ref(Generic[T]):
    """A mutable cell the caller reads after parsing."""

    value: T


class OptionSpec:
    """Base class of every option specification."""

    takes_argument = True

    def apply(self, cursor: "Cursor") -> None:
        """Consume this option's arguments from the cursor and act on them."""
        raise NotImplementedError


@dataclasses.dataclass(frozen=True)
class Unit(OptionSpec):
    """Call the action with no argument."""

    action: Callable[[], Any]
    takes_argument = False

    def apply(self, cursor: "Cursor") -> None:
        """Call the action."""
        cursor.no_argument()
        self.action()


@dataclasses.dataclass(frozen=True)
class Set(OptionSpec):
    """Set the referenced flag to True."""

    ref: Ref[bool]
    takes_argument = False

    def apply(self, cursor: "Cursor") -> None:
        """Set the flag."""
        cursor.no_argument()
        self.ref.value = True


@dataclasses.dataclass(frozen=True)
class Clear(OptionSpec):
    """Set the referenced flag to False."""

    ref: Ref[bool]
    takes_argument = False

    def apply(self, cursor: "Cursor") -> None:
        """Clear the flag."""
        cursor.no_argument()
        self.ref.value = False


@dataclasses.dataclass(frozen=True)
class Bool(OptionSpec):
    """Call the action with a `true` or `false` argument."""

    action: Callable[[bool], Any]

    def apply(self, cursor: "Cursor") -> None:
        """Convert the next token to a bool and call the action."""
        self.action(cursor.take(converters.to_bool, _("a boolean")))


@dataclasses.dataclass(frozen=True)
class String(OptionSpec):
    """Call the action with a string argument."""

    action: Callable[[str], Any]

    def apply(self, cursor: "Cursor") -> None:
        """Call the action with the next token."""
        self.action(cursor.take(str, _("a string")))


@dataclasses.dataclass(frozen=True)
class SetString(OptionSpec):
    """Store a string argument in the reference."""

    ref: Ref[str]

    def apply(self, cursor: "Cursor") -> None:
        """Store the next token."""
        self.ref.value = cursor.take(str, _("a string"))


@dataclasses.dataclass(frozen=True)
class Int(OptionSpec):
    """Call the action with an integer argument."""

    action: Callable[[int], Any]

    def apply(self, cursor: "Cursor") -> None:
        """Convert the next token to an int and call the action."""
        self.action(cursor.take(converters.to_int, _("an integer")))


@dataclasses.dataclass(frozen=True)
class SetInt(OptionSpec):
    """Store an integer argument in the reference."""

    ref: Ref[int]

    def apply(self, cursor: "Cursor") -> None:
        """Convert and store the next token."""
        self.ref.value = cursor.take(converters.to_int, _("an integer"))


@dataclasses.dataclass(frozen=True)
class Float(OptionSpec):
    """Call the action with a floating-point argument."""

    action: Callable[[float], Any]

    def apply(self, cursor: "Cursor") -> None:
        """Convert the next token to a float and call the action."""
        self.action(cursor.take(converters.to_float, _("a float")))


@dataclasses.dataclass(frozen=True)
class SetFloat(OptionSpec):
    """Store a floating-point argument in the reference."""

    ref: Ref[float]

    def apply(self, cursor: "Cursor") -> None:
        """Convert and store the next token."""
        self.ref.value = cursor.take(converters.to_float, _("a float"))


@dataclasses.dataclass(frozen=True)
class Tuple(OptionSpec):
    """Take several arguments, one child spec after another."""

    specs: Sequence[OptionSpec]

    @property
    def takes_argument(self) -> bool:
        """Return True when any child spec takes an argument."""
        return any(spec.takes_argument for spec in self.specs)

    def apply(self, cursor: "Cursor") -> None:
        """
        Apply each child spec in order.

        A `=value` given with the keyword goes to the first child that takes
        an argument.
        """
        if not self.takes_argument:
            cursor.no_argument()
        for spec in self.specs:
            if spec.takes_argument:
                spec.apply(cursor)
            else:
                with cursor.follow_held():
                    spec.apply(cursor)


@dataclasses.dataclass(frozen=True)
class Symbol(OptionSpec):
    """Take one of a fixed set of symbols and call the action with it."""

    values: Sequence[str]
    action: Callable[[str], Any]

    def __post_init__(self):
        if isinstance(self.values, str):
            raise TypeError(_("Symbol values must be a sequence of strings."))
        object.__setattr__(self, "values", tuple(self.values))

    def apply(self, cursor: "Cursor") -> None:
        """Check the next token against the allowed symbols."""
        expected = _("one of: %(values)s") % {"values": " ".join(self.values)}
        self.action(cursor.take(self._check, expected))

    def _check(self, value: str) -> str:
        if value not in self.values:
            raise ValueError(value)
        return value


@dataclasses.dataclass(frozen=True)
class Rest(OptionSpec):
    """Stop interpreting keywords and call the action with each remaining token."""

    action: Callable[[str], Any]

    def apply(self, cursor: "Cursor") -> None:
        """Pass every remaining token to the action."""
        for token in cursor.drain():
            self.action(token)
