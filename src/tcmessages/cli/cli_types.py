# topmark:header:start
#
#   project      : tcmessages
#   file         : cli_types.py
#   file_relpath : src/tcmessages/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 The tcmessages Authors
#
# topmark:header:end

"""Custom Click parameter types for the tcmessages CLI."""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Generic, NoReturn, Protocol, TypeVar

import click

from tcmessages.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

E = TypeVar("E", bound=KeyedStrEnum)


def _fail_noreturn(
    message: str,
    param: click.Parameter | None,
    ctx: click.Context | None,
) -> NoReturn:
    """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
    raise click.BadParameter(message, param=param, ctx=ctx)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a `KeyedStrEnum`.

    Matching is lenient (case, ``-``/``_`` and aliases) via `KeyedStrEnum.parse`.
    """

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [e.value for e in self.enum_cls]

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Converts a string to a member of the Enum."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        member: E | None = self.enum_cls.parse(value)
        if member is not None:
            return member
        _fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click.

        Bash: `eval "$(_TCMESSAGES_COMPLETE=bash_source tcmessages)"`
        """
        from click.shell_completion import CompletionItem

        return [CompletionItem(c) for c in self.choices if c.lower().startswith(incomplete.lower())]


class NumberParam(ParamTypeBase):
    """Finite number: ``int`` when the text is integral, ``Decimal`` otherwise."""

    name = "number"

    def convert(
        self,
        value: str | int | Decimal,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> int | Decimal:
        """Parse ``value`` without going through binary floating point."""
        if isinstance(value, (int, Decimal)) and not isinstance(value, bool):
            return value
        text: str = str(value).strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = Decimal(text)
        except InvalidOperation:
            _fail_noreturn(f"'{value}' is not a number.", param, ctx)
        if not number.is_finite():
            _fail_noreturn(f"'{value}' is not a finite number.", param, ctx)
        return number


class SecondsParam(ParamTypeBase):
    """Non-negative duration in (fractional) seconds."""

    name = "seconds"

    def convert(
        self,
        value: str | float,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> float:
        """Parse ``value`` as a float number of seconds."""
        try:
            seconds = float(value)
        except ValueError:
            _fail_noreturn(f"'{value}' is not a duration in seconds.", param, ctx)
        if not math.isfinite(seconds) or seconds < 0:
            _fail_noreturn(f"'{value}' is not a valid duration.", param, ctx)
        return seconds
