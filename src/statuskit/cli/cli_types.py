# topmark:header:start
#
#   project      : StatusKit
#   file         : cli_types.py
#   file_relpath : src/statuskit/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""Click parameter types for StatusKit tokens.

`TokenChoiceParam` wraps one of the lenient token parsers of the status and
config layers (``MessageKind.parse``, ``parse_chatter_level``,
``BackendKind.parse``) so that aliases such as ``warn`` or ``quiet`` are
accepted on the command line while ``--help`` lists the canonical choices.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Generic, NoReturn, Protocol, TypeVar

import click

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

T = TypeVar("T")


class TokenChoiceParam(ParamTypeBase, Generic[T]):
    """A Click parameter type that converts a token with a parser function.

    Args:
        name (str): Name shown in error messages and help.
        parse (Callable[[str], T | None]): Parser returning ``None`` for unknown tokens.
        choices (Sequence[str]): Canonical tokens listed in help and completion.
    """

    name: str
    choices: list[str]

    def __init__(self, name: str, parse: Callable[[str], T | None], choices: Sequence[str]) -> None:
        self.name = name
        self.parse = parse
        self.choices = list(choices)

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: object,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> T | None:
        """Convert a command-line token, passing already-converted values through."""
        if value is None:
            return None
        if not isinstance(value, str):
            return value  # type: ignore[return-value]
        parsed: T | None = self.parse(value)
        if parsed is None:
            self._fail_noreturn(
                f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
                param,
                ctx,
            )
        return parsed

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        """Show the canonical choices as the metavar, like ``click.Choice``."""
        return "[" + "|".join(self.choices) + "]"

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click.

        Bash: `eval "$(_STATUSKIT_COMPLETE=bash_source statuskit)"`
        """
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        prefix = (incomplete or "").lower()
        return [RuntimeCompletionItem(c) for c in self.choices if c.startswith(prefix)]

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"TokenChoiceParam({self.name})"
