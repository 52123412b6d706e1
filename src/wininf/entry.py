import dataclasses

from .lexer import Lexer
from .lines import QUOTE
from .parser import Parser
from .token import Token, TokenKind


@dataclasses.dataclass(frozen=True)
class KeyValue:
    """A `key = value[, value...]` line of a `Section`."""

    key: str
    values: tuple[str, ...]


@dataclasses.dataclass(frozen=True)
class ValueOnly:
    """A line of a `Section` that has values but no key.

    Used for things like the file names of a copy-files section, or the
    positional fields of a registry entry.
    """

    values: tuple[str, ...]


Entry = KeyValue | ValueOnly


def parse_entry(p: Parser, /) -> Entry:
    assert p.current is not None, "called parse after end of input"

    tokens = list(Lexer(p.current))
    p.advance()

    for index, token in enumerate(tokens):
        if token.kind == TokenKind.ASSIGN:
            key = "".join(t.literal for t in tokens[:index])
            return KeyValue(
                key=unquote(key),
                values=split_values(tokens[index + 1 :]),
            )

    return ValueOnly(values=split_values(tokens))


def split_values(tokens: list[Token]) -> tuple[str, ...]:
    """Split the tokens of a value side into fields at each comma.

    Empty fields are kept; in registry entries like `HKR,,Name,...` the
    position of a field is what gives it meaning.
    """
    values: list[str] = []
    field: list[str] = []

    for token in tokens:
        if token.kind == TokenKind.COMMA:
            values.append(unquote("".join(field)))
            field.clear()
        else:
            # Every `=` after the first is plain text.
            field.append(token.literal)

    values.append(unquote("".join(field)))
    return tuple(values)


def unquote(raw: str) -> str:
    text = raw.strip()

    if len(text) >= 2 and text[0] == QUOTE and text[-1] == QUOTE:
        return text[1:-1]

    return text
