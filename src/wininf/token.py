import dataclasses
import enum


class TokenKind(enum.IntEnum):
    # Raw text between separators; quoted spans are kept with their quotes.
    LITERAL = enum.auto()

    ASSIGN = enum.auto()
    COMMA = enum.auto()


@dataclasses.dataclass
class Token:
    literal: str
    kind: TokenKind
