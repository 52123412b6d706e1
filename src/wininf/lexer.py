from .errors import ErrorKind, ParseError
from .lines import QUOTE, LogicalLine
from .token import Token, TokenKind


class Lexer:
    """Tokenize a single logical line.

    Only `=` and `,` are significant, and only outside double quotes.
    """

    def __init__(self, line: LogicalLine) -> None:
        self.line = line

    def __iter__(self) -> "LexerIterator":
        return LexerIterator(self.line)


class LexerIterator:
    def __init__(self, line: LogicalLine) -> None:
        self.input = line.text
        self.lineno = line.lineno
        self.index = 0

    def __iter__(self) -> "LexerIterator":
        return self

    def __next__(self) -> Token:
        try:
            char = self.input[self.index]
        except IndexError:
            raise StopIteration
        else:
            self.index += 1

        match char:
            case "=":
                return Token(literal=char, kind=TokenKind.ASSIGN)
            case ",":
                return Token(literal=char, kind=TokenKind.COMMA)
            case _:
                return self.handle_literal()

    def handle_literal(self) -> Token:
        start = self.index - 1
        self.index = start

        while self.index < len(self.input):
            c = self.input[self.index]

            if c in "=,":
                break
            elif c == QUOTE:
                self.skip_string()
            else:
                self.index += 1

        return Token(
            literal=self.input[start : self.index], kind=TokenKind.LITERAL
        )

    def skip_string(self) -> None:
        end = self.input.find(QUOTE, self.index + 1)

        if end == -1:
            raise ParseError(
                ErrorKind.UNTERMINATED_QUOTE,
                self.lineno,
                self.input[self.index :],
            )

        self.index = end + 1
