import dataclasses

from .errors import ErrorKind, ParseError

CONTINUATION = "\\"
COMMENT = ";"
QUOTE = '"'


@dataclasses.dataclass(frozen=True)
class LogicalLine:
    text: str
    lineno: int


class LineAssembler:
    """Split decoded INF text into logical lines.

    Comments and blank lines are dropped and continued lines are joined.
    Every iteration starts over from the beginning of the text.
    """

    def __init__(self, text: str) -> None:
        self.text = text

    def __iter__(self) -> "LineIterator":
        return LineIterator(self.text)


class LineIterator:
    def __init__(self, text: str) -> None:
        self.lines = text.split("\n")
        self.index = 0

        if self.lines[-1] == "":
            # A trailing newline terminates the last line; it does not
            # start another one.
            self.lines.pop()

    def __iter__(self) -> "LineIterator":
        return self

    def __next__(self) -> LogicalLine:
        lineno, content, quoted = self.next_content()
        first_lineno = lineno

        parts: list[str] = []

        while content.endswith(CONTINUATION):
            parts.append(content[:-1])

            try:
                # A quoted span left open by the marker carries on into the
                # next line, semicolons included.
                lineno, content, quoted = self.next_content(quoted)
            except StopIteration:
                raise ParseError(
                    ErrorKind.UNTERMINATED_CONTINUATION, lineno
                ) from None

        parts.append(content)
        return LogicalLine(text="".join(parts).strip(), lineno=first_lineno)

    def next_content(self, quoted: bool = False) -> tuple[int, str, bool]:
        """Return the next physical line that has something left on it.

        Also returns whether a quoted span is still open at its end.
        """
        while self.index < len(self.lines):
            line, still_quoted = split_comment(self.lines[self.index], quoted)
            line = line.strip()
            self.index += 1

            if line:
                return self.index, line, still_quoted

        raise StopIteration


def strip_comment(line: str) -> str:
    """Cut `line` at the first semicolon that is not inside quotes."""
    return split_comment(line)[0]


def split_comment(line: str, quoted: bool = False) -> tuple[str, bool]:
    """Like `strip_comment`, starting inside a quoted span when `quoted`.

    The flag returned tells whether a quote is left open at the end of
    the text that was kept.
    """
    if COMMENT not in line:
        return line, quoted != (line.count(QUOTE) % 2 == 1)

    for index, char in enumerate(line):
        if char == QUOTE:
            quoted = not quoted
        elif char == COMMENT and not quoted:
            return line[:index], False

    return line, quoted
