import dataclasses
from typing import Iterator

from .entry import Entry, KeyValue, parse_entry, unquote
from .errors import ErrorKind, ParseError
from .lines import QUOTE, LogicalLine
from .parser import Parser


@dataclasses.dataclass(frozen=True)
class Section:
    name: str
    entries: tuple[Entry, ...]

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def keys(self) -> list[str]:
        """Keys of the key/value entries, in order, repeats included."""
        return [e.key for e in self.entries if isinstance(e, KeyValue)]

    def values(self, key: str) -> list[tuple[str, ...]]:
        """Values of every entry for `key` (compared case-insensitively)."""
        key = key.lower()
        return [
            e.values
            for e in self.entries
            if isinstance(e, KeyValue) and e.key.lower() == key
        ]

    @classmethod
    def parse(cls, p: Parser) -> "Section":
        assert p.current is not None, "called parse after end of input"

        name = parse_header(p.current)

        if name is None:
            raise ParseError(
                ErrorKind.ENTRY_OUTSIDE_SECTION,
                p.current.lineno,
                p.current.text,
            )
        else:
            p.advance()

        entries: list[Entry] = []

        while p.current is not None and not is_header(p.current):
            entries.append(parse_entry(p))

        return cls(name=name, entries=tuple(entries))


def is_header(line: LogicalLine) -> bool:
    return line.text.startswith("[")


def parse_header(line: LogicalLine) -> str | None:
    """Return the section name if `line` is a `[name]` header."""
    if not is_header(line):
        return None

    if not line.text.endswith("]"):
        raise ParseError(
            ErrorKind.MALFORMED_SECTION_HEADER, line.lineno, line.text
        )

    text = line.text[1:-1].strip()

    if text.count(QUOTE) % 2 != 0:
        raise ParseError(ErrorKind.UNTERMINATED_QUOTE, line.lineno, text)

    name = unquote(text)
    quoted = name != text

    if not name or (not quoted and not is_plain_name(name)):
        raise ParseError(
            ErrorKind.MALFORMED_SECTION_HEADER, line.lineno, line.text
        )

    return name


def is_plain_name(name: str) -> bool:
    """Check the rules for section names written without quotes.

    Such a name has no whitespace, quotes, brackets or semicolons, does
    not end in a backslash, and its `%` signs come in pairs.
    """
    if name.endswith("\\") or name.count("%") % 2 != 0:
        return False

    return not any(c.isspace() or c in '"[];' for c in name)
