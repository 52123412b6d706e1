import enum


class ErrorKind(enum.IntEnum):
    INVALID_UTF8 = enum.auto()
    INVALID_SURROGATE = enum.auto()
    TRUNCATED_UTF16 = enum.auto()

    UNTERMINATED_CONTINUATION = enum.auto()
    ENTRY_OUTSIDE_SECTION = enum.auto()
    MALFORMED_SECTION_HEADER = enum.auto()
    UNTERMINATED_QUOTE = enum.auto()


_MESSAGES = {
    ErrorKind.INVALID_UTF8: "invalid UTF-8 byte sequence",
    ErrorKind.INVALID_SURROGATE: "unpaired UTF-16 surrogate",
    ErrorKind.TRUNCATED_UTF16: "odd number of bytes in UTF-16 data",
    ErrorKind.UNTERMINATED_CONTINUATION: (
        "end of input while a line continuation is pending"
    ),
    ErrorKind.ENTRY_OUTSIDE_SECTION: "entry appears before any section header",
    ErrorKind.MALFORMED_SECTION_HEADER: "malformed section header",
    ErrorKind.UNTERMINATED_QUOTE: "quoted string is never closed",
}


class InfError(Exception):
    """Base class of every error raised while loading an INF file."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class EncodingError(InfError):
    """The byte buffer cannot be decoded under the detected encoding.

    `offset` is the position of the offending byte in the caller's buffer,
    byte-order mark included.
    """

    def __init__(self, kind: ErrorKind, offset: int) -> None:
        super().__init__(kind, f"byte {offset}: {_MESSAGES[kind]}")
        self.offset = offset


class ParseError(InfError):
    """The decoded text is not well-formed INF.

    `lineno` is the 1-based physical line number the problem was found on.
    """

    def __init__(
        self, kind: ErrorKind, lineno: int, detail: str | None = None
    ) -> None:
        message = _MESSAGES[kind]

        if detail is not None:
            message = f"{message}: {detail}"

        super().__init__(kind, f"line {lineno}: {message}")
        self.lineno = lineno
