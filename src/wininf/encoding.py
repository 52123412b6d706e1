import codecs
import enum

from .errors import EncodingError, ErrorKind


class Encoding(enum.Enum):
    UTF8 = "utf-8"
    UTF16LE = "utf-16-le"
    UTF16BE = "utf-16-be"

    @classmethod
    def from_hint(cls, hint: "Encoding | str") -> "Encoding":
        """Map any codec alias Python knows to a supported encoding."""
        if isinstance(hint, cls):
            return hint

        try:
            return cls(codecs.lookup(hint).name)
        except LookupError:
            raise ValueError(f"unknown encoding: {hint!r}") from None
        except ValueError:
            raise ValueError(f"unsupported INF encoding: {hint!r}") from None


_BOMS = (
    (codecs.BOM_UTF8, Encoding.UTF8),
    (codecs.BOM_UTF16_LE, Encoding.UTF16LE),
    (codecs.BOM_UTF16_BE, Encoding.UTF16BE),
)


def detect(
    data: bytes, /, hint: Encoding | str | None = None
) -> tuple[Encoding, int]:
    """Work out how `data` is encoded.

    Returns the encoding together with the length of the byte-order mark
    that has to be skipped before decoding (zero when there is none).

    A byte-order mark always wins. Without one, `hint` is used when given;
    otherwise the buffer is taken to be UTF-16LE when it has an even length
    and most of its odd-indexed bytes are zero (the high bytes of ASCII
    characters), and UTF-8 in every other case.
    """
    for bom, encoding in _BOMS:
        if data.startswith(bom):
            return encoding, len(bom)

    if hint is not None:
        return Encoding.from_hint(hint), 0

    if len(data) % 2 == 0:
        high_bytes = data[1::2]

        if high_bytes.count(0) * 2 > len(high_bytes):
            return Encoding.UTF16LE, 0

    return Encoding.UTF8, 0


def resolve(data: bytes, /, hint: Encoding | str | None = None) -> str:
    """Decode the raw contents of an INF file to text.

    Raises
    ------
    EncodingError
        The buffer is not valid under the detected encoding. The error's
        `offset` points at the first offending byte of `data`.
    """
    encoding, start = detect(data, hint)
    return decode(data, encoding, start)


def decode(data: bytes, encoding: Encoding, start: int = 0) -> str:
    payload = memoryview(data)[start:]

    if encoding is Encoding.UTF8:
        try:
            return str(payload, encoding.value)
        except UnicodeDecodeError as exc:
            raise EncodingError(
                ErrorKind.INVALID_UTF8, start + exc.start
            ) from None

    if len(payload) % 2 != 0:
        raise EncodingError(ErrorKind.TRUNCATED_UTF16, len(data) - 1)

    # With an even number of bytes the only way UTF-16 can fail is a
    # surrogate that is not part of a high/low pair.
    try:
        return str(payload, encoding.value)
    except UnicodeDecodeError as exc:
        raise EncodingError(
            ErrorKind.INVALID_SURROGATE, start + exc.start
        ) from None
