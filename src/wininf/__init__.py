import logging
import os

from .document import CaseInsensitiveDict, CaseInsensitiveKey, Document
from .encoding import Encoding, detect, resolve
from .entry import Entry, KeyValue, ValueOnly
from .errors import EncodingError, ErrorKind, InfError, ParseError
from .lines import LineAssembler, LogicalLine
from .parser import Parser
from .section import Section

__all__ = (
    "CaseInsensitiveDict",
    "CaseInsensitiveKey",
    "Document",
    "Encoding",
    "EncodingError",
    "Entry",
    "ErrorKind",
    "InfError",
    "KeyValue",
    "LineAssembler",
    "LogicalLine",
    "ParseError",
    "Section",
    "ValueOnly",
    "load",
    "load_file",
)

logger = logging.getLogger(__name__)


def load(
    data: bytes | str, /, encoding: Encoding | str | None = None
) -> Document:
    """Deserialize the contents of an INF file.

    INF is a text-based Setup Information format for Windows-based software
    and drivers.

    <https://learn.microsoft.com/en-us/windows-hardware/drivers/install/general-syntax-rules-for-inf-files>

    Parameters
    ----------
    data
        Raw bytes as read from disk, or text that has already been decoded.
    encoding
        Encoding to assume for `bytes` without a byte-order mark. When
        omitted it is guessed from the data; see `wininf.encoding.detect`.

    Returns
    -------
    Document
        The sections of the file with their entries, in source order.
        `%strkey%` tokens are left exactly as written.

    Raises
    ------
    EncodingError
        `data` could not be decoded.
    ParseError
        The text is not well-formed INF.
    """
    if isinstance(data, str):
        text = data.removeprefix("\ufeff")
    else:
        text = resolve(data, encoding)

    lines = LineAssembler(text=text)
    parser = Parser(iter(lines))
    return Document.parse(parser)


def load_file(
    path: str | os.PathLike[str], /, encoding: Encoding | str | None = None
) -> Document:
    """Read the INF file at `path` and deserialize it with `load`."""
    with open(path, "rb") as f:
        data = f.read()

    if logger.isEnabledFor(logging.DEBUG):
        detected, _ = detect(data, encoding)
        logger.debug(
            "read %d bytes from %s (%s)", len(data), path, detected.value
        )

    return load(data, encoding)


del os
