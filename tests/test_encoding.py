import codecs
import random
import unittest

from wininf import Encoding, EncodingError, ErrorKind
from wininf.encoding import detect, resolve

TEXT = '[Strings]\r\nName="Hello"\r\n'


def is_low(unit: int) -> bool:
    return 0xDC00 <= unit <= 0xDFFF


def first_unpaired_surrogate(units: list[int]) -> int | None:
    index = 0

    while index < len(units):
        unit = units[index]

        if 0xD800 <= unit <= 0xDBFF:
            if index + 1 < len(units) and is_low(units[index + 1]):
                index += 2
                continue

            return index
        elif is_low(unit):
            return index

        index += 1

    return None


class TestDetect(unittest.TestCase):
    def test_boms(self) -> None:
        self.assertEqual(
            detect(codecs.BOM_UTF16_LE + b"[\x00"), (Encoding.UTF16LE, 2)
        )
        self.assertEqual(
            detect(codecs.BOM_UTF16_BE + b"\x00["), (Encoding.UTF16BE, 2)
        )
        self.assertEqual(detect(codecs.BOM_UTF8 + b"["), (Encoding.UTF8, 3))

    def test_utf16le_without_bom(self) -> None:
        data = TEXT.encode("utf-16-le")
        self.assertEqual(detect(data), (Encoding.UTF16LE, 0))

    def test_utf8_without_bom(self) -> None:
        self.assertEqual(detect(TEXT.encode("utf-8")), (Encoding.UTF8, 0))
        self.assertEqual(detect(b""), (Encoding.UTF8, 0))

    def test_odd_length_is_never_utf16(self) -> None:
        self.assertEqual(detect(b"a\x00b\x00c"), (Encoding.UTF8, 0))

    def test_minority_of_zero_bytes_is_utf8(self) -> None:
        self.assertEqual(detect(b"a\x00bbcc"), (Encoding.UTF8, 0))

    def test_hint_replaces_guess(self) -> None:
        self.assertEqual(detect(b"a\x00", "utf8"), (Encoding.UTF8, 0))
        self.assertEqual(
            detect(b"ab", Encoding.UTF16LE), (Encoding.UTF16LE, 0)
        )

    def test_bom_wins_over_hint(self) -> None:
        data = codecs.BOM_UTF16_LE + TEXT.encode("utf-16-le")
        self.assertEqual(detect(data, "utf-8"), (Encoding.UTF16LE, 2))

    def test_hint_aliases(self) -> None:
        self.assertIs(Encoding.from_hint("UTF-16LE"), Encoding.UTF16LE)
        self.assertIs(Encoding.from_hint("utf_16_be"), Encoding.UTF16BE)
        self.assertIs(Encoding.from_hint("U8"), Encoding.UTF8)

    def test_unsupported_hint(self) -> None:
        with self.assertRaises(ValueError):
            Encoding.from_hint("latin-1")

        with self.assertRaises(ValueError):
            Encoding.from_hint("no-such-codec")


class TestResolve(unittest.TestCase):
    def test_utf16le_bom_is_dropped(self) -> None:
        data = codecs.BOM_UTF16_LE + TEXT.encode("utf-16-le")
        self.assertEqual(resolve(data), TEXT)

    def test_utf16be_bom_is_dropped(self) -> None:
        data = codecs.BOM_UTF16_BE + TEXT.encode("utf-16-be")
        self.assertEqual(resolve(data), TEXT)

    def test_utf8_bom_is_dropped(self) -> None:
        self.assertEqual(resolve(codecs.BOM_UTF8 + TEXT.encode()), TEXT)

    def test_supplementary_code_points(self) -> None:
        text = "[Strings]\nClef = \U0001d11e\n"
        data = codecs.BOM_UTF16_LE + text.encode("utf-16-le")

        self.assertEqual(resolve(data), text)
        self.assertEqual(resolve(text.encode("utf-8")), text)

    def test_unpaired_high_surrogate(self) -> None:
        data = codecs.BOM_UTF16_LE + b"a\x00" + b"\x00\xd8" + b"b\x00"

        with self.assertRaises(EncodingError) as cm:
            resolve(data)

        self.assertEqual(cm.exception.kind, ErrorKind.INVALID_SURROGATE)
        self.assertEqual(cm.exception.offset, 4)
        self.assertIn("byte 4", str(cm.exception))

    def test_lone_low_surrogate(self) -> None:
        data = codecs.BOM_UTF16_LE + b"\x00\xdc" + b"a\x00"

        with self.assertRaises(EncodingError) as cm:
            resolve(data)

        self.assertEqual(cm.exception.kind, ErrorKind.INVALID_SURROGATE)
        self.assertEqual(cm.exception.offset, 2)

    def test_high_surrogate_at_end(self) -> None:
        data = codecs.BOM_UTF16_LE + b"a\x00" + b"\x3d\xd8"

        with self.assertRaises(EncodingError) as cm:
            resolve(data)

        self.assertEqual(cm.exception.kind, ErrorKind.INVALID_SURROGATE)
        self.assertEqual(cm.exception.offset, 4)

    def test_truncated_utf16(self) -> None:
        data = codecs.BOM_UTF16_LE + b"a\x00b"

        with self.assertRaises(EncodingError) as cm:
            resolve(data)

        self.assertEqual(cm.exception.kind, ErrorKind.TRUNCATED_UTF16)
        self.assertEqual(cm.exception.offset, 4)

    def test_invalid_utf8(self) -> None:
        with self.assertRaises(EncodingError) as cm:
            resolve(b"[A]\nk=\xc3\x28")

        self.assertEqual(cm.exception.kind, ErrorKind.INVALID_UTF8)
        self.assertEqual(cm.exception.offset, 6)

    def test_invalid_utf8_offset_counts_bom(self) -> None:
        with self.assertRaises(EncodingError) as cm:
            resolve(codecs.BOM_UTF8 + b"ab\xff")

        self.assertEqual(cm.exception.offset, 5)

    def test_truncated_multibyte_sequences(self) -> None:
        prefix = b"[Strings]\nk="

        for char in ("é", "€", "\U0001d11e"):
            encoded = char.encode("utf-8")

            for cut in range(1, len(encoded)):
                data = prefix + encoded[:cut]

                with self.subTest(char=char, cut=cut):
                    with self.assertRaises(EncodingError) as cm:
                        resolve(data, "utf-8")

                    self.assertEqual(
                        cm.exception.kind, ErrorKind.INVALID_UTF8
                    )
                    self.assertEqual(cm.exception.offset, len(prefix))

    def test_random_surrogate_sequences(self) -> None:
        rng = random.Random(20210707)
        pool = [0x41, 0x5B, 0xE9, 0x20AC, 0xD800, 0xDBFF, 0xDC00, 0xDFFF]

        for _ in range(500):
            units = [rng.choice(pool) for _ in range(rng.randint(0, 12))]
            data = codecs.BOM_UTF16_LE + b"".join(
                unit.to_bytes(2, "little") for unit in units
            )
            bad = first_unpaired_surrogate(units)

            with self.subTest(units=[hex(u) for u in units]):
                if bad is None:
                    self.assertEqual(
                        resolve(data),
                        data[2:].decode("utf-16-le"),
                    )
                else:
                    with self.assertRaises(EncodingError) as cm:
                        resolve(data)

                    self.assertEqual(
                        cm.exception.kind, ErrorKind.INVALID_SURROGATE
                    )
                    self.assertEqual(cm.exception.offset, 2 + 2 * bad)
