import string

import pytest

from ohmmeter.font import FONT, glyph


def test_table_covers_printable_ascii():
    printable = [chr(code) for code in range(ord(" "), ord("~") + 1)]
    joined = b"".join(glyph(c) for c in printable)
    assert len(joined) == (ord("~") - ord(" ") + 1) * 8
    assert joined == bytes(FONT)


def test_space_is_blank():
    assert glyph(" ") == bytes(8)


def test_letter_a():
    assert glyph("A") == bytes([0x7C, 0x7E, 0x13, 0x11, 0x13, 0x7E, 0x7C, 0x00])


def test_tilde_is_last_glyph():
    assert glyph("~") == bytes([0x02, 0x03, 0x01, 0x03, 0x02, 0x03, 0x01, 0x00])
    assert glyph("~") == FONT[-8:]


def test_digit_zero():
    assert glyph("0") == bytes([0x3E, 0x7F, 0x59, 0x4D, 0x47, 0x7F, 0x3E, 0x00])


@pytest.mark.parametrize("char", ["\n", "\t", "\x7f", "é", "\x00"])
def test_non_printable_falls_back_to_space(char):
    assert glyph(char) == glyph(" ")


def test_every_printable_glyph_has_eight_columns():
    printable = [chr(code) for code in range(ord(" "), ord("~") + 1)]
    assert all(len(glyph(c)) == 8 for c in printable)


def test_letters_are_distinct():
    glyphs = {glyph(c) for c in string.ascii_letters}
    assert len(glyphs) == len(string.ascii_letters)


@pytest.mark.parametrize("bad", ["", "ab", 65, None])
def test_rejects_non_single_characters(bad):
    with pytest.raises(ValueError):
        glyph(bad)