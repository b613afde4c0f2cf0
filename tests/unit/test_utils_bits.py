import pytest
from src.mips_asm.utils import (
    u32, fit_bits, is_unsigned_nbit, is_signed_nbit,
    is_int_literal, parse_int, to_hex32,
)

def test_u32_and_fit_bits():
    assert u32(-1) == 0xFFFFFFFF
    assert fit_bits(-2, 16) == 0xFFFE
    assert fit_bits(0x12345, 16) == 0x2345
    assert fit_bits(5, 26) == 5

def test_nbit_checks():
    assert is_unsigned_nbit(4095, 12)
    assert not is_unsigned_nbit(4096, 12)
    assert is_signed_nbit(32767, 16)
    assert is_signed_nbit(-32768, 16)
    assert not is_signed_nbit(32768, 16)
    assert not is_signed_nbit(-32769, 16)

@pytest.mark.parametrize("tok, value", [
    ("5", 5), ("-12", -12), ("+3", 3), ("0x10", 16), ("-0x1", -1), (" 7 ", 7),
])
def test_parse_int(tok, value):
    assert is_int_literal(tok)
    assert parse_int(tok) == value

@pytest.mark.parametrize("tok", ["abc", "1.5", "", "0x", "$t0"])
def test_parse_int_invalid(tok):
    assert not is_int_literal(tok)
    with pytest.raises(ValueError):
        parse_int(tok)

@pytest.mark.parametrize("word, text", [
    (0, "00000000"),
    (0xC, "0000000c"),
    (0xDEADBEEF, "deadbeef"),
    (0x24080005, "24080005"),
    (0xFFFFFFFF, "ffffffff"),
    (-1, "ffffffff"),
])
def test_to_hex32(word, text):
    assert to_hex32(word) == text

def test_to_hex32_nibble_decode_recovers_word():
    samples = [0, 1, 0xF, 0x10, 0x80000000, 0x7FFFFFFF, 0x01095021, 0xAFA8FFFC, 0x12345678]
    seen = set()
    for w in samples:
        s = to_hex32(w)
        assert len(s) == 8 and s == s.lower()
        back = 0
        for ch in s:
            back = (back << 4) | "0123456789abcdef".index(ch)
        assert back == w
        seen.add(s)
    assert len(seen) == len(samples)
