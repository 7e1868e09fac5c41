import pytest

from solong.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_bzero_prefix_only():
    buf = bytearray(b"abcdef")
    bzero(buf, 3)
    assert buf[:3] == bytes(3)
    assert buf[3:] == b"def"


def test_bzero_too_long():
    with pytest.raises(ValueError):
        bzero(bytearray(2), 5)


def test_calloc_zeroed():
    buf = calloc(4, 8)
    assert len(buf) == 4 * 8
    assert not any(buf)


def test_calloc_zero_size():
    assert len(calloc(10, 0)) == 0


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(2**63, 4)


def test_memchr_finds_first():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")


def test_memchr_respects_length_and_mask():
    data = b"hello"
    assert memchr(data, ord("o"), 3) is None
    assert memchr(data, ord("h") + 256, len(data)) == data.index(b"h")


def test_memcmp_equal_and_sign():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abd", b"abc", 2) == 0


def test_memcmp_antisymmetric():
    a, b = b"\x01\xff\x10", b"\x01\x00\x10"
    assert memcmp(a, b, 3) == -memcmp(b, a, 3)


def test_memcpy_copies_prefix():
    dest = bytearray(b"xxxxxx")
    src = b"abcd"
    result = memcpy(dest, src, 4)
    assert result is dest
    assert dest[:4] == src
    assert dest[4:] == b"xx"


def test_memmove_overlapping_forward():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_overlapping_backward():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 0, 2, 4)
    assert buf[:4] == original[2:]
    assert buf[4:] == original[4:]


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 4)


def test_memset_masks_value():
    buf = bytearray(5)
    memset(buf, ord("A") + 256, 3)
    assert buf[:3] == b"AAA"
    assert buf[3:] == bytes(2)