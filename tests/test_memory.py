import pytest

from ftlib.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxdef")


def test_memset_truncates_value_to_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytearray(b"AAAA")


def test_memset_zero_count_is_noop():
    buf = bytearray(b"keep")
    memset(buf, 0, 0)
    assert buf == bytearray(b"keep")


def test_memset_rejects_count_past_end():
    with pytest.raises(IndexError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_bytes():
    buf = bytearray(b"hello")
    bzero(buf, 5)
    assert buf == bytearray(5)


def test_bzero_partial():
    buf = bytearray(b"hello")
    bzero(buf, 2)
    assert buf[2:] == bytearray(b"llo")
    assert buf[:2] == bytearray(2)


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    result = memcpy(dest, b"abc", 3)
    assert result is dest
    assert dest == bytearray(b"abc...")


def test_memcpy_rejects_short_source():
    with pytest.raises(IndexError):
        memcpy(bytearray(5), b"ab", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"123456789")
    memmove(buf, 2, 0, 5)
    assert buf == bytearray(b"121234589")


def test_memmove_backward_overlap():
    buf = bytearray(b"123456789")
    memmove(buf, 0, 2, 5)
    assert buf == bytearray(b"345676789")


def test_memmove_same_offset_keeps_buffer():
    buf = bytearray(b"abcdef")
    memmove(buf, 1, 1, 4)
    assert buf == bytearray(b"abcdef")


def test_memmove_rejects_out_of_range():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first_occurrence():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")


def test_memchr_respects_limit():
    assert memchr(b"hello", ord("o"), 4) is None


def test_memchr_truncates_needle():
    data = b"\x00\x01\x02"
    assert memchr(data, 0x102, 3) == 2


def test_memcmp_equal_is_zero():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_sign_and_value():
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_bytes_are_unsigned():
    assert memcmp(b"\xff", b"\x00", 1) > 0


def test_calloc_returns_zeroed_buffer():
    buf = calloc(3, 4)
    assert buf == bytearray(12)


def test_calloc_zero_size():
    assert calloc(10, 0) == bytearray()


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(2**63, 4)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)