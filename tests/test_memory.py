import pytest

from ftkit.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(5)
    result = memset(buf, 65, 3)
    assert result is buf
    assert buf == bytearray(b"AAA\x00\x00")


def test_memset_uses_low_byte_of_value():
    buf = bytearray(2)
    memset(buf, 256 + ord("B"), 2)
    assert buf == bytearray(b"BB")


def test_memset_zero_length_changes_nothing():
    buf = bytearray(b"keep")
    memset(buf, 0, 0)
    assert buf == bytearray(b"keep")


def test_memset_past_end_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"hello")
    bzero(buf, 3)
    assert buf[:3] == bytearray(3)
    assert buf[3:] == bytearray(b"lo")


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    result = memcpy(dest, b"abcdef", 4)
    assert result is dest
    assert dest[:4] == bytearray(b"abcd")
    assert dest[4:] == bytearray(b"..")


def test_memcpy_rejects_short_source_or_destination():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abc", 3)
    with pytest.raises(ValueError):
        memcpy(bytearray(5), b"ab", 3)


@pytest.mark.parametrize(
    "dest_offset, src_offset, length",
    [(2, 0, 4), (0, 2, 4), (1, 1, 3), (0, 0, 0), (3, 0, 3)],
)
def test_memmove_handles_overlap(dest_offset, src_offset, length):
    original = bytes(b"abcdef")
    buf = bytearray(original)
    result = memmove(buf, dest_offset, src_offset, length)
    assert result is buf
    assert buf[dest_offset:dest_offset + length] == original[src_offset:src_offset + length]
    assert buf[:dest_offset] == original[:dest_offset]
    assert buf[dest_offset + length:] == original[dest_offset + length:]


def test_memmove_forward_overlap_value():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_out_of_range_raises():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)
    with pytest.raises(ValueError):
        memmove(bytearray(4), -1, 0, 1)


def test_memchr_finds_first_within_length():
    data = b"abcabc"
    index = memchr(data, ord("c"), 6)
    assert data[index] == ord("c")
    assert index == data.index(b"c")


def test_memchr_respects_length_and_masks_value():
    assert memchr(b"abcabc", ord("c"), 2) is None
    assert memchr(b"\x00\x01", 256 + 1, 2) == 1


def test_memchr_length_past_end_raises():
    with pytest.raises(ValueError):
        memchr(b"ab", 0, 3)


def test_memcmp_sign_and_equality():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_is_antisymmetric():
    a, b = b"\x00\xff\x10", b"\x00\x01\x10"
    assert memcmp(a, b, 3) == -memcmp(b, a, 3)


def test_memcmp_compares_unsigned_bytes():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_calloc_returns_zeroed_buffer():
    buf = calloc(4, 3)
    assert len(buf) == 4 * 3
    assert buf == bytearray(4 * 3)
    buf[0] = 1
    assert buf[0] == 1


def test_calloc_rejects_negative_sizes():
    with pytest.raises(ValueError):
        calloc(-1, 4)