import pytest

from pipechain.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    buffer = bytearray(b"abcdefgh")
    result = memset(buffer, ord("x"), 3)
    assert result is buffer
    assert buffer[:3] == bytes([ord("x")]) * 3
    assert buffer[3:] == b"defgh"


def test_memset_uses_low_byte():
    buffer = bytearray(4)
    memset(buffer, 0x100 + ord("A"), 4)
    assert buffer == b"AAAA"


def test_memset_count_too_large():
    with pytest.raises(IndexError):
        memset(bytearray(2), 0, 3)


def test_memset_negative_count():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, -1)


def test_bzero():
    buffer = bytearray(b"hello")
    assert bzero(buffer, 3) is None
    assert buffer == b"\x00\x00\x00lo"


def test_memcpy_copies_prefix():
    dest = bytearray(b"..........")
    src = b"payload"
    result = memcpy(dest, src, len(src))
    assert result is dest
    assert dest[: len(src)] == src
    assert dest[len(src):] == b"..."
    assert len(dest) == 10


def test_memcpy_rejects_short_source():
    with pytest.raises(IndexError):
        memcpy(bytearray(10), b"abc", 5)


@pytest.mark.parametrize("dest,src,count", [(2, 0, 5), (0, 2, 5), (1, 1, 4), (0, 4, 3)])
def test_memmove_overlapping(dest, src, count):
    original = bytes(range(10))
    buffer = bytearray(original)
    memmove(buffer, dest, src, count)
    assert buffer[dest:dest + count] == original[src:src + count]
    untouched = [i for i in range(len(original)) if not dest <= i < dest + count]
    assert all(buffer[i] == original[i] for i in untouched)


def test_memmove_out_of_bounds():
    with pytest.raises(IndexError):
        memmove(bytearray(5), 3, 0, 3)


def test_memchr_finds_first_occurrence():
    data = b"banana"
    index = memchr(data, ord("n"), len(data))
    assert data[index] == ord("n")
    assert ord("n") not in data[:index]


def test_memchr_respects_count():
    data = b"banana"
    assert memchr(data, ord("n"), 2) is None
    assert memchr(data, ord("z"), len(data)) is None


def test_memchr_uses_low_byte():
    data = b"xyz"
    assert memchr(data, 0x100 + ord("z"), 3) == memchr(data, ord("z"), 3)


def test_memcmp_equal_and_ordering():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abc", b"abd", 2) == 0


def test_memcmp_is_unsigned():
    assert memcmp(b"\x80", b"\x00", 1) > 0


def test_memcmp_antisymmetric():
    a, b = b"hello", b"help!"
    assert memcmp(a, b, 5) == -memcmp(b, a, 5)


def test_calloc_zeroed():
    buffer = calloc(4, 8)
    assert len(buffer) == 32
    assert not any(buffer)


def test_calloc_zero_elements():
    assert calloc(0, 16) == bytearray()
    assert calloc(16, 0) == bytearray()


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(1 << 40, 1 << 40)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)