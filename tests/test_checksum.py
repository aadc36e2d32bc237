import numpy as np
import pytest

from bootsum.checksum import is_valid, pack_word, unpack_words, vector_checksum


def test_vector_checksum_small_words():
    assert vector_checksum([1, 2, 3, 4, 5, 6, 7]) == 0xFFFF_FFE4


def test_vector_checksum_zero():
    assert vector_checksum([0] * 7) == 0


def test_vector_checksum_wraps():
    words = [0xFFFF_FFFF] * 7
    # 7 * 0xFFFFFFFF == -7 (mod 2**32)
    assert vector_checksum(words) == 7


def test_vector_checksum_random():
    rng = np.random.default_rng(0x1C)
    for _ in range(200):
        words = rng.integers(0, 1 << 32, size=7, dtype=np.uint64)
        checksum = vector_checksum(int(w) for w in words)

        assert 0 <= checksum <= 0xFFFF_FFFF
        total = np.append(words, np.uint64(checksum)).astype(np.uint32).sum(
            dtype=np.uint32
        )
        assert total == 0


def test_vector_checksum_pure():
    words = [0x2000_8000, 0x0800_0101, 0x0800_0105, 0, 0, 0, 0]
    snapshot = list(words)
    assert vector_checksum(words) == vector_checksum(words)
    assert words == snapshot


@pytest.mark.parametrize("word", [-1, 1 << 32])
def test_vector_checksum_rejects_non_uint32(word):
    with pytest.raises(ValueError):
        vector_checksum([0, 0, 0, word, 0, 0, 0])


def test_is_valid():
    words = [1, 2, 3, 4, 5, 6, 7]
    assert not is_valid(words + [0])
    assert is_valid(words + [0xFFFF_FFE4])


def test_unpack_words_little_endian():
    data = b"\xAA" * 4 + b"\x01\x02\x03\x04" + b"\x78\x56\x34\x12"
    assert unpack_words(data, 2, offset=4) == [0x0403_0201, 0x1234_5678]


def test_pack_word_little_endian():
    assert pack_word(0xFFFF_FFE4) == b"\xE4\xFF\xFF\xFF"
