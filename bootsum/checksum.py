import struct

WORD_MASK = 0xFFFF_FFFF


def unpack_words(data, n_words: int, offset: int = 0):
    """Decode ``n_words`` little-endian uint32 starting at ``offset``."""
    return list(struct.unpack_from(f"<{n_words}I", data, offset))


def pack_word(val: int) -> bytes:
    return struct.pack("<I", val & WORD_MASK)


def vector_checksum(words) -> int:
    """Two's complement of the 32-bit wraparound sum of ``words``.

    The boot ROM accepts an image when the first 8 vector table words sum to
    zero modulo 2**32, so this value goes into word 7 when ``words`` holds
    words 0 through 6.

    Parameters
    ----------
    words : iterable of int
        Unsigned 32-bit vector table entries.

    Returns
    -------
    int
        Checksum in range ``[0, 0xFFFFFFFF]``.
    """
    total = 0
    for word in words:
        if not 0 <= word <= WORD_MASK:
            raise ValueError(f"Word {word} is not an unsigned 32-bit value")
        total = (total + word) & WORD_MASK
    return (0 - total) & WORD_MASK


def is_valid(words) -> bool:
    return sum(words) & WORD_MASK == 0
