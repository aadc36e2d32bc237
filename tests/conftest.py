import struct

import pytest

# Typical Cortex-M vector table: initial SP, then thumb handler addresses.
# Word 7 is the unpatched checksum slot.
VECTOR_WORDS = [
    0x2000_8000,
    0x0800_0101,
    0x0800_0105,
    0x0800_0107,
    0x0800_0109,
    0x0800_010B,
    0x0800_010D,
    0xFFFF_FFFF,
    0x0000_0000,
    0x0000_0000,
    0x0000_0000,
    0x0800_010F,
    0x0800_0111,
    0x0000_0000,
    0x0800_0113,
    0x0800_0115,
]

VECTOR_OFFSET = 0x34
SHSTRTAB = b"\x00.isr_vector\x00.shstrtab\x00"


def build_elf(
    words=VECTOR_WORDS,
    sh_type=1,
    shnum=3,
    vector_offset=VECTOR_OFFSET,
    ei_data=1,
):
    """Minimal ARM ELF32 executable: null, .isr_vector and .shstrtab sections.

    The section header table is the last thing in the file.
    """
    vectors = struct.pack(f"<{len(words)}I", *words)
    shstrtab_offset = VECTOR_OFFSET + len(vectors)
    shoff = shstrtab_offset + len(SHSTRTAB)
    padding = b"\x00" * (-shoff % 4)
    shoff += len(padding)

    e_ident = b"\x7fELF" + bytes([1, ei_data, 1]) + b"\x00" * 9
    header = struct.pack(
        "<16sHHIIIIIHHHHHH",
        e_ident,
        2,  # ET_EXEC
        40,  # EM_ARM
        1,
        0x0800_0101,
        0,
        shoff,
        0x0500_0200,
        52,
        32,
        0,
        40,
        shnum,
        2,
    )
    assert len(header) == VECTOR_OFFSET

    sections = [
        struct.pack("<10I", *[0] * 10),
        struct.pack(
            "<10I", 1, sh_type, 0x6, 0x0800_0000, vector_offset, len(vectors), 0, 0, 4, 0
        ),
        struct.pack("<10I", 13, 3, 0, 0, shstrtab_offset, len(SHSTRTAB), 0, 0, 1, 0),
    ]

    return header + vectors + SHSTRTAB + padding + b"".join(sections)


@pytest.fixture
def make_elf(tmp_path):
    """Write an ELF fixture (or raw bytes) to disk and return its path."""

    def _make_elf(data=None, name="firmware.elf", **kwargs):
        if data is None:
            data = build_elf(**kwargs)
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _make_elf
