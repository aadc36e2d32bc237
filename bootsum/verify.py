"""Read a vector table back through pyelftools.

This does not share any header decoding with ``ElfImage``, so it can be used
to double check a patched file.
"""

from dataclasses import dataclass
from typing import List

from elftools.common.exceptions import ELFError
from elftools.elf.elffile import ELFFile

from .checksum import is_valid, unpack_words, vector_checksum
from .exception import (
    ImageReadError,
    InvalidElfError,
    TooFewSectionsError,
    TooSmallForVectorTableError,
    WrongSectionTypeError,
)
from .firmware import ElfImage


@dataclass
class VectorTable:
    section_index: int
    name: str
    offset: int
    words: List[int]
    little_endian: bool

    @property
    def stored_checksum(self) -> int:
        return self.words[ElfImage.CHECKSUM_WORD_INDEX]

    @property
    def expected_checksum(self) -> int:
        return vector_checksum(self.words[: ElfImage.N_CHECKSUM_WORDS])

    @property
    def valid(self) -> bool:
        return is_valid(self.words)


def read_vector_table(path, section_index=ElfImage.VECTOR_TABLE_SECTION_INDEX):
    n_bytes = 4 * ElfImage.N_VECTOR_WORDS

    try:
        with open(path, "rb") as f:
            try:
                elf = ELFFile(f)
                if elf.num_sections() <= section_index:
                    raise TooFewSectionsError(
                        f"invalid elf file (not enough sections, "
                        f"got {elf.num_sections()})"
                    )
                section = elf.get_section(section_index)
            except ELFError as e:
                raise InvalidElfError(f"{path}: {e}") from e

            if section["sh_type"] != "SHT_PROGBITS":
                raise WrongSectionTypeError(
                    f'section {section_index} "{section.name}" has type '
                    f'{section["sh_type"]}, expected SHT_PROGBITS'
                )

            offset = section["sh_offset"]
            f.seek(offset)
            data = f.read(n_bytes)
            little_endian = elf.little_endian
    except OSError as e:
        raise ImageReadError(f"could not open file {path}: {e}") from e

    if len(data) < n_bytes:
        raise TooSmallForVectorTableError(
            f"only {len(data)} bytes available at 0x{offset:X}, need {n_bytes}"
        )

    return VectorTable(
        section_index=section_index,
        name=section.name,
        offset=offset,
        words=unpack_words(data, ElfImage.N_VECTOR_WORDS),
        little_endian=little_endian,
    )
