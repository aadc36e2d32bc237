from dataclasses import dataclass
from pathlib import Path

from .checksum import is_valid, pack_word, unpack_words, vector_checksum
from .elf import ELF_MAGIC, ElfHeader, SectionHeader
from .exception import (
    EmptyImageError,
    ImageReadError,
    InvalidSignatureError,
    TooFewSectionsError,
    TooSmallForHeaderError,
    TooSmallForSectionTableError,
    TooSmallForVectorTableError,
    WriteFailureError,
    WrongSectionTypeError,
)


@dataclass
class PatchResult:
    """Summary of a single ``ElfImage.patch_checksum`` call."""

    section_index: int
    offset: int  # File offset of the vector table
    old_checksum: int
    checksum: int

    @property
    def start(self) -> int:
        return self.offset

    @property
    def end(self) -> int:
        """Exclusive end of the summed words."""
        return self.offset + 4 * ElfImage.N_CHECKSUM_WORDS

    @property
    def checksum_offset(self) -> int:
        return self.offset + 4 * ElfImage.CHECKSUM_WORD_INDEX

    @property
    def changed(self) -> bool:
        return self.old_checksum != self.checksum


class ElfImage(bytearray):
    """Whole ELF32 little-endian file held in memory.

    The file is read once on construction and validated immediately, so an
    ``ElfImage`` instance always has a readable header and section table.
    Nothing is written back until ``save`` is called.
    """

    # Microcontroller toolchains place the vector table in the first section
    # after the mandatory null entry.
    VECTOR_TABLE_SECTION_INDEX = 1

    N_VECTOR_WORDS = 8
    N_CHECKSUM_WORDS = 7
    CHECKSUM_WORD_INDEX = 7

    def __init__(self, elf=None, data=None):
        if elf is not None:
            self.path = Path(elf)
            data = self.load(self.path)
        else:
            self.path = None
            if data is None:
                data = b""
        super().__init__(data)
        self._verify()

    @staticmethod
    def load(path) -> bytes:
        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise ImageReadError(f"could not open file {path}: {e}") from e

        if not data:
            raise EmptyImageError(f"not a valid ELF file (0 bytes): {path}")

        return data

    def _verify(self):
        """Structural checks; each one relies on the previous ones passing."""

        if not self.startswith(ELF_MAGIC):
            raise InvalidSignatureError("invalid elf file (no header)")

        if len(self) < ElfHeader.SIZE:
            raise TooSmallForHeaderError(
                f"invalid elf file (file too small for header, "
                f"{len(self)} < {ElfHeader.SIZE} bytes)"
            )

        header = self.header
        if header.e_shnum < 2:
            raise TooFewSectionsError(
                f"invalid elf file (not enough sections, got {header.e_shnum})"
            )

        table_end = header.e_shoff + header.e_shnum * SectionHeader.SIZE
        if len(self) < table_end:
            raise TooSmallForSectionTableError(
                f"invalid elf file (file too small for sections, "
                f"0x{len(self):X} < 0x{table_end:X})"
            )

    def __getitem__(self, key):
        """Properly raises index error if trying to access oob regions."""

        if isinstance(key, slice) and key.stop is not None and key.stop > len(self):
            raise IndexError(
                f"Index {key.stop - 1} ({hex(key.stop - 1)}) out of range"
            )

        return super().__getitem__(key)

    def __setitem__(self, key, new_val):
        """Writes must never change the image length."""

        if isinstance(key, slice):
            start, stop, _ = key.indices(len(self))
            if key.stop is not None and key.stop > len(self):
                raise IndexError(
                    f"Ending index {key.stop - 1} ({hex(key.stop - 1)}) exceeds "
                    f"image length {len(self)} ({hex(len(self))})"
                )
            if len(new_val) != stop - start:
                raise ValueError(
                    f"Replacement of {len(new_val)} bytes does not match "
                    f"slice length {stop - start}"
                )

        return super().__setitem__(key, new_val)

    @property
    def header(self) -> ElfHeader:
        return ElfHeader.unpack(self)

    def section(self, index: int) -> SectionHeader:
        header = self.header
        if not 0 <= index < header.e_shnum:
            raise IndexError(f"Section {index} out of range (e_shnum={header.e_shnum})")
        return SectionHeader.unpack(self, header.e_shoff + index * SectionHeader.SIZE)

    @property
    def vector_section(self) -> SectionHeader:
        """Section header holding the reset vector table."""

        section = self.section(self.VECTOR_TABLE_SECTION_INDEX)

        if not section.is_progbits:
            raise WrongSectionTypeError(
                f"section {self.VECTOR_TABLE_SECTION_INDEX} does not have the "
                f"progbits type set (sh_type={section.sh_type})"
            )

        vectors_end = section.sh_offset + 4 * self.N_VECTOR_WORDS
        if len(self) < vectors_end:
            raise TooSmallForVectorTableError(
                f"invalid elf file (file too small for vectors, "
                f"0x{len(self):X} < 0x{vectors_end:X})"
            )

        return section

    def vector_words(self):
        """All 8 vector table words, including the checksum slot."""
        offset = self.vector_section.sh_offset
        return unpack_words(self, self.N_VECTOR_WORDS, offset)

    def patch_checksum(self) -> PatchResult:
        """Compute the vector table checksum and store it in word 7.

        Only the 4 checksum bytes are modified.
        """

        offset = self.vector_section.sh_offset
        words = unpack_words(self, self.N_CHECKSUM_WORDS, offset)

        checksum = vector_checksum(words)

        location = offset + 4 * self.CHECKSUM_WORD_INDEX
        old_checksum = self.int(location)
        self[location : location + 4] = pack_word(checksum)

        assert is_valid(self.vector_words()), "Checksum arithmetic error"

        return PatchResult(
            section_index=self.VECTOR_TABLE_SECTION_INDEX,
            offset=offset,
            old_checksum=old_checksum,
            checksum=checksum,
        )

    def save(self, path=None):
        """Overwrite ``path`` (default: the file this image was read from).

        The target is truncated and rewritten in place. There is no lock held
        between the initial read and this write.
        """

        if path is None:
            path = self.path
        if path is None:
            raise ValueError("No path to save to.")

        try:
            Path(path).write_bytes(self)
        except OSError as e:
            raise WriteFailureError(f"could not write file {path}: {e}") from e

    def int(self, offset: int, size=4):
        return int.from_bytes(self[offset : offset + size], "little")


def patch_file(path) -> PatchResult:
    """Load, validate, patch and write back a single ELF file."""
    image = ElfImage(path)
    result = image.patch_checksum()
    image.save()
    return result
