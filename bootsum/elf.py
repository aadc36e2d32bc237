"""ELF32 little-endian header records.

Only the fields needed to find the vector table are interpreted, but every
field is decoded.
The ``EI_DATA`` byte of ``e_ident`` is never consulted; everything is read
little-endian.
"""

import struct
from dataclasses import dataclass

ELF_MAGIC = b"\x7fELF"
EI_NIDENT = 16

# Section types
SHT_PROGBITS = 1


@dataclass
class ElfHeader:
    """``Elf32_Ehdr``, found at offset 0 of the image."""

    e_ident: bytes
    e_type: int
    e_machine: int
    e_version: int
    e_entry: int
    e_phoff: int
    e_shoff: int
    e_flags: int
    e_ehsize: int
    e_phentsize: int
    e_phnum: int
    e_shentsize: int
    e_shnum: int
    e_shstrndx: int

    FORMAT = f"<{EI_NIDENT}sHHIIIIIHHHHHH"
    SIZE = struct.calcsize(FORMAT)  # 52

    @classmethod
    def unpack(cls, data, offset=0) -> "ElfHeader":
        return cls(*struct.unpack_from(cls.FORMAT, data, offset))


@dataclass
class SectionHeader:
    """``Elf32_Shdr``, one entry of the section header table."""

    sh_name: int
    sh_type: int
    sh_flags: int
    sh_addr: int
    sh_offset: int
    sh_size: int
    sh_link: int
    sh_info: int
    sh_addralign: int
    sh_entsize: int

    FORMAT = "<10I"
    SIZE = struct.calcsize(FORMAT)  # 40

    @classmethod
    def unpack(cls, data, offset=0) -> "SectionHeader":
        return cls(*struct.unpack_from(cls.FORMAT, data, offset))

    @property
    def is_progbits(self) -> bool:
        return self.sh_type == SHT_PROGBITS
