#!/usr/bin/env python3
"""
Print the vector table of an ELF file and whether the boot ROM would accept it.

The file is only read, never modified.
"""

import argparse
import sys
from pathlib import Path

from colorama import Fore, Style

from bootsum import read_vector_table
from bootsum.exception import ElfdwtError
from bootsum.utils import printe

WORD_NAMES = [
    "Initial SP",
    "Reset",
    "NMI",
    "HardFault",
    "MemManage",
    "BusFault",
    "UsageFault",
    "Checksum",
]


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("elf", type=Path, help="ELF file to inspect.")
    args = parser.parse_args(argv)

    try:
        table = read_vector_table(args.elf)
    except ElfdwtError as e:
        printe("Error:", str(e))
        return 1

    print(f'Section {table.section_index} "{table.name}" at offset 0x{table.offset:08X}')
    for i, (name, word) in enumerate(zip(WORD_NAMES, table.words)):
        print(f"    [{i}] 0x{table.offset + 4 * i:08X}  {name:<11} 0x{word:08X}")

    if table.valid:
        print(Fore.GREEN + "Checksum valid" + Style.RESET_ALL)
        return 0

    print(
        Fore.RED
        + f"Checksum invalid: stored 0x{table.stored_checksum:08X}, "
        f"expected 0x{table.expected_checksum:08X}"
        + Style.RESET_ALL
    )
    return 2


if __name__ == "__main__":
    sys.exit(main())
