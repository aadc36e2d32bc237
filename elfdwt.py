"""
Patch the boot ROM vector table checksum of an ELF32 little-endian image.

For usage, run:
        python3 elfdwt.py --help
"""

import argparse
import sys
from pathlib import Path

import colorama
from colorama import Fore, Style

from bootsum import ElfImage
from bootsum.exception import ElfdwtError, MissingArgumentError
from bootsum.utils import printd, printe, printi, prints

colorama.init()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Write the vector table checksum into an ELF file, in place.",
        epilog="Put -- before a path that starts with a dash: elfdwt.py -- -fw.elf",
    )
    parser.add_argument(
        "elf",
        type=Path,
        nargs="?",
        help="ELF32 little-endian file to patch.",
    )
    args = parser.parse_args(argv)
    if args.elf is None:
        raise MissingArgumentError("argument expected")
    return args


def main(argv=None):
    print(Fore.BLUE + "ELFdwt for little endian" + Style.RESET_ALL)

    try:
        args = parse_args(argv)

        image = ElfImage(args.elf)
        printd(
            "    vector table:",
            f"section {image.VECTOR_TABLE_SECTION_INDEX} "
            f"at offset 0x{image.vector_section.sh_offset:08X}",
        )

        result = image.patch_checksum()
        if result.changed:
            printd("    previous checksum:", f"0x{result.old_checksum:08X}")
        else:
            printd("    checksum already valid:", f"0x{result.old_checksum:08X}")

        printi(
            f"Checksum over range 0x{result.start:08X} - 0x{result.end:08X}:",
            f"0x{result.checksum:08X}",
        )

        image.save()
    except ElfdwtError as e:
        printe("Error:", str(e))
        return 1

    prints("Processing completed, success")
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
