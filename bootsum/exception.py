class ElfdwtError(Exception):
    """Base class for every failure that aborts a checksum patch."""


class MissingArgumentError(ElfdwtError):
    """No ELF file path was provided."""


class ImageReadError(ElfdwtError):
    """The ELF file could not be opened or read."""


class EmptyImageError(ImageReadError):
    """The ELF file produced zero bytes."""


class InvalidElfError(ElfdwtError):
    """The ELF header or section header table is malformed."""


class InvalidSignatureError(InvalidElfError):
    """"""


class TooSmallForHeaderError(InvalidElfError):
    """"""


class TooFewSectionsError(InvalidElfError):
    """At least the null section and one data section are required."""


class TooSmallForSectionTableError(InvalidElfError):
    """"""


class VectorTableError(ElfdwtError):
    """The section holding the vector table is unusable."""


class WrongSectionTypeError(VectorTableError):
    """"""


class TooSmallForVectorTableError(VectorTableError):
    """File ends before all 8 vector table words."""


class WriteFailureError(ElfdwtError):
    """The patched image could not be written back.

    The file on disk may be partially written.
    """
