from .checksum import is_valid, vector_checksum
from .firmware import ElfImage, PatchResult, patch_file
from .verify import VectorTable, read_vector_table
