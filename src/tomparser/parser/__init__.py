"""BIM parsing: encoding detection, normalisation and model assembly."""

from tomparser.parser.assembler import ModelAssembler, build_table_index
from tomparser.parser.encoding import decode_bytes, detect_encoding
from tomparser.parser.loader import BimLoader, read_file_bytes

__all__ = [
    "BimLoader",
    "ModelAssembler",
    "build_table_index",
    "decode_bytes",
    "detect_encoding",
    "read_file_bytes",
]
