from .response import extract_field
from .chunked import write_chunk, chunk_header, write_terminator
from .envelope import build_trailer, build_preamble
from .base64_blocks import Base64Block, encode_step, encode_final, encoded_size

__all__ = [
    "Base64Block",
    "build_preamble",
    "build_trailer",
    "chunk_header",
    "encode_final",
    "encode_step",
    "encoded_size",
    "extract_field",
    "write_chunk",
    "write_terminator",
]
