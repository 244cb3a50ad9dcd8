"""Input and output file formats."""

from varsift.formats.maf import MAFWriteError, MAFWriter, merge_maf_files, read_maf_file
from varsift.formats.nirvana import NirvanaParseError, parse_nirvana_json

__all__ = [
    "NirvanaParseError",
    "parse_nirvana_json",
    "MAFWriteError",
    "MAFWriter",
    "merge_maf_files",
    "read_maf_file",
]
