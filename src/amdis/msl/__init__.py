"""
Data types and parsers for AMDIS MSL (Mass Spectral Library) documents.
"""

from amdis.msl.document import Document
from amdis.msl.extractor import extract_records, hyphenate_cas_number
from amdis.msl.records import Peak, Record

__all__ = [
    "Document",
    "Peak",
    "Record",
    "extract_records",
    "hyphenate_cas_number",
    "parse",
]


def parse(source, post_process=None) -> Document:
    """Parse MSL. Shortcut for ``Document.parse``."""
    return Document.parse(source, post_process)
