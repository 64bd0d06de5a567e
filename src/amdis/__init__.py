"""
Readers for Automated Mass Spectral Deconvolution and Identification System
(AMDIS) documents.

    import amdis

    with open("library.msl") as fh:
        doc = amdis.MSL(fh)

    for record in doc.records:
        print(record)
"""

from amdis.__version__ import __version__
from amdis.msl import Document, Peak, Record


def MSL(source, post_process=None) -> Document:
    """Parse MSL. Shortcut for ``amdis.msl.Document.parse``."""
    return Document.parse(source, post_process)


__all__ = ["MSL", "Document", "Peak", "Record", "__version__"]
