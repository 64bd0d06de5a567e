"""
MSL document container.

A Document owns the records parsed from one MSL text. The text can come from
a string, bytes, anything with a ``read()`` method, or a file on disk; the
whole text is read before parsing starts.

Example:

    from amdis.msl.document import Document

    doc = Document.from_path("library.msl")
    for record in doc:
        print(record.compound_name, record.cas_number)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional

import pandas as pd

from amdis.constants import DEFAULT_ENCODING
from amdis.msl.extractor import extract_records
from amdis.msl.records import Record
from amdis.utils.timer import measure_time

logger = logging.getLogger(__name__)

PostProcess = Callable[["Document"], None]

RECORD_COLUMNS = [
    "compound_id",
    "compound_name",
    "molecular_formula",
    "molecular_weight",
    "cas_number",
    "retention_index",
    "retention_time",
    "response_factor",
    "resolution",
    "comment",
    "peaks_count",
]

PEAK_COLUMNS = ["compound_id", "compound_name", "mass_to_charge_ratio", "height"]


def _read_text(source, encoding: str = DEFAULT_ENCODING) -> str:
    if hasattr(source, "read"):
        source = source.read()
    if isinstance(source, (bytes, bytearray)):
        return bytes(source).decode(encoding)
    return str(source)


class Document:
    """
    An MSL document: a read-only, ordered collection of records.

    Args:
        records: Parsed records, stored as a tuple
        post_process: Optional callable run once with the new document
    """

    def __init__(
        self,
        records: Iterable[Record] = (),
        post_process: Optional[PostProcess] = None,
    ):
        self._records = tuple(records)
        if post_process is not None:
            post_process(self)

    @property
    def records(self) -> tuple[Record, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __getitem__(self, index):
        return self._records[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._records)} records)"

    @classmethod
    def parse(
        cls,
        source,
        post_process: Optional[PostProcess] = None,
        encoding: str = DEFAULT_ENCODING,
    ) -> "Document":
        """
        Parse MSL text.

        Args:
            source: str, bytes, or an object with ``read()`` such as an open
                file or io.StringIO. Other objects are converted with str().
            post_process: Optional callable run once with the new document
            encoding: Used when the source yields bytes

        Returns:
            Document holding every record found, possibly none
        """
        text = _read_text(source, encoding)
        with measure_time("MSL parse", level=logging.DEBUG):
            records = extract_records(text)
        logger.info(f"{len(records)} MSL records parsed")
        return cls(records, post_process)

    @classmethod
    def from_path(
        cls,
        path: str | Path,
        post_process: Optional[PostProcess] = None,
        encoding: str = DEFAULT_ENCODING,
    ) -> "Document":
        """
        Read and parse an MSL file.

        Raises:
            FileNotFoundError: If ``path`` does not exist
        """
        path = Path(path).expanduser()
        if not path.exists():
            raise FileNotFoundError(path)

        logger.info(f"Reading MSL library {path.name}")
        with path.open("r", encoding=encoding) as fh:
            return cls.parse(fh, post_process, encoding)

    def to_dataframe(self) -> pd.DataFrame:
        """One row per record with the scalar fields; peaks are left out."""
        rows = [{col: getattr(r, col) for col in RECORD_COLUMNS} for r in self._records]
        return pd.DataFrame(rows, columns=RECORD_COLUMNS)

    def peaks_dataframe(self) -> pd.DataFrame:
        """Long-form peak table, one row per peak, records in document order."""
        rows = [
            (r.compound_id, r.compound_name, p.mass_to_charge_ratio, p.height)
            for r in self._records
            for p in r.peaks
        ]
        return pd.DataFrame(rows, columns=PEAK_COLUMNS)
