"""
Decode MSL text into Record objects.

The extractor is a permissive scan: text the record grammar does not
recognise is skipped, and nothing in here raises for malformed input.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from amdis.msl import grammar
from amdis.msl.records import Peak, Record

logger = logging.getLogger(__name__)

# Segments of 2-6, 2 and 1 digits, aligned from the right
CAS_NUMBER = re.compile(r"([0-9]{2,6})([0-9]{2})([0-9]{1})")

_INT_PREFIX = re.compile(r"\s*([-+]?[0-9]+)")


def to_int(text: str) -> int:
    """
    Numeric-prefix integer coercion.

    Leading whitespace and a sign are allowed; parsing stops at the first
    non-digit. Text without a leading number gives 0.
    """
    match = _INT_PREFIX.match(text)
    if match is None:
        return 0
    return int(match.group(1))


def hyphenate_cas_number(value) -> Optional[str]:
    """
    Hyphenate a Chemical Abstracts Service (CAS) registry number.

    A CAS number has three hyphen-separated segments of 2 to 6 digits,
    exactly 2 digits and exactly 1 digit. The last two segments have fixed
    length, so the digits are aligned from the right.

    Args:
        value: Integer, or anything ``int()`` accepts (e.g. "000000")

    Returns:
        Hyphenated string, or None when the number is zero, negative, has
        the wrong number of digits or cannot be read as an integer

    Examples:
        hyphenate_cas_number(-1) -> None
        hyphenate_cas_number(1118689) -> '1118-68-9'
    """
    try:
        i = int(value)
    except (TypeError, ValueError):
        return None
    if i <= 0:
        return None

    match = CAS_NUMBER.fullmatch(str(i))
    if match is None:
        return None
    return "-".join(match.groups())


def extract_peaks(text: str) -> List[Peak]:
    return [
        Peak(mass_to_charge_ratio=int(mz), height=int(height))
        for mz, height in grammar.PEAK.findall(text)
    ]


def decode_record(match: re.Match) -> Record:
    """Build a Record from one match of the record grammar."""
    cas_text = match.group("cas_number")
    cas_number = hyphenate_cas_number(cas_text)
    if cas_number is None:
        logger.debug(f"No usable CAS number in {cas_text!r} for {match.group('compound_name').strip()}")

    return Record(
        compound_id=to_int(match.group("compound_id")),
        compound_name=match.group("compound_name").strip(),
        molecular_formula=match.group("molecular_formula").strip(),
        molecular_weight=float(match.group("molecular_weight")),
        cas_number=cas_number,
        retention_index=float(match.group("retention_index")),
        retention_time=float(match.group("retention_time")),
        response_factor=float(match.group("response_factor")),
        resolution=float(match.group("resolution")),
        comment=match.group("comment").strip(),
        peaks_count=int(match.group("peaks_count")),
        peaks=tuple(extract_peaks(match.group("peaks"))),
    )


def extract_records(text: str) -> List[Record]:
    """
    Scan ``text`` for every MSL record, in source order.

    Args:
        text: Whole document contents

    Returns:
        List of records; empty when nothing in the text is recognised
    """
    return [decode_record(m) for m in grammar.RECORD.finditer(text)]
