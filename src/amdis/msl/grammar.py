"""
Regular-expression grammar for AMDIS MSL documents.

Every pattern is defined twice: once as source text (the ``*_SOURCE``
constants, used to compose larger patterns) and once compiled (used for
matching and for testing each piece on its own). Higher-level patterns embed
the lower-level sources verbatim, so a number looks the same wherever a
number is expected.

Example record::

    NAME: [42] Glucose [180.0]
    FORM: C6H12O6
    MW: 180.16
    CASNO: 50997
    RI: 1893.2
    RT: 17.52
    RF: 1.0
    RSN: 0.5
    COMMENT: 5TMS derivative
    Num Peaks: 2
    (73 999) (204 640)
"""

from __future__ import annotations

import re
from typing import Iterable

# Unsigned integer, no leading zeros except the literal 0
INT_SOURCE = r"0|[1-9][0-9]*"

# Unsigned decimal, no exponent and no bare trailing dot
FLOAT_SOURCE = rf"(?:{INT_SOURCE})(?:{re.escape('.')}[0-9]+)?"

MOLECULAR_FORMULA_SOURCE = rf"(?:[A-Z][a-z]*(?:{INT_SOURCE})?)+"

PEAK_SOURCE = "".join([
    re.escape("("),
    r"\s*",
    "(", INT_SOURCE, ")",
    r"\s+",
    "(", INT_SOURCE, ")",
    r"\s*",
    re.escape(")"),
])

# Whitespace (newlines included) between adjacent record fields. Patterns are
# compiled with re.ASCII so \s means ASCII whitespace only.
FIELD_SEPARATOR = r"\s+"


def capture(name: str, source: str) -> str:
    """Wrap ``source`` in a named capture group."""
    return f"(?P<{name}>{source})"


def field(label: str, *parts: str, padding: str = r"\s*") -> str:
    """Build one labelled record field: the literal label, ``padding``, then ``parts``."""
    return "".join([re.escape(label), padding, *parts])


def until_next_record(quantifier: str) -> str:
    """Lazy run of any characters that never crosses whitespace followed by ``NAME:``."""
    return rf"(?:(?!\s{re.escape('NAME:')}).){quantifier}?"


def join_fields(fields: Iterable[str]) -> str:
    return FIELD_SEPARATOR.join(fields)


# The name and comment captures are lazy and stop at the next NAME: label, so a
# match never runs on into the next record in the buffer. The padding before
# the comment is lazy too, otherwise an empty comment takes the newline that
# has to separate it from "Num Peaks:".
RECORD_FIELDS = (
    field(
        "NAME:",
        re.escape("["),
        capture("compound_id", "[^" + re.escape("]") + "]+"),
        re.escape("]"),
        r"\s+",
        capture("compound_name", until_next_record("+")),
        r"\s+",
        re.escape("["),
        capture("name_weight", FLOAT_SOURCE),
        re.escape("]"),
    ),
    field("FORM:", capture("molecular_formula", MOLECULAR_FORMULA_SOURCE)),
    field("MW:", capture("molecular_weight", FLOAT_SOURCE)),
    field("CASNO:", capture("cas_number", f"(?:{INT_SOURCE}|0+)")),
    field("RI:", capture("retention_index", FLOAT_SOURCE)),
    field("RT:", capture("retention_time", FLOAT_SOURCE)),
    field("RF:", capture("response_factor", FLOAT_SOURCE)),
    field("RSN:", capture("resolution", FLOAT_SOURCE)),
    field("COMMENT:", capture("comment", until_next_record("*")), padding=r"\s*?"),
    field(
        "Num Peaks:",
        capture("peaks_count", INT_SOURCE),
        capture("peaks", rf"(?:\s*{PEAK_SOURCE})*"),
    ),
)

RECORD_SOURCE = join_fields(RECORD_FIELDS)

INT = re.compile(INT_SOURCE, re.ASCII)
FLOAT = re.compile(FLOAT_SOURCE, re.ASCII)
MOLECULAR_FORMULA = re.compile(MOLECULAR_FORMULA_SOURCE, re.ASCII)
PEAK = re.compile(PEAK_SOURCE, re.ASCII)
RECORD = re.compile(RECORD_SOURCE, re.DOTALL | re.ASCII)
